"""The one-shot provisioning run that creates and wires every agent."""

from uuid import uuid4

import httpx
import structlog
from pydantic import BaseModel, ConfigDict

from fashion_assistant.core.agents.definition import ORCHESTRATOR, AgentRole
from fashion_assistant.core.errors import AgentCreationFailed
from fashion_assistant.core.provisioning.context import ProvisioningContext
from fashion_assistant.core.provisioning.factories import (
    AgentResult,
    create_cart_manager_agent,
    create_content_moderator_agent,
    create_fashion_advisor_agent,
    create_orchestrator_with_connected_agents,
)
from fashion_assistant.infrastructure.agent_service.client import AgentServiceClient
from fashion_assistant.infrastructure.observability.logging import bind_context, clear_context
from fashion_assistant.infrastructure.observability.telemetry import (
    ProvisioningSpanAttributes,
    get_tracer,
)

logger = structlog.get_logger(__name__)
tracer = get_tracer(__name__)

SPECIALIST_ROLES = (
    AgentRole.CART_MANAGER,
    AgentRole.FASHION_ADVISOR,
    AgentRole.CONTENT_MODERATOR,
)


class ProvisionedAgents(BaseModel):
    """Per-role results of a provisioning run."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    run_id: str
    server_url: str
    results: dict[AgentRole, AgentResult]

    @property
    def orchestrator(self) -> AgentResult:
        return self.results[AgentRole.ORCHESTRATOR]

    @property
    def is_complete(self) -> bool:
        return all(result.ok for result in self.results.values())

    def created_ids(self) -> dict[AgentRole, str]:
        return {
            role: result.agent_id
            for role, result in self.results.items()
            if result.agent_id is not None
        }


async def provision_agents(
    client: AgentServiceClient,
    context: ProvisioningContext,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> ProvisionedAgents:
    """Create the specialists, then the orchestrator connected to them.

    A fatal cart manager failure is raised and nothing else is created.
    Other failures are recorded in the returned results; the orchestrator
    is only created when all three specialists exist. Agents created before
    a failure are not deleted.
    """
    run_id = uuid4().hex[:12]
    bind_context(provisioning_run=run_id)
    try:
        with tracer.start_as_current_span("provision_agents") as span:
            span.set_attribute(ProvisioningSpanAttributes.MODEL, context.model)
            span.set_attribute(ProvisioningSpanAttributes.SERVER_URL, context.server_url)
            logger.info("Provisioning agents", model=context.model, server_url=context.server_url)

            results: dict[AgentRole, AgentResult] = {}

            cart = await create_cart_manager_agent(client, context, http_client=http_client)
            if cart.fatal:
                logger.error("Provisioning aborted", role=cart.role.value)
                cart.unwrap()
            results[AgentRole.CART_MANAGER] = cart

            results[AgentRole.FASHION_ADVISOR] = await create_fashion_advisor_agent(client, context)
            results[AgentRole.CONTENT_MODERATOR] = await create_content_moderator_agent(
                client, context
            )

            missing = [role.value for role in SPECIALIST_ROLES if not results[role].ok]
            if missing:
                logger.warning("Skipping orchestrator, specialists missing", missing=missing)
                results[AgentRole.ORCHESTRATOR] = AgentResult(
                    role=AgentRole.ORCHESTRATOR,
                    error=AgentCreationFailed(
                        ORCHESTRATOR.name,
                        f"specialist agents not available: {', '.join(missing)}",
                    ),
                )
            else:
                results[AgentRole.ORCHESTRATOR] = await create_orchestrator_with_connected_agents(
                    client,
                    context,
                    results[AgentRole.CART_MANAGER].handle,
                    results[AgentRole.FASHION_ADVISOR].handle,
                    results[AgentRole.CONTENT_MODERATOR].handle,
                )

            provisioned = ProvisionedAgents(
                run_id=run_id,
                server_url=context.server_url,
                results=results,
            )
            if provisioned.orchestrator.ok:
                span.set_attribute(
                    ProvisioningSpanAttributes.AGENT_ID, provisioned.orchestrator.agent_id
                )
            logger.info(
                "Provisioning finished",
                complete=provisioned.is_complete,
                agents={role.value: agent_id for role, agent_id in provisioned.created_ids().items()},
            )
            return provisioned
    finally:
        clear_context()
