"""Factories that turn agent definitions into agents on the remote service."""

from collections.abc import Sequence
from typing import Any

import httpx
import structlog
from azure.ai.agents.models import ToolDefinition
from prometheus_client import Counter
from pydantic import BaseModel, ConfigDict

from fashion_assistant.core.agents.definition import AgentRole, get_definition
from fashion_assistant.core.agents.tools import build_connected_agent_tool, build_store_api_tool
from fashion_assistant.core.errors import AgentCreationFailed, ProvisioningError
from fashion_assistant.core.provisioning.context import ProvisioningContext
from fashion_assistant.core.provisioning.openapi_spec import load_and_patch_spec
from fashion_assistant.core.provisioning.probe import probe_cart_api
from fashion_assistant.infrastructure.agent_service.client import AgentServiceClient
from fashion_assistant.infrastructure.observability.telemetry import (
    ProvisioningSpanAttributes,
    get_tracer,
)

logger = structlog.get_logger(__name__)
tracer = get_tracer(__name__)

AGENTS_PROVISIONED = Counter(
    "fashion_assistant_agents_provisioned_total",
    "Agent creation attempts by role and outcome",
    ["role", "outcome"],
)


class AgentResult(BaseModel):
    """Outcome of one factory call.

    ``fatal`` marks failures that must abort the whole provisioning run;
    other failures leave it to the caller to go on without the agent.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    role: AgentRole
    handle: Any = None
    error: ProvisioningError | None = None
    fatal: bool = False

    @property
    def ok(self) -> bool:
        return self.handle is not None

    @property
    def agent_id(self) -> str | None:
        return self.handle.id if self.handle is not None else None

    def unwrap(self) -> Any:
        """Return the handle or raise the recorded error."""
        if self.handle is None:
            raise self.error or AgentCreationFailed(get_definition(self.role).name, "no agent")
        return self.handle


def tool_names(tools: Sequence[ToolDefinition]) -> list[str]:
    """Names of the tools in a creation request, falling back to the tool type."""
    names = []
    for tool in tools:
        details = getattr(tool, "connected_agent", None) or getattr(tool, "openapi", None)
        names.append(details.name if details is not None else tool.type)
    return names


async def create_agent_with_error_handling(
    client: AgentServiceClient,
    context: ProvisioningContext,
    role: AgentRole,
    tools: Sequence[ToolDefinition] | None = None,
) -> AgentResult:
    """Create the agent for ``role``, logging and capturing any failure."""
    definition = get_definition(role)
    with tracer.start_as_current_span("create_agent") as span:
        span.set_attribute(ProvisioningSpanAttributes.AGENT_ROLE, role.value)
        span.set_attribute(ProvisioningSpanAttributes.AGENT_NAME, definition.name)
        if tools:
            span.set_attribute(ProvisioningSpanAttributes.TOOL_NAME, tool_names(tools))

        try:
            agent = await client.create_agent(
                model=context.model,
                name=definition.name,
                description=definition.description,
                instructions=definition.instructions,
                tools=list(tools) if tools is not None else None,
            )
        except Exception as e:
            logger.exception("Failed to create agent", agent_name=definition.name, role=role.value)
            AGENTS_PROVISIONED.labels(role=role.value, outcome="failed").inc()
            return AgentResult(role=role, error=AgentCreationFailed(definition.name, str(e)))

        if agent is None:
            logger.error("Agent service returned no agent", agent_name=definition.name)
            AGENTS_PROVISIONED.labels(role=role.value, outcome="failed").inc()
            return AgentResult(
                role=role,
                error=AgentCreationFailed(definition.name, "agent service returned no agent"),
            )

        span.set_attribute(ProvisioningSpanAttributes.AGENT_ID, agent.id)
        logger.info("Successfully created agent", agent_name=definition.name, agent_id=agent.id)
        AGENTS_PROVISIONED.labels(role=role.value, outcome="created").inc()
        return AgentResult(role=role, handle=agent)


async def create_orchestrator_agent(
    client: AgentServiceClient, context: ProvisioningContext
) -> AgentResult:
    """Create the orchestrator without any connected agents."""
    return await create_agent_with_error_handling(client, context, AgentRole.ORCHESTRATOR)


async def create_fashion_advisor_agent(
    client: AgentServiceClient, context: ProvisioningContext
) -> AgentResult:
    return await create_agent_with_error_handling(client, context, AgentRole.FASHION_ADVISOR)


async def create_content_moderator_agent(
    client: AgentServiceClient, context: ProvisioningContext
) -> AgentResult:
    return await create_agent_with_error_handling(client, context, AgentRole.CONTENT_MODERATOR)


async def create_cart_manager_agent(
    client: AgentServiceClient,
    context: ProvisioningContext,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> AgentResult:
    """Create the cart manager with the store API attached as an OpenAPI tool.

    Every failure is fatal. The spec is loaded and patched, the cart API is
    probed and the tool is built before the agent service is called, so a
    broken deployment never yields an agent without a working tool.
    """
    log = logger.bind(role=AgentRole.CART_MANAGER.value)
    log.info("Step 1 - server URL", server_url=context.server_url)

    try:
        spec_text = load_and_patch_spec(context.server_url, list(context.spec_paths))
        log.info("Step 2 - API specification loaded", length=len(spec_text))

        await probe_cart_api(context.server_url, timeout=context.probe_timeout, client=http_client)
        log.info("Step 3 - cart API reachable")

        tools = build_store_api_tool(spec_text)
        log.info("Step 4 - OpenAPI tool created")
    except ProvisioningError as e:
        log.error("Cart agent creation failed", error_code=e.error_code, error=e.message)
        AGENTS_PROVISIONED.labels(role=AgentRole.CART_MANAGER.value, outcome="failed").inc()
        return AgentResult(role=AgentRole.CART_MANAGER, error=e, fatal=True)

    result = await create_agent_with_error_handling(client, context, AgentRole.CART_MANAGER, tools)
    if not result.ok:
        log.error("Cart agent creation failed", error=result.error.message if result.error else None)
        return result.model_copy(update={"fatal": True})

    log.info("Cart agent created with OpenAPI tool", agent_id=result.agent_id)
    return result


async def create_orchestrator_with_connected_agents(
    client: AgentServiceClient,
    context: ProvisioningContext,
    cart_manager: Any,
    fashion_advisor: Any,
    content_moderator: Any,
) -> AgentResult:
    """Create the orchestrator with the three specialists attached as connected agents.

    The handles must not be None. A failure here is not fatal.
    """
    tools: list[ToolDefinition] = [
        *build_connected_agent_tool(cart_manager, AgentRole.CART_MANAGER),
        *build_connected_agent_tool(fashion_advisor, AgentRole.FASHION_ADVISOR),
        *build_connected_agent_tool(content_moderator, AgentRole.CONTENT_MODERATOR),
    ]

    result = await create_agent_with_error_handling(client, context, AgentRole.ORCHESTRATOR, tools)
    if result.ok:
        logger.info(
            "Successfully created orchestrator agent",
            agent_id=result.agent_id,
            connected_agent_count=len(tools),
        )
    return result
