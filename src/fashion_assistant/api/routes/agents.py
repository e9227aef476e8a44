"""Agent provisioning endpoints."""

import asyncio
from urllib.parse import urlparse

from fastapi import APIRouter, Request
from pydantic import BaseModel

from fashion_assistant.api.dependencies import AgentServiceDep, HTTPClientDep, SettingsDep
from fashion_assistant.api.middleware.error_handler import ConflictError, NotFoundError
from fashion_assistant.config import APISettings
from fashion_assistant.core.agents.definition import get_definition
from fashion_assistant.core.errors import ConfigurationError
from fashion_assistant.core.provisioning import (
    ProvisionedAgents,
    ProvisioningContext,
    provision_agents,
)

router = APIRouter()


class ProvisioningState:
    """Result of the single provisioning run this process is allowed."""

    def __init__(self) -> None:
        self.lock = asyncio.Lock()
        self.result: ProvisionedAgents | None = None


class AgentSummary(BaseModel):
    """One provisioned agent."""

    role: str
    name: str
    agent_id: str | None
    created: bool
    error_code: str | None = None
    error: str | None = None


class ProvisioningResponse(BaseModel):
    """Response for a provisioning run."""

    run_id: str
    server_url: str
    complete: bool
    agents: list[AgentSummary]


def _to_response(provisioned: ProvisionedAgents) -> ProvisioningResponse:
    return ProvisioningResponse(
        run_id=provisioned.run_id,
        server_url=provisioned.server_url,
        complete=provisioned.is_complete,
        agents=[
            AgentSummary(
                role=role.value,
                name=get_definition(role).name,
                agent_id=result.agent_id,
                created=result.ok,
                error_code=result.error.error_code if result.error else None,
                error=result.error.message if result.error else None,
            )
            for role, result in provisioned.results.items()
        ],
    )


LOCAL_HOSTS = {"localhost", "127.0.0.1", "0.0.0.0", "::1"}


def _targets_self(server_url: str, api: APISettings) -> bool:
    """Whether the cart API URL points back at this provisioning server."""
    parsed = urlparse(server_url)
    port = parsed.port or (443 if parsed.scheme == "https" else 80)
    hosts = LOCAL_HOSTS | {api.host}
    return parsed.hostname in hosts and port == api.port


@router.post("/provision", response_model=ProvisioningResponse, status_code=201)
async def provision(
    request: Request,
    settings: SettingsDep,
    agent_service: AgentServiceDep,
    http_client: HTTPClientDep,
) -> ProvisioningResponse:
    """
    Create the store's agents on the agent service.

    Runs at most once per process. A fatal cart manager failure is returned
    as a 503 and can be retried after fixing the deployment.
    """
    state: ProvisioningState = request.app.state.provisioning
    async with state.lock:
        if state.result is not None:
            raise ConflictError(f"Agents already provisioned in run {state.result.run_id}")

        context = ProvisioningContext.from_settings(settings)
        if _targets_self(context.server_url, settings.api):
            raise ConfigurationError(
                f"Cart API URL {context.server_url} points at this provisioning server, "
                "set SERVER_URL to the store app",
                details={"server_url": context.server_url, "api_port": settings.api.port},
            )
        state.result = await provision_agents(agent_service, context, http_client=http_client)

    return _to_response(state.result)


@router.get("", response_model=ProvisioningResponse)
async def list_agents(request: Request) -> ProvisioningResponse:
    """
    List the agents created by the provisioning run.
    """
    state: ProvisioningState = request.app.state.provisioning
    if state.result is None:
        raise NotFoundError("Provisioning run", "current")
    return _to_response(state.result)
