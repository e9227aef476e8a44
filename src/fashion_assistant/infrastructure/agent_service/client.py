"""Azure AI Agents service client."""

from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from typing import Any, Protocol

import structlog
from azure.ai.agents.aio import AgentsClient
from azure.ai.agents.models import ToolDefinition
from azure.identity.aio import DefaultAzureCredential

from fashion_assistant.config import AgentServiceSettings
from fashion_assistant.core.errors import ConfigurationError

logger = structlog.get_logger(__name__)


class AgentServiceClient(Protocol):
    """The subset of the agents client used for provisioning."""

    async def create_agent(
        self,
        *,
        model: str,
        name: str | None = None,
        description: str | None = None,
        instructions: str | None = None,
        tools: Sequence[ToolDefinition] | None = None,
        **kwargs: Any,
    ) -> Any:
        """Create an agent and return it; the result exposes ``id``."""
        ...

    async def delete_agent(self, agent_id: str, **kwargs: Any) -> Any:
        """Delete an agent by id."""
        ...


@asynccontextmanager
async def agents_client(settings: AgentServiceSettings) -> AsyncGenerator[AgentsClient, None]:
    """Open an AgentsClient for the configured project and close it afterwards."""
    if not settings.project_endpoint:
        raise ConfigurationError(
            "AZURE_AI_PROJECT_ENDPOINT is not configured",
            details={"setting": "AZURE_AI_PROJECT_ENDPOINT"},
        )

    logger.info("Connecting to agent service", endpoint=settings.project_endpoint)
    async with DefaultAzureCredential() as credential:
        async with AgentsClient(
            endpoint=settings.project_endpoint,
            credential=credential,
        ) as client:
            yield client
