"""Remote agent service integration."""

from fashion_assistant.infrastructure.agent_service.client import (
    AgentServiceClient,
    agents_client,
)

__all__ = ["AgentServiceClient", "agents_client"]
