"""Agent definitions and tool builders."""

from fashion_assistant.core.agents.definition import (
    AGENT_DEFINITIONS,
    CART_MANAGER,
    CONTENT_MODERATOR,
    FASHION_ADVISOR,
    ORCHESTRATOR,
    AgentDefinition,
    AgentRole,
    get_definition,
)

__all__ = [
    "AGENT_DEFINITIONS",
    "AgentDefinition",
    "AgentRole",
    "CART_MANAGER",
    "CONTENT_MODERATOR",
    "FASHION_ADVISOR",
    "ORCHESTRATOR",
    "get_definition",
]
