"""Tool definitions attached to agents at creation time."""

import json
from typing import Any, Protocol

import structlog
from azure.ai.agents.models import (
    ConnectedAgentTool,
    OpenApiAnonymousAuthDetails,
    OpenApiTool,
    ToolDefinition,
)

from fashion_assistant.core.agents.definition import (
    CART_MANAGER,
    CONTENT_MODERATOR,
    FASHION_ADVISOR,
    AgentDefinition,
    AgentRole,
)
from fashion_assistant.core.errors import ToolConstructionFailed

logger = structlog.get_logger(__name__)

STORE_API_TOOL_NAME = "fashion_store_api"
STORE_API_TOOL_DESCRIPTION = "API for managing fashion store inventory and shopping cart operations"

# Invocation name the orchestrator uses for each specialist
CONNECTED_AGENTS: dict[AgentRole, tuple[str, AgentDefinition]] = {
    AgentRole.CART_MANAGER: ("cart_manager", CART_MANAGER),
    AgentRole.FASHION_ADVISOR: ("fashion_advisor", FASHION_ADVISOR),
    AgentRole.CONTENT_MODERATOR: ("content_moderator", CONTENT_MODERATOR),
}


class AgentHandle(Protocol):
    """Anything returned by the agent service that carries an id."""

    id: str


def build_connected_agent_tool(handle: AgentHandle, role: AgentRole) -> list[ToolDefinition]:
    """Build the tool definitions that let another agent delegate to ``handle``."""
    invocation_name, definition = CONNECTED_AGENTS[role]
    tool = ConnectedAgentTool(
        id=handle.id,
        name=invocation_name,
        description=definition.connected_agent_description,
    )
    return list(tool.definitions)


def build_store_api_tool(spec_text: str) -> list[ToolDefinition]:
    """Build the anonymous OpenAPI tool for the store API from a patched spec.

    Raises ToolConstructionFailed if the document is not valid JSON or the
    SDK rejects it.
    """
    try:
        spec: dict[str, Any] = json.loads(spec_text)
        tool = OpenApiTool(
            name=STORE_API_TOOL_NAME,
            description=STORE_API_TOOL_DESCRIPTION,
            spec=spec,
            auth=OpenApiAnonymousAuthDetails(),
        )
        definitions = list(tool.definitions)
    except Exception as e:
        raise ToolConstructionFailed(
            f"OpenAPI tool creation failed: {e}",
            details={"tool_name": STORE_API_TOOL_NAME},
        ) from e

    logger.info("OpenAPI tool created", tool_name=STORE_API_TOOL_NAME)
    return definitions
