"""Agent provisioning workflow."""

from fashion_assistant.core.provisioning.context import ProvisioningContext
from fashion_assistant.core.provisioning.factories import (
    AgentResult,
    create_agent_with_error_handling,
    create_cart_manager_agent,
    create_content_moderator_agent,
    create_fashion_advisor_agent,
    create_orchestrator_agent,
    create_orchestrator_with_connected_agents,
)
from fashion_assistant.core.provisioning.openapi_spec import (
    SERVER_URL_PLACEHOLDER,
    default_spec_paths,
    load_and_patch_spec,
)
from fashion_assistant.core.provisioning.probe import probe_cart_api
from fashion_assistant.core.provisioning.server_url import resolve_server_url
from fashion_assistant.core.provisioning.workflow import ProvisionedAgents, provision_agents

__all__ = [
    "AgentResult",
    "ProvisionedAgents",
    "ProvisioningContext",
    "SERVER_URL_PLACEHOLDER",
    "create_agent_with_error_handling",
    "create_cart_manager_agent",
    "create_content_moderator_agent",
    "create_fashion_advisor_agent",
    "create_orchestrator_agent",
    "create_orchestrator_with_connected_agents",
    "default_spec_paths",
    "load_and_patch_spec",
    "probe_cart_api",
    "resolve_server_url",
    "provision_agents",
]
