"""Unit tests for the agent definition registry."""

import pytest
from pydantic import ValidationError

from fashion_assistant.core.agents import (
    AGENT_DEFINITIONS,
    CART_MANAGER,
    AgentDefinition,
    AgentRole,
    get_definition,
)


class TestAgentDefinitions:
    """Tests for the static agent definitions."""

    def test_every_role_has_a_definition(self) -> None:
        assert set(AGENT_DEFINITIONS) == set(AgentRole)
        for definition in AGENT_DEFINITIONS.values():
            assert definition.name
            assert definition.description
            assert definition.instructions

    def test_specialists_have_connected_agent_descriptions(self) -> None:
        for role in (AgentRole.CART_MANAGER, AgentRole.FASHION_ADVISOR, AgentRole.CONTENT_MODERATOR):
            definition = get_definition(role)
            assert definition.connected_agent_description
            assert definition.connected_agent_description != definition.description

    def test_names_are_unique(self) -> None:
        names = [d.name for d in AGENT_DEFINITIONS.values()]
        assert len(names) == len(set(names))

    def test_get_definition_accepts_role_value(self) -> None:
        assert get_definition("cart_manager") is CART_MANAGER

    def test_definitions_are_immutable(self) -> None:
        with pytest.raises(ValidationError):
            CART_MANAGER.name = "Renamed"  # type: ignore[misc]

    def test_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            AGENT_DEFINITIONS[AgentRole.ORCHESTRATOR] = AgentDefinition(  # type: ignore[index]
                name="Other", description="d", instructions="i"
            )
