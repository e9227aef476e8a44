"""Errors raised while provisioning agents."""

from pathlib import Path
from typing import Any


class ProvisioningError(Exception):
    """Base exception for provisioning failures."""

    error_code = "PROVISIONING_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ProvisioningError):
    """Required configuration is missing."""

    error_code = "CONFIGURATION_ERROR"


class SpecNotFound(ProvisioningError):
    """The API specification document is not at any of the checked paths."""

    error_code = "SPEC_NOT_FOUND"

    def __init__(self, checked_paths: list[Path]) -> None:
        paths = [str(p) for p in checked_paths]
        super().__init__(
            message=f"API specification not found, checked: {' and '.join(paths)}",
            details={"checked_paths": paths},
        )
        self.checked_paths = checked_paths


class PlaceholderSubstitutionFailed(ProvisioningError):
    """The server URL placeholder survived substitution."""

    error_code = "PLACEHOLDER_SUBSTITUTION_FAILED"

    def __init__(self, placeholder: str, path: Path) -> None:
        super().__init__(
            message=f"Placeholder {placeholder} still present after replacement in {path}",
            details={"placeholder": placeholder, "path": str(path)},
        )


class ProbeFailed(ProvisioningError):
    """The cart API did not answer the connectivity probe with a 2xx."""

    error_code = "PROBE_FAILED"

    def __init__(
        self,
        url: str,
        reason: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        status = f"{status_code} - " if status_code is not None else ""
        super().__init__(
            message=f"Cart API test failed at {url}: {status}{reason}, Response: {body or ''}",
            details={
                "url": url,
                "status_code": status_code,
                "reason": reason,
                "body": body,
            },
        )
        self.url = url
        self.status_code = status_code
        self.reason = reason
        self.body = body


class ToolConstructionFailed(ProvisioningError):
    """A tool definition could not be built."""

    error_code = "TOOL_CONSTRUCTION_FAILED"


class AgentCreationFailed(ProvisioningError):
    """The remote agent service did not create the agent."""

    error_code = "AGENT_CREATION_FAILED"

    def __init__(self, agent_name: str, reason: str) -> None:
        super().__init__(
            message=f"Failed to create agent {agent_name}: {reason}",
            details={"agent_name": agent_name, "reason": reason},
        )
        self.agent_name = agent_name
        self.reason = reason
