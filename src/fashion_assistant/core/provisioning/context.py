"""Values resolved once per provisioning run."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from fashion_assistant.config import Settings
from fashion_assistant.core.provisioning.openapi_spec import default_spec_paths
from fashion_assistant.core.provisioning.probe import DEFAULT_PROBE_TIMEOUT
from fashion_assistant.core.provisioning.server_url import resolve_server_url


class ProvisioningContext(BaseModel):
    """Model name, server URL and spec locations shared by every factory call."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model: str = "gpt-4o"
    server_url: str
    spec_paths: tuple[Path, ...] = Field(default_factory=tuple)
    probe_timeout: float = Field(default=DEFAULT_PROBE_TIMEOUT, gt=0)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProvisioningContext":
        return cls(
            model=settings.model.model_deployment_name,
            server_url=resolve_server_url(settings.hosting),
            spec_paths=tuple(default_spec_paths(settings.provisioning)),
            probe_timeout=settings.provisioning.probe_timeout,
        )
