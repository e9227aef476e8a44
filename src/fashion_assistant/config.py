"""Configuration management using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AgentServiceSettings(BaseSettings):
    """Azure AI Agents service configuration."""

    model_config = SettingsConfigDict(env_prefix="AZURE_AI_")

    project_endpoint: str | None = None


class ModelSettings(BaseSettings):
    """Model deployment used for every provisioned agent."""

    model_config = SettingsConfigDict(env_prefix="AI_", protected_namespaces=())

    model_deployment_name: str = "gpt-4o"


class HostingSettings(BaseSettings):
    """Signals used to work out the externally reachable address of this app.

    The ``WEBSITE_*`` variables are the ones Azure App Service injects.
    """

    model_config = SettingsConfigDict(env_prefix="")

    website_hostname: str | None = None
    server_url: str | None = None
    website_site_name: str | None = None
    website_default_hostname: str | None = None
    cloud_domain: str = "azurewebsites.net"


class ProvisioningSettings(BaseSettings):
    """Agent provisioning configuration."""

    model_config = SettingsConfigDict(env_prefix="PROVISIONING_")

    spec_path: Path | None = None
    spec_filename: str = "swagger.json"
    probe_timeout: float = Field(default=10.0, gt=0)


class TelemetrySettings(BaseSettings):
    """OpenTelemetry configuration."""

    model_config = SettingsConfigDict(env_prefix="OTEL_")

    enabled: bool = False
    service_name: str = "fashion-assistant"
    exporter_otlp_endpoint: str = "http://localhost:4317"
    exporter_otlp_insecure: bool = True
    log_level: str = "INFO"


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = Field(default=["*"])

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        if isinstance(v, str):
            return [s.strip() for s in v.split(",")]
        return v


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Literal["development", "staging", "production"] = "development"

    # Sub-settings
    agent_service: AgentServiceSettings = Field(default_factory=AgentServiceSettings)
    model: ModelSettings = Field(default_factory=ModelSettings)
    hosting: HostingSettings = Field(default_factory=HostingSettings)
    provisioning: ProvisioningSettings = Field(default_factory=ProvisioningSettings)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)
    api: APISettings = Field(default_factory=APISettings)

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
