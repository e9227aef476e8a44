"""Pytest fixtures for fashion assistant tests."""

from collections.abc import Callable, Generator
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from fashion_assistant.api.app import create_app
from fashion_assistant.api.dependencies import get_agent_service, get_http_client
from fashion_assistant.config import (
    HostingSettings,
    ProvisioningSettings,
    Settings,
    TelemetrySettings,
)
from fashion_assistant.core.provisioning import SERVER_URL_PLACEHOLDER, ProvisioningContext

SERVER_URL = "https://fashion-store.azurewebsites.net"

SAMPLE_SPEC = (
    '{"openapi": "3.0.4", "info": {"title": "Fashion Store API", "version": "v1"}, '
    '"servers": [{"url": "' + SERVER_URL_PLACEHOLDER + '"}], '
    '"paths": {"/api/Cart": {"get": {"operationId": "getCart", '
    '"responses": {"200": {"description": "Cart contents"}}}}}}'
)


class StubAgentService:
    """Records create_agent requests and hands back fake agents."""

    def __init__(self, fail_for: set[str] | None = None, return_none_for: set[str] | None = None) -> None:
        self.fail_for = fail_for or set()
        self.return_none_for = return_none_for or set()
        self.calls: list[dict[str, Any]] = []
        self.deleted: list[str] = []

    async def create_agent(
        self,
        *,
        model: str,
        name: str | None = None,
        description: str | None = None,
        instructions: str | None = None,
        tools: list[Any] | None = None,
        **kwargs: Any,
    ) -> Any:
        self.calls.append(
            {
                "model": model,
                "name": name,
                "description": description,
                "instructions": instructions,
                "tools": tools,
            }
        )
        if name in self.fail_for:
            raise RuntimeError("service unavailable")
        if name in self.return_none_for:
            return None
        return SimpleNamespace(id=f"asst_{len(self.calls)}", name=name)

    async def delete_agent(self, agent_id: str, **kwargs: Any) -> None:
        self.deleted.append(agent_id)

    def call_for(self, name: str) -> dict[str, Any]:
        return next(call for call in self.calls if call["name"] == name)


def mock_http_client(status_code: int = 200, body: str = '{"items": [], "totalCost": 0}') -> httpx.AsyncClient:
    """An httpx client whose every request gets the given response."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code, text=body)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client.requests = requests  # type: ignore[attr-defined]
    return client


@pytest.fixture
def agent_service() -> StubAgentService:
    return StubAgentService()


@pytest.fixture
def spec_file(tmp_path: Path) -> Path:
    path = tmp_path / "swagger.json"
    path.write_text(SAMPLE_SPEC, encoding="utf-8")
    return path


@pytest.fixture
def provisioning_context(spec_file: Path, tmp_path: Path) -> ProvisioningContext:
    return ProvisioningContext(
        model="gpt-4o",
        server_url=SERVER_URL,
        spec_paths=(spec_file, tmp_path / "alt" / "swagger.json"),
        probe_timeout=10.0,
    )


@pytest.fixture
def make_hosting() -> Callable[..., HostingSettings]:
    """Hosting settings with every signal unset unless given."""

    def factory(**overrides: Any) -> HostingSettings:
        values: dict[str, Any] = {
            "website_hostname": None,
            "server_url": None,
            "website_site_name": None,
            "website_default_hostname": None,
        }
        values.update(overrides)
        return HostingSettings(**values)

    return factory


@pytest.fixture
def test_settings(spec_file: Path, make_hosting: Callable[..., HostingSettings]) -> Settings:
    """Create test settings."""
    return Settings(
        environment="development",
        hosting=make_hosting(server_url="localhost:5000"),
        provisioning=ProvisioningSettings(spec_path=spec_file),
        telemetry=TelemetrySettings(enabled=False),
    )


@pytest.fixture
def app(test_settings: Settings, agent_service: StubAgentService) -> Any:
    """Create test FastAPI application with the agent service stubbed out."""
    app = create_app(test_settings)
    app.dependency_overrides[get_agent_service] = lambda: agent_service
    app.dependency_overrides[get_http_client] = lambda: mock_http_client()
    return app


@pytest.fixture
def client(app: Any) -> Generator[TestClient, None, None]:
    """Create synchronous test client."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_agent_service() -> Callable[..., StubAgentService]:
    return StubAgentService


@pytest.fixture
def make_http_client() -> Callable[..., httpx.AsyncClient]:
    return mock_http_client


@pytest.fixture
def server_url() -> str:
    return SERVER_URL
