"""FastAPI dependency injection."""

from collections.abc import AsyncGenerator
from typing import Annotated

import httpx
from fastapi import Depends, Request

from fashion_assistant.config import Settings
from fashion_assistant.infrastructure.agent_service.client import (
    AgentServiceClient,
    agents_client,
)


def get_settings_dep(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_settings_dep)]


async def get_agent_service(settings: SettingsDep) -> AsyncGenerator[AgentServiceClient, None]:
    """Open an agent service client for the duration of the request."""
    async with agents_client(settings.agent_service) as client:
        yield client


AgentServiceDep = Annotated[AgentServiceClient, Depends(get_agent_service)]


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """Get the shared HTTP client from app state."""
    return request.app.state.http_client


HTTPClientDep = Annotated[httpx.AsyncClient, Depends(get_http_client)]
