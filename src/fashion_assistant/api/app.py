"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fashion_assistant import __version__
from fashion_assistant.api.middleware.error_handler import error_handler_middleware
from fashion_assistant.api.routes import agents, health
from fashion_assistant.config import Settings, get_settings
from fashion_assistant.infrastructure.observability.logging import setup_logging
from fashion_assistant.infrastructure.observability.telemetry import setup_telemetry


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    app.state.http_client = httpx.AsyncClient()

    yield

    await app.state.http_client.aclose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = get_settings()

    setup_logging(settings.telemetry)
    if settings.telemetry.enabled:
        setup_telemetry(settings.telemetry)

    app = FastAPI(
        title="Fashion Assistant Provisioning API",
        description="Provisions the fashion store's orchestrator and specialist agents",
        version=__version__,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.provisioning = agents.ProvisioningState()

    _add_middleware(app, settings)
    _include_routers(app)

    return app


def _add_middleware(app: FastAPI, settings: Settings) -> None:
    """Add middleware to the application."""
    # Error handler middleware (should be first)
    app.middleware("http")(error_handler_middleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include API routers."""
    app.include_router(health.router, tags=["Health"])
    app.include_router(agents.router, prefix="/api/v1/agents", tags=["Agents"])
