"""OpenTelemetry setup and configuration."""

import structlog
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from fashion_assistant.config import TelemetrySettings

logger = structlog.get_logger(__name__)


def setup_telemetry(settings: TelemetrySettings) -> None:
    """Setup OpenTelemetry tracing."""
    if not settings.enabled:
        logger.info("Telemetry disabled")
        return

    logger.info(
        "Setting up OpenTelemetry",
        service_name=settings.service_name,
        endpoint=settings.exporter_otlp_endpoint,
    )

    resource = Resource(attributes={SERVICE_NAME: settings.service_name})
    provider = TracerProvider(resource=resource)
    otlp_exporter = OTLPSpanExporter(
        endpoint=settings.exporter_otlp_endpoint,
        insecure=settings.exporter_otlp_insecure,
    )
    provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
    trace.set_tracer_provider(provider)

    FastAPIInstrumentor().instrument()

    # Covers the cart API connectivity probe
    HTTPXClientInstrumentor().instrument()

    logger.info("OpenTelemetry setup complete")


def get_tracer(name: str) -> trace.Tracer:
    """Get a tracer for a module."""
    return trace.get_tracer(name)


class ProvisioningSpanAttributes:
    """Span attribute names used around agent provisioning."""

    AGENT_ID = "agent.id"
    AGENT_NAME = "agent.name"
    AGENT_ROLE = "agent.role"
    MODEL = "gen_ai.request.model"
    SERVER_URL = "provisioning.server_url"
    TOOL_NAME = "tool.name"
