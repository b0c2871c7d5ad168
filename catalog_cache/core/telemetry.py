"""
Catalog Cache OpenTelemetry Setup

Installs a tracer provider for the cache spans emitted by the decorator and
the cache stores. Without ``configure_telemetry`` the spans go to the
OpenTelemetry API's no-op provider.
"""

import logging
from typing import Optional

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from ..constants import APP_VERSION
from .config import Settings

logger = logging.getLogger(__name__)


def configure_telemetry(settings: Settings) -> Optional[TracerProvider]:
    """
    Install the SDK tracer provider when telemetry is enabled.

    Args:
        settings: Application settings

    Returns:
        The installed provider, or None when OTEL_ENABLED is false
    """
    if not settings.OTEL_ENABLED:
        logger.debug("OpenTelemetry export disabled")
        return None

    resource = Resource.create(
        {
            SERVICE_NAME: settings.OTEL_SERVICE_NAME,
            SERVICE_VERSION: APP_VERSION,
            "deployment.environment": settings.ENVIRONMENT,
        }
    )
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(
        BatchSpanProcessor(
            OTLPSpanExporter(endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT)
        )
    )
    trace.set_tracer_provider(provider)

    logger.info(
        "OpenTelemetry tracing configured",
        extra={
            "service_name": settings.OTEL_SERVICE_NAME,
            "endpoint": settings.OTEL_EXPORTER_OTLP_ENDPOINT,
        },
    )
    return provider
