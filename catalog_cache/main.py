"""
Catalog Cache - FastAPI Application

Administration API for the catalog cache: region reset, store metrics and
store health. The caching decorator itself is composed by the host process
and handed to ``create_app``.
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI

from .api.endpoints.cache import router as cache_router
from .constants import APP_NAME, APP_VERSION
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .core.telemetry import configure_telemetry
from .monitoring.cache_metrics import CacheMetricsExporter
from .services.cache.catalog_services_decorator import CatalogServicesDecorator

logger = structlog.get_logger(__name__)


def create_app(
    catalog_services: CatalogServicesDecorator,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the administration application.

    Args:
        catalog_services: Decorator whose cache the API manages
        settings: Application settings (defaults to the cached settings)
    """
    settings = settings or get_settings()
    configure_logging(settings)
    tracer_provider = configure_telemetry(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Catalog cache API started",
            version=APP_VERSION,
            environment=settings.ENVIRONMENT,
            backend=settings.CACHE_BACKEND,
            region=catalog_services.region.name,
        )
        yield
        logger.info("Shutting down catalog cache API")
        if tracer_provider is not None:
            tracer_provider.shutdown()

    app = FastAPI(title=APP_NAME, version=APP_VERSION, lifespan=lifespan)
    app.state.catalog_services = catalog_services
    app.state.settings = settings
    app.state.metrics_exporter = CacheMetricsExporter()
    app.include_router(cache_router)

    return app
