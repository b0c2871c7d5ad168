"""
Catalog Cache Administration Endpoints

Cache-busting, statistics (JSON and Prometheus) and health of the catalog cache store.
"""

from datetime import datetime, timezone
from typing import Any, Dict

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from prometheus_client import CONTENT_TYPE_LATEST
from pydantic import BaseModel, Field

from ...domain.cache.value_objects import CacheStatistics
from ...infrastructure.cache.exceptions import (
    CacheStoreException,
    CacheStoreHTTPException,
)
from ...monitoring.cache_metrics import CacheMetricsExporter
from ...services.cache.catalog_services_decorator import CatalogServicesDecorator

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/cache", tags=["cache"])


class CacheResetResponse(BaseModel):
    """Cache reset response model."""

    status: str = Field(..., description="Outcome of the reset")
    region: str = Field(..., description="Cleared cache region")
    timestamp: str = Field(..., description="Reset time (ISO 8601, UTC)")


class CacheMetricsResponse(BaseModel):
    """Cache metrics response model."""

    region: str
    statistics: CacheStatistics
    hit_ratio: float


def get_catalog_services(request: Request) -> CatalogServicesDecorator:
    """Resolve the decorator composed at application startup."""
    return request.app.state.catalog_services


def get_metrics_exporter(request: Request) -> CacheMetricsExporter:
    return request.app.state.metrics_exporter


@router.post("/reset", response_model=CacheResetResponse)
def reset_cache(
    catalog_services: CatalogServicesDecorator = Depends(get_catalog_services),
):
    """
    Drop every cached catalog read.

    Store failures are reported as 503 rather than a successful reset.
    """
    try:
        catalog_services.clear_cache()
    except CacheStoreException as e:
        logger.error(
            "Cache reset failed",
            region=catalog_services.region.name,
            error=e.message,
            error_code=e.error_code,
        )
        raise CacheStoreHTTPException(e) from e

    logger.info("Cache reset", region=catalog_services.region.name)
    return CacheResetResponse(
        status="cleared",
        region=catalog_services.region.name,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/metrics", response_model=CacheMetricsResponse)
def get_cache_metrics(
    catalog_services: CatalogServicesDecorator = Depends(get_catalog_services),
):
    """Get cache store counters."""
    statistics = catalog_services.cache_store.get_metrics()
    return CacheMetricsResponse(
        region=catalog_services.region.name,
        statistics=statistics,
        hit_ratio=statistics.hit_ratio,
    )


@router.get("/metrics/prometheus")
def get_prometheus_metrics(
    catalog_services: CatalogServicesDecorator = Depends(get_catalog_services),
    exporter: CacheMetricsExporter = Depends(get_metrics_exporter),
):
    """Get cache store counters in the Prometheus text format."""
    content = exporter.render(
        catalog_services.cache_store.get_metrics(), catalog_services.region
    )
    return Response(content=content, media_type=CONTENT_TYPE_LATEST)


@router.get("/health")
def get_cache_health(
    catalog_services: CatalogServicesDecorator = Depends(get_catalog_services),
) -> Dict[str, Any]:
    """
    Get cache store health.

    Returns 503 with the health report as detail when the store is unhealthy.
    """
    health = catalog_services.cache_store.health_check()
    health["region"] = catalog_services.region.name

    if health.get("status") != "healthy":
        logger.error(
            "Cache store unhealthy",
            region=catalog_services.region.name,
            backend=health.get("backend"),
            error=health.get("error"),
        )
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=health,
        )

    return health
