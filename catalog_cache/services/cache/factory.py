"""
Cache Wiring

Builds the configured cache store and composes the catalog caching decorator.
"""

import logging
from typing import Optional

from ...core.config import Settings, get_settings
from ...domain.cache.repository_interfaces import CacheStoreAdapter
from ...domain.cache.value_objects import CacheRegion
from ...domain.catalog.service_interfaces import (
    CatalogSearchService,
    CatalogService,
    CategoryService,
    ItemService,
    PropertyService,
)
from ...infrastructure.cache.memory_store import InMemoryCacheStore
from ...infrastructure.cache.redis_store import RedisCacheStore
from .catalog_services_decorator import CatalogServicesDecorator

logger = logging.getLogger(__name__)


def create_cache_store(settings: Optional[Settings] = None) -> CacheStoreAdapter:
    """Create the cache store selected by CACHE_BACKEND."""
    settings = settings or get_settings()

    if settings.uses_redis:
        logger.info(
            "Using Redis cache store",
            extra={"key_prefix": settings.REDIS_KEY_PREFIX},
        )
        return RedisCacheStore.from_url(
            settings.REDIS_URL,
            key_prefix=settings.REDIS_KEY_PREFIX,
            socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
            region_ttl_seconds=settings.REDIS_REGION_TTL_SECONDS,
        )

    logger.info("Using in-memory cache store")
    return InMemoryCacheStore()


def create_catalog_services(
    item_service: ItemService,
    search_service: CatalogSearchService,
    property_service: PropertyService,
    category_service: CategoryService,
    catalog_service: CatalogService,
    cache_store: Optional[CacheStoreAdapter] = None,
    settings: Optional[Settings] = None,
) -> CatalogServicesDecorator:
    """
    Compose the caching decorator over the given catalog services.

    Args:
        item_service: Wrapped item service
        search_service: Wrapped catalog search service
        property_service: Wrapped property service
        category_service: Wrapped category service
        catalog_service: Wrapped catalog service
        cache_store: Store to use; built from settings when omitted
        settings: Application settings (defaults to the cached settings)

    Returns:
        Decorator exposing the cached facets
    """
    settings = settings or get_settings()
    store = cache_store or create_cache_store(settings)

    return CatalogServicesDecorator(
        item_service=item_service,
        search_service=search_service,
        property_service=property_service,
        category_service=category_service,
        catalog_service=catalog_service,
        cache_store=store,
        region=CacheRegion(settings.CACHE_REGION_NAME),
    )
