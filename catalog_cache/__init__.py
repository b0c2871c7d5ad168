"""
Catalog Cache

Read-through caching layer in front of the catalog domain services.
"""

from .constants import APP_VERSION as __version__
from .domain.cache import CacheKey, CacheRegion, CacheStoreAdapter
from .infrastructure.cache import InMemoryCacheStore, RedisCacheStore
from .services.cache import CatalogServicesDecorator, create_catalog_services

__all__ = [
    "__version__",
    "CacheKey",
    "CacheRegion",
    "CacheStoreAdapter",
    "InMemoryCacheStore",
    "RedisCacheStore",
    "CatalogServicesDecorator",
    "create_catalog_services",
]
