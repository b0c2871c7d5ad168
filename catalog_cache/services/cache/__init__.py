"""
Cache Services Module

Catalog caching decorator and its wiring helpers.
"""

from .catalog_services_decorator import (
    CachedCatalogSearchService,
    CachedCatalogService,
    CachedCategoryService,
    CachedFacet,
    CachedItemService,
    CachedPropertyService,
    CatalogServicesDecorator,
)
from .factory import create_cache_store, create_catalog_services

__all__ = [
    "CachedCatalogSearchService",
    "CachedCatalogService",
    "CachedCategoryService",
    "CachedFacet",
    "CachedItemService",
    "CachedPropertyService",
    "CatalogServicesDecorator",
    "create_cache_store",
    "create_catalog_services",
]
