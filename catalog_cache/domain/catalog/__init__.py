"""
Catalog Domain Module

Catalog domain models and the service contracts the cache decorator wraps.
"""

from .models import (
    Catalog,
    CatalogProduct,
    Category,
    CategoryResponseGroup,
    ItemResponseGroup,
    Property,
    PropertyDictionaryValue,
    PropertyType,
    PropertyValue,
    PropertyValueType,
    SearchCriteria,
    SearchResponseGroup,
    SearchResult,
)
from .service_interfaces import (
    CachedServiceDecorator,
    CatalogSearchService,
    CatalogService,
    CategoryService,
    ItemService,
    PropertyService,
)

__all__ = [
    # Models
    "Catalog",
    "CatalogProduct",
    "Category",
    "CategoryResponseGroup",
    "ItemResponseGroup",
    "Property",
    "PropertyDictionaryValue",
    "PropertyType",
    "PropertyValue",
    "PropertyValueType",
    "SearchCriteria",
    "SearchResponseGroup",
    "SearchResult",
    # Service contracts
    "CachedServiceDecorator",
    "CatalogSearchService",
    "CatalogService",
    "CategoryService",
    "ItemService",
    "PropertyService",
]
