"""
Catalog Services Caching Decorator

Read-through cache in front of the catalog domain services.

Reads are served through the cache store's get-or-compute under a key built
from the operation namespace and its arguments. Writes go to the wrapped
service first and clear the whole catalog region once they succeed; a failing
write leaves the cache untouched. Every facet shares one region, so a write
through any facet invalidates cached reads of all of them.
"""

import logging
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from opentelemetry import trace

from ...domain.cache.repository_interfaces import CacheStoreAdapter
from ...domain.cache.value_objects import CacheKey, CacheRegion, render_key_part
from ...domain.catalog.models import (
    Catalog,
    CatalogProduct,
    Category,
    CategoryResponseGroup,
    ItemResponseGroup,
    Property,
    PropertyDictionaryValue,
    SearchCriteria,
    SearchResult,
)
from ...domain.catalog.service_interfaces import (
    CachedServiceDecorator,
    CatalogSearchService,
    CatalogService,
    CategoryService,
    ItemService,
    PropertyService,
)

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

T = TypeVar("T")


class CachedFacet(CachedServiceDecorator):
    """Shared read-through and invalidation plumbing for one wrapped service."""

    def __init__(self, cache_store: CacheStoreAdapter, region: CacheRegion):
        self._cache_store = cache_store
        self._region = region

    def _cached(self, namespace: str, args: Sequence[Any], compute: Callable[[], T]) -> T:
        key = CacheKey.build(namespace, *(render_key_part(arg) for arg in args))

        with tracer.start_as_current_span("catalog_cache.read") as span:
            span.set_attribute("cache.namespace", namespace)
            span.set_attribute("cache.region", self._region.name)
            return self._cache_store.get_or_compute(key, self._region, compute)

    def _invalidating(self, operation: str, mutate: Callable[[], T]) -> T:
        with tracer.start_as_current_span("catalog_cache.write") as span:
            span.set_attribute("cache.operation", operation)
            span.set_attribute("cache.region", self._region.name)

            result = mutate()
            self.clear_cache()

            logger.info(
                f"{operation} invalidated cache region {self._region.name}",
                extra={"operation": operation, "region": self._region.name},
            )
            return result

    def clear_cache(self) -> None:
        """Drop every cached read in the shared region."""
        self._cache_store.clear_region(self._region)


class CachedItemService(CachedFacet, ItemService):
    """Item service with cached lookups."""

    def __init__(
        self,
        item_service: ItemService,
        cache_store: CacheStoreAdapter,
        region: CacheRegion,
    ):
        super().__init__(cache_store, region)
        self._service = item_service

    def get_by_id(
        self,
        item_id: str,
        response_group: ItemResponseGroup,
        catalog_id: Optional[str] = None,
    ) -> Optional[CatalogProduct]:
        response_group = ItemResponseGroup(response_group)
        return self._cached(
            "ItemService.GetById",
            (item_id, response_group, catalog_id),
            lambda: self._service.get_by_id(item_id, response_group, catalog_id),
        )

    def get_by_ids(
        self,
        item_ids: Sequence[str],
        response_group: ItemResponseGroup,
        catalog_id: Optional[str] = None,
    ) -> List[CatalogProduct]:
        item_ids = list(item_ids)
        response_group = ItemResponseGroup(response_group)
        return self._cached(
            "ItemService.GetByIds",
            (item_ids, response_group, catalog_id),
            lambda: self._service.get_by_ids(item_ids, response_group, catalog_id),
        )

    def get_by_code(
        self,
        code: str,
        response_group: ItemResponseGroup,
        catalog_id: Optional[str] = None,
    ) -> Optional[CatalogProduct]:
        response_group = ItemResponseGroup(response_group)
        return self._cached(
            "ItemService.GetByCode",
            (code, response_group, catalog_id),
            lambda: self._service.get_by_code(code, response_group, catalog_id),
        )

    def get_by_codes(
        self,
        codes: Sequence[str],
        response_group: ItemResponseGroup,
        catalog_id: Optional[str] = None,
    ) -> List[CatalogProduct]:
        codes = list(codes)
        response_group = ItemResponseGroup(response_group)
        return self._cached(
            "ItemService.GetByCodes",
            (codes, response_group, catalog_id),
            lambda: self._service.get_by_codes(codes, response_group, catalog_id),
        )

    def create(self, item: CatalogProduct) -> CatalogProduct:
        return self._invalidating("ItemService.Create", lambda: self._service.create(item))

    def create_many(self, items: Sequence[CatalogProduct]) -> None:
        return self._invalidating(
            "ItemService.CreateMany", lambda: self._service.create_many(items)
        )

    def update(self, items: Sequence[CatalogProduct]) -> None:
        return self._invalidating("ItemService.Update", lambda: self._service.update(items))

    def delete(self, item_ids: Sequence[str]) -> None:
        return self._invalidating(
            "ItemService.Delete", lambda: self._service.delete(item_ids)
        )


class CachedCatalogSearchService(CachedFacet, CatalogSearchService):
    """Catalog search with cached results."""

    def __init__(
        self,
        search_service: CatalogSearchService,
        cache_store: CacheStoreAdapter,
        region: CacheRegion,
    ):
        super().__init__(cache_store, region)
        self._service = search_service

    def search(self, criteria: SearchCriteria) -> SearchResult:
        return self._cached(
            "CatalogSearchService.Search",
            (criteria.get_cache_key(),),
            lambda: self._service.search(criteria),
        )


class CachedPropertyService(CachedFacet, PropertyService):
    """Property service with cached lookups."""

    def __init__(
        self,
        property_service: PropertyService,
        cache_store: CacheStoreAdapter,
        region: CacheRegion,
    ):
        super().__init__(cache_store, region)
        self._service = property_service

    def get_by_id(self, property_id: str) -> Optional[Property]:
        return self._cached(
            "PropertyService.GetById",
            (property_id,),
            lambda: self._service.get_by_id(property_id),
        )

    def get_by_ids(self, property_ids: Sequence[str]) -> List[Property]:
        property_ids = list(property_ids)
        return self._cached(
            "PropertyService.GetByIds",
            (property_ids,),
            lambda: self._service.get_by_ids(property_ids),
        )

    def get_all_catalog_properties(self, catalog_id: str) -> List[Property]:
        return self._cached(
            "PropertyService.GetAllCatalogProperties",
            (catalog_id,),
            lambda: self._service.get_all_catalog_properties(catalog_id),
        )

    def get_all_properties(self) -> List[Property]:
        return self._cached(
            "PropertyService.GetAllProperties",
            (),
            self._service.get_all_properties,
        )

    def search_dictionary_values(
        self, property_id: str, keyword: Optional[str]
    ) -> List[PropertyDictionaryValue]:
        return self._cached(
            "PropertyService.SearchDictionaryValues",
            (property_id, keyword),
            lambda: self._service.search_dictionary_values(property_id, keyword),
        )

    def create(self, property: Property) -> Property:
        return self._invalidating(
            "PropertyService.Create", lambda: self._service.create(property)
        )

    def update(self, properties: Sequence[Property]) -> None:
        return self._invalidating(
            "PropertyService.Update", lambda: self._service.update(properties)
        )

    def delete(self, property_ids: Sequence[str]) -> None:
        return self._invalidating(
            "PropertyService.Delete", lambda: self._service.delete(property_ids)
        )


class CachedCategoryService(CachedFacet, CategoryService):
    """Category service with cached lookups."""

    def __init__(
        self,
        category_service: CategoryService,
        cache_store: CacheStoreAdapter,
        region: CacheRegion,
    ):
        super().__init__(cache_store, region)
        self._service = category_service

    def get_by_id(
        self,
        category_id: str,
        response_group: CategoryResponseGroup,
        catalog_id: Optional[str] = None,
    ) -> Optional[Category]:
        response_group = CategoryResponseGroup(response_group)
        return self._cached(
            "CategoryService.GetById",
            (category_id, response_group, catalog_id),
            lambda: self._service.get_by_id(category_id, response_group, catalog_id),
        )

    def get_by_ids(
        self,
        category_ids: Sequence[str],
        response_group: CategoryResponseGroup,
        catalog_id: Optional[str] = None,
    ) -> List[Category]:
        category_ids = list(category_ids)
        response_group = CategoryResponseGroup(response_group)
        return self._cached(
            "CategoryService.GetByIds",
            (category_ids, response_group, catalog_id),
            lambda: self._service.get_by_ids(category_ids, response_group, catalog_id),
        )

    def create(self, category: Category) -> Category:
        return self._invalidating(
            "CategoryService.Create", lambda: self._service.create(category)
        )

    def create_many(self, categories: Sequence[Category]) -> None:
        return self._invalidating(
            "CategoryService.CreateMany", lambda: self._service.create_many(categories)
        )

    def update(self, categories: Sequence[Category]) -> None:
        return self._invalidating(
            "CategoryService.Update", lambda: self._service.update(categories)
        )

    def delete(self, category_ids: Sequence[str]) -> None:
        return self._invalidating(
            "CategoryService.Delete", lambda: self._service.delete(category_ids)
        )


class CachedCatalogService(CachedFacet, CatalogService):
    """Catalog service with cached lookups."""

    def __init__(
        self,
        catalog_service: CatalogService,
        cache_store: CacheStoreAdapter,
        region: CacheRegion,
    ):
        super().__init__(cache_store, region)
        self._service = catalog_service

    def get_catalogs_list(self) -> List[Catalog]:
        # Materialized so a lazy sequence is not cached half-consumed
        return self._cached(
            "CatalogService.GetCatalogsList",
            (),
            lambda: list(self._service.get_catalogs_list()),
        )

    def get_by_id(self, catalog_id: str) -> Optional[Catalog]:
        return self._cached(
            "CatalogService.GetById",
            (catalog_id,),
            lambda: self._service.get_by_id(catalog_id),
        )

    def create(self, catalog: Catalog) -> Catalog:
        return self._invalidating(
            "CatalogService.Create", lambda: self._service.create(catalog)
        )

    def update(self, catalogs: Sequence[Catalog]) -> None:
        return self._invalidating(
            "CatalogService.Update", lambda: self._service.update(catalogs)
        )

    def delete(self, catalog_ids: Sequence[str]) -> None:
        return self._invalidating(
            "CatalogService.Delete", lambda: self._service.delete(catalog_ids)
        )


class CatalogServicesDecorator(CachedServiceDecorator):
    """
    Caching façade over the five catalog services.

    Exposes one cached facet per wrapped service (items, search, properties,
    categories, catalogs). All facets share one cache store and one region.
    """

    def __init__(
        self,
        item_service: ItemService,
        search_service: CatalogSearchService,
        property_service: PropertyService,
        category_service: CategoryService,
        catalog_service: CatalogService,
        cache_store: CacheStoreAdapter,
        region: Optional[CacheRegion] = None,
    ):
        self.cache_store = cache_store
        self.region = region or CacheRegion.catalog()

        self.items = CachedItemService(item_service, cache_store, self.region)
        self.search = CachedCatalogSearchService(search_service, cache_store, self.region)
        self.properties = CachedPropertyService(property_service, cache_store, self.region)
        self.categories = CachedCategoryService(category_service, cache_store, self.region)
        self.catalogs = CachedCatalogService(catalog_service, cache_store, self.region)

    def clear_cache(self) -> None:
        """Drop every cached catalog read."""
        with tracer.start_as_current_span("catalog_cache.clear") as span:
            span.set_attribute("cache.region", self.region.name)
            self.cache_store.clear_region(self.region)
