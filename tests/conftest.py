"""
Main pytest configuration for catalog cache tests.

Fixtures for cache stores, mocked catalog services and the caching decorator.
"""

import os
from unittest.mock import MagicMock

import fakeredis
import pytest

# Set test environment variables before importing app modules
os.environ["ENVIRONMENT"] = "test"
os.environ["CACHE_BACKEND"] = "memory"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_JSON"] = "false"
os.environ["OTEL_ENABLED"] = "false"

from catalog_cache.core.config import Settings
from catalog_cache.domain.cache.value_objects import CacheRegion
from catalog_cache.domain.catalog.models import (
    Catalog,
    CatalogProduct,
    Category,
    Property,
    PropertyDictionaryValue,
    SearchResult,
)
from catalog_cache.domain.catalog.service_interfaces import (
    CatalogSearchService,
    CatalogService,
    CategoryService,
    ItemService,
    PropertyService,
)
from catalog_cache.infrastructure.cache.memory_store import InMemoryCacheStore
from catalog_cache.infrastructure.cache.redis_store import RedisCacheStore
from catalog_cache.services.cache.catalog_services_decorator import (
    CatalogServicesDecorator,
)


@pytest.fixture
def test_settings():
    """Settings isolated from the process environment's .env file."""
    return Settings(_env_file=None, ENVIRONMENT="test", CACHE_BACKEND="memory")


@pytest.fixture
def region():
    """Catalog cache region."""
    return CacheRegion.catalog()


@pytest.fixture
def memory_store():
    """Fresh in-memory cache store."""
    return InMemoryCacheStore()


@pytest.fixture
def redis_client():
    """In-process fake Redis server."""
    client = fakeredis.FakeRedis()
    yield client
    client.flushall()


@pytest.fixture
def redis_store(redis_client):
    """Redis cache store on top of the fake server."""
    return RedisCacheStore(redis_client, key_prefix="test-catalog-cache")


@pytest.fixture
def sample_product():
    return CatalogProduct(id="P1", code="SKU-1", name="Laptop", catalog_id="C1")


@pytest.fixture
def sample_category():
    return Category(id="CAT1", code="electronics", name="Electronics", catalog_id="C1")


@pytest.fixture
def sample_property():
    return Property(id="PROP1", name="Color", catalog_id="C1", is_dictionary=True)


@pytest.fixture
def sample_catalog():
    return Catalog(id="C1", name="Main catalog")


@pytest.fixture
def item_service(sample_product):
    """Mocked item service."""
    service = MagicMock(spec=ItemService)
    service.get_by_id.return_value = sample_product
    service.get_by_ids.return_value = [sample_product]
    service.get_by_code.return_value = sample_product
    service.get_by_codes.return_value = [sample_product]
    service.create.return_value = sample_product
    service.create_many.return_value = None
    service.update.return_value = None
    service.delete.return_value = None
    return service


@pytest.fixture
def search_service(sample_product, sample_category, sample_catalog):
    """Mocked catalog search service."""
    service = MagicMock(spec=CatalogSearchService)
    service.search.return_value = SearchResult(
        products=[sample_product],
        categories=[sample_category],
        catalogs=[sample_catalog],
        product_total_count=1,
        total_count=3,
    )
    return service


@pytest.fixture
def property_service(sample_property):
    """Mocked property service."""
    service = MagicMock(spec=PropertyService)
    service.get_by_id.return_value = sample_property
    service.get_by_ids.return_value = [sample_property]
    service.get_all_catalog_properties.return_value = [sample_property]
    service.get_all_properties.return_value = [sample_property]
    service.search_dictionary_values.return_value = [
        PropertyDictionaryValue(
            id="DV1", property_id="PROP1", alias="red", value="Red"
        )
    ]
    service.create.return_value = sample_property
    service.update.return_value = None
    service.delete.return_value = None
    return service


@pytest.fixture
def category_service(sample_category):
    """Mocked category service."""
    service = MagicMock(spec=CategoryService)
    service.get_by_id.return_value = sample_category
    service.get_by_ids.return_value = [sample_category]
    service.create.return_value = sample_category
    service.create_many.return_value = None
    service.update.return_value = None
    service.delete.return_value = None
    return service


@pytest.fixture
def catalog_service(sample_catalog):
    """Mocked catalog service."""
    service = MagicMock(spec=CatalogService)
    service.get_catalogs_list.return_value = [sample_catalog]
    service.get_by_id.return_value = sample_catalog
    service.create.return_value = sample_catalog
    service.update.return_value = None
    service.delete.return_value = None
    return service


@pytest.fixture
def catalog_services(
    item_service,
    search_service,
    property_service,
    category_service,
    catalog_service,
    memory_store,
):
    """Caching decorator over the mocked services and an in-memory store."""
    return CatalogServicesDecorator(
        item_service=item_service,
        search_service=search_service,
        property_service=property_service,
        category_service=category_service,
        catalog_service=catalog_service,
        cache_store=memory_store,
    )
