"""
Unit tests for Catalog Domain models.

Focuses on the search criteria cache key, the only model data that
contributes to cache keys.
"""

import pytest

from catalog_cache.domain.catalog.models import (
    Catalog,
    CatalogProduct,
    ItemResponseGroup,
    SearchCriteria,
    SearchResponseGroup,
    SearchResult,
)


class TestSearchCriteriaCacheKey:
    """Test SearchCriteria.get_cache_key."""

    def test_equal_criteria_equal_keys(self):
        """Test equal criteria produce equal keys."""
        first = SearchCriteria(keyword="laptop", catalog_id="C1", take=10)
        second = SearchCriteria(keyword="laptop", catalog_id="C1", take=10)

        assert first.get_cache_key() == second.get_cache_key()

    def test_every_field_contributes(self):
        """Test changing any criterion changes the key."""
        base = SearchCriteria(keyword="laptop")
        variants = [
            SearchCriteria(keyword="phone"),
            SearchCriteria(keyword="laptop", code="SKU-1"),
            SearchCriteria(keyword="laptop", catalog_id="C1"),
            SearchCriteria(keyword="laptop", catalog_ids=["C1"]),
            SearchCriteria(keyword="laptop", category_id="CAT1"),
            SearchCriteria(keyword="laptop", category_ids=["CAT1"]),
            SearchCriteria(keyword="laptop", language_code="en-US"),
            SearchCriteria(keyword="laptop", search_in_children=True),
            SearchCriteria(keyword="laptop", search_in_variations=True),
            SearchCriteria(keyword="laptop", only_buyable=True),
            SearchCriteria(
                keyword="laptop", response_group=SearchResponseGroup.Full
            ),
            SearchCriteria(keyword="laptop", sort="name"),
            SearchCriteria(keyword="laptop", skip=20),
            SearchCriteria(keyword="laptop", take=50),
        ]

        keys = {criteria.get_cache_key() for criteria in variants}
        assert base.get_cache_key() not in keys
        assert len(keys) == len(variants)

    def test_list_order_matters(self):
        """Test id list order is part of the key."""
        first = SearchCriteria(catalog_ids=["C1", "C2"])
        second = SearchCriteria(catalog_ids=["C2", "C1"])
        assert first.get_cache_key() != second.get_cache_key()

    def test_none_fields_keep_positions(self):
        """Test unset criteria keep their positions as empty parts."""
        key = SearchCriteria().get_cache_key()
        assert key.startswith(", , , ")

    def test_int_response_group_is_coerced(self):
        """Test an int response group keys like the equal flag."""
        assert (
            SearchCriteria(response_group=int(SearchResponseGroup.Full)).get_cache_key()
            == SearchCriteria(response_group=SearchResponseGroup.Full).get_cache_key()
        )

    def test_criteria_are_immutable(self):
        """Test criteria cannot change after construction."""
        criteria = SearchCriteria(keyword="laptop")
        with pytest.raises(ValueError):
            criteria.keyword = "phone"

    def test_negative_paging_rejected(self):
        """Test negative paging is rejected."""
        with pytest.raises(ValueError):
            SearchCriteria(skip=-1)


class TestModels:
    """Test model defaults."""

    def test_product_defaults(self):
        """Test product defaults."""
        product = CatalogProduct(name="Laptop")
        assert product.id is None
        assert product.is_active
        assert product.property_values == []

    def test_search_result_defaults(self):
        """Test empty search result defaults."""
        result = SearchResult()
        assert result.products == []
        assert result.total_count == 0

    def test_catalog_equality(self):
        """Test catalogs compare by value."""
        assert Catalog(id="C1", name="Main") == Catalog(id="C1", name="Main")

    def test_item_response_group_composites(self):
        """Test composite item groups contain their members."""
        assert ItemResponseGroup.ItemInfo in ItemResponseGroup.ItemLarge
        assert ItemResponseGroup.ItemSmall in ItemResponseGroup.ItemMedium
        assert ItemResponseGroup.Inventory not in ItemResponseGroup.ItemMedium
