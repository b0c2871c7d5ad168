"""
Unit tests for Cache Domain value objects.

Tests cache key construction, key part rendering and region validation.
"""

import pytest

from catalog_cache.domain.cache.value_objects import (
    CacheKey,
    CacheRegion,
    CacheStatistics,
    render_key_part,
)
from catalog_cache.domain.catalog.models import (
    CategoryResponseGroup,
    ItemResponseGroup,
    PropertyType,
    PropertyValueType,
)


class TestCacheKey:
    """Test CacheKey value object."""

    def test_build_key(self):
        """Test key layout: prefix, namespace and parts joined by ', '."""
        key = CacheKey.build("ItemService.GetById", "P1", "ItemInfo", "C1")

        assert key.value == "Catalog-ItemService.GetById, P1, ItemInfo, C1"
        assert str(key) == key.value

    def test_build_key_without_parts(self):
        """Test key for a parameterless operation."""
        key = CacheKey.build("PropertyService.GetAllProperties")
        assert key.value == "Catalog-PropertyService.GetAllProperties"

    def test_none_part_keeps_position(self):
        """Test None parameters render as empty segments instead of vanishing."""
        key = CacheKey.build("ItemService.GetById", "P1", "ItemInfo", None)

        assert key.value == "Catalog-ItemService.GetById, P1, ItemInfo, "
        assert key != CacheKey.build("ItemService.GetById", "P1", "ItemInfo")

    def test_equal_inputs_give_equal_keys(self):
        """Test key determinism for equal (namespace, parts)."""
        first = CacheKey.build("CategoryService.GetById", "CAT1", "Info", None)
        second = CacheKey.build("CategoryService.GetById", "CAT1", "Info", None)

        assert first == second
        assert hash(first) == hash(second)

    def test_different_parts_give_different_keys(self):
        """Test keys differ for differing argument sequences of equal arity."""
        keys = {
            CacheKey.build("ItemService.GetById", "P1", "ItemInfo", "C1"),
            CacheKey.build("ItemService.GetById", "P2", "ItemInfo", "C1"),
            CacheKey.build("ItemService.GetById", "P1", "ItemAssets", "C1"),
            CacheKey.build("ItemService.GetById", "P1", "ItemInfo", "C2"),
            CacheKey.build("ItemService.GetById", "P1", "ItemInfo", None),
        }
        assert len(keys) == 5

    def test_namespace_separates_operations(self):
        """Test identical arguments under different operations do not share keys."""
        item = CacheKey.build("ItemService.GetById", "X")
        catalog = CacheKey.build("CatalogService.GetById", "X")
        assert item != catalog

    def test_separator_inside_value_is_not_escaped(self):
        """Test the documented collision when a value contains the separator."""
        joined = CacheKey.build("PropertyService.SearchDictionaryValues", "A, B", "C")
        split = CacheKey.build("PropertyService.SearchDictionaryValues", "A", "B, C")
        assert joined == split

    def test_empty_namespace(self):
        """Test invalid empty namespace."""
        with pytest.raises(ValueError, match="namespace cannot be empty"):
            CacheKey.build("")

    def test_invalid_key_empty(self):
        """Test invalid empty key."""
        with pytest.raises(ValueError, match="Cache key cannot be empty"):
            CacheKey("")


class TestRenderKeyPart:
    """Test rendering of call arguments into key parts."""

    def test_none(self):
        """Test None stays None so the key keeps its position."""
        assert render_key_part(None) is None

    def test_string(self):
        """Test strings render unchanged."""
        assert render_key_part("P1") == "P1"

    def test_list_joined_in_order(self):
        """Test lists join their items in order."""
        assert render_key_part(["P1", "P2", "P3"]) == "P1, P2, P3"
        assert render_key_part(["P3", "P1"]) != render_key_part(["P1", "P3"])

    def test_tuple_matches_list(self):
        """Test tuples render like lists."""
        assert render_key_part(("P1", "P2")) == render_key_part(["P1", "P2"])

    def test_empty_list(self):
        """Test an empty list renders as an empty part."""
        assert render_key_part([]) == ""

    def test_single_flag(self):
        """Test a single flag renders its member name."""
        assert render_key_part(ItemResponseGroup.ItemInfo) == "ItemInfo"

    def test_flag_combination(self):
        """Test combined flags render member names in definition order."""
        group = ItemResponseGroup.ItemProperties | ItemResponseGroup.ItemInfo
        assert render_key_part(group) == "ItemInfo, ItemProperties"

    def test_composite_flag_matches_its_members(self):
        """Test an alias flag and the equal member union render identically."""
        union = (
            ItemResponseGroup.ItemInfo
            | ItemResponseGroup.ItemAssets
            | ItemResponseGroup.Seo
        )
        assert render_key_part(ItemResponseGroup.ItemSmall) == render_key_part(union)

    def test_distinct_groups_render_differently(self):
        """Test distinct groups never share a rendering."""
        assert render_key_part(CategoryResponseGroup.Info) != render_key_part(
            CategoryResponseGroup.Full
        )

    def test_undefined_flag_bits_are_kept(self):
        """Test bits without a member render as an integer after the names."""
        group = ItemResponseGroup(ItemResponseGroup.ItemInfo | 1 << 12)

        assert render_key_part(group) == "ItemInfo, 4096"
        assert render_key_part(group) != render_key_part(ItemResponseGroup.ItemInfo)

    def test_only_undefined_flag_bits(self):
        """Test a flag made only of undefined bits renders its integer value."""
        assert render_key_part(ItemResponseGroup(1 << 12)) == "4096"

    def test_empty_flag(self):
        """Test an empty flag renders as 0."""
        assert render_key_part(ItemResponseGroup(0)) == "0"

    def test_str_enum_renders_member_name(self):
        """Test str-based enums render their member name, not their value."""
        assert render_key_part(PropertyType.PRODUCT) == "PRODUCT"
        assert render_key_part(PropertyValueType.SHORT_TEXT) == "SHORT_TEXT"

    def test_other_values_use_str(self):
        """Test other values fall back to str()."""
        assert render_key_part(42) == "42"
        assert render_key_part(True) == "True"


class TestCacheRegion:
    """Test CacheRegion value object."""

    def test_catalog_region(self):
        """Test the shared catalog region name."""
        region = CacheRegion.catalog()
        assert region.name == "Catalog-Cache-Region"
        assert str(region) == "Catalog-Cache-Region"

    def test_regions_compare_by_name(self):
        """Test regions compare by value."""
        assert CacheRegion("A") == CacheRegion("A")
        assert CacheRegion("A") != CacheRegion("B")

    def test_invalid_region_empty(self):
        """Test invalid empty region name."""
        with pytest.raises(ValueError, match="Cache region name cannot be empty"):
            CacheRegion("")

    def test_invalid_region_whitespace(self):
        """Test invalid region name with whitespace."""
        with pytest.raises(ValueError, match="cannot contain whitespace"):
            CacheRegion("catalog region")

    def test_invalid_region_too_long(self):
        """Test invalid overlong region name."""
        with pytest.raises(ValueError, match="too long"):
            CacheRegion("r" * 101)


class TestCacheStatistics:
    """Test CacheStatistics model."""

    def test_hit_ratio(self):
        """Test hit ratio from hits and misses."""
        stats = CacheStatistics(backend="memory", hits=3, misses=1)
        assert stats.total_lookups == 4
        assert stats.hit_ratio == 0.75

    def test_hit_ratio_without_lookups(self):
        """Test hit ratio before any lookup."""
        assert CacheStatistics(backend="memory").hit_ratio == 0.0

    def test_negative_counter_rejected(self):
        """Test counters cannot be negative."""
        with pytest.raises(ValueError):
            CacheStatistics(backend="memory", hits=-1)
