"""
Catalog Domain Models

Domain objects returned and accepted by the catalog services.
The cache layer treats them as opaque values; only SearchCriteria
contributes to cache keys.
"""

from enum import Enum, IntFlag
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..cache.value_objects import render_key_part
from ...constants import CACHE_KEY_SEPARATOR


class ItemResponseGroup(IntFlag):
    """Parts of a product to load."""

    ItemInfo = 1
    ItemAssets = 1 << 1
    ItemProperties = 1 << 2
    ItemAssociations = 1 << 3
    ItemEditorialReviews = 1 << 4
    Variations = 1 << 5
    Seo = 1 << 6
    Links = 1 << 7
    Inventory = 1 << 8
    Outlines = 1 << 9
    ItemSmall = ItemInfo | ItemAssets | Seo
    ItemMedium = ItemSmall | ItemProperties | ItemEditorialReviews | Links
    ItemLarge = (
        ItemMedium | ItemAssociations | Variations | Inventory | Outlines
    )


class CategoryResponseGroup(IntFlag):
    """Parts of a category to load."""

    Info = 1
    WithImages = 1 << 1
    WithProperties = 1 << 2
    WithLinks = 1 << 3
    WithSeo = 1 << 4
    WithParents = 1 << 5
    WithOutlines = 1 << 6
    Full = (
        Info | WithImages | WithProperties | WithLinks | WithSeo | WithParents
        | WithOutlines
    )


class SearchResponseGroup(IntFlag):
    """Result sets a catalog search returns."""

    WithCatalogs = 1
    WithCategories = 1 << 1
    WithProducts = 1 << 2
    WithVariations = 1 << 3
    WithProperties = 1 << 4
    WithOutlines = 1 << 5
    Full = (
        WithCatalogs | WithCategories | WithProducts | WithVariations
        | WithProperties | WithOutlines
    )


class PropertyType(str, Enum):
    """Entity a property is attached to."""

    PRODUCT = "product"
    VARIATION = "variation"
    CATEGORY = "category"
    CATALOG = "catalog"


class PropertyValueType(str, Enum):
    """Value type of a property."""

    SHORT_TEXT = "short_text"
    LONG_TEXT = "long_text"
    NUMBER = "number"
    DATE_TIME = "date_time"
    BOOLEAN = "boolean"
    INTEGER = "integer"


class Catalog(BaseModel):
    """Catalog aggregate root."""

    id: Optional[str] = None
    name: str
    is_virtual: bool = False
    default_language: str = "en-US"
    languages: List[str] = Field(default_factory=list)


class Category(BaseModel):
    """Category within a catalog."""

    id: Optional[str] = None
    code: Optional[str] = None
    name: str
    catalog_id: str
    parent_id: Optional[str] = None
    is_virtual: bool = False
    is_active: bool = True
    priority: int = 0


class PropertyDictionaryValue(BaseModel):
    """Predefined value of a dictionary property."""

    id: Optional[str] = None
    property_id: str
    alias: str
    value: str
    language_code: Optional[str] = None


class Property(BaseModel):
    """Property definition."""

    id: Optional[str] = None
    name: str
    catalog_id: Optional[str] = None
    category_id: Optional[str] = None
    type: PropertyType = PropertyType.PRODUCT
    value_type: PropertyValueType = PropertyValueType.SHORT_TEXT
    is_dictionary: bool = False
    is_multivalue: bool = False
    is_required: bool = False


class PropertyValue(BaseModel):
    """Property value set on a product."""

    property_id: Optional[str] = None
    property_name: str
    value: str
    language_code: Optional[str] = None


class CatalogProduct(BaseModel):
    """Product (item) within a catalog."""

    id: Optional[str] = None
    code: Optional[str] = None
    name: str
    catalog_id: Optional[str] = None
    category_id: Optional[str] = None
    main_product_id: Optional[str] = None
    is_active: bool = True
    is_buyable: bool = True
    property_values: List[PropertyValue] = Field(default_factory=list)


class SearchCriteria(BaseModel):
    """Catalog search criteria."""

    model_config = ConfigDict(frozen=True)

    keyword: Optional[str] = None
    code: Optional[str] = None
    catalog_id: Optional[str] = None
    catalog_ids: List[str] = Field(default_factory=list)
    category_id: Optional[str] = None
    category_ids: List[str] = Field(default_factory=list)
    language_code: Optional[str] = None
    search_in_children: bool = False
    search_in_variations: bool = False
    only_buyable: bool = False
    response_group: SearchResponseGroup = SearchResponseGroup.WithProducts
    sort: Optional[str] = None
    skip: int = Field(default=0, ge=0)
    take: int = Field(default=20, ge=0)

    def get_cache_key(self) -> str:
        """
        Render every criterion as one cache key part.

        Fields are emitted in declaration order so equal criteria always
        produce the same string.
        """
        return CACHE_KEY_SEPARATOR.join(
            render_key_part(getattr(self, name)) or ""
            for name in type(self).model_fields
        )


class SearchResult(BaseModel):
    """Catalog search result envelope."""

    products: List[CatalogProduct] = Field(default_factory=list)
    categories: List[Category] = Field(default_factory=list)
    catalogs: List[Catalog] = Field(default_factory=list)
    product_total_count: int = 0
    total_count: int = 0
