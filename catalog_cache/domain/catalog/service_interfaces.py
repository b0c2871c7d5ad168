"""
Catalog Service Interfaces

Abstract contracts of the catalog domain services. Concrete implementations
live outside this package; the caching decorator implements the same
contracts on top of them.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from .models import (
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


class ItemService(ABC):
    """Product (item) lookups and mutations."""

    @abstractmethod
    def get_by_id(
        self,
        item_id: str,
        response_group: ItemResponseGroup,
        catalog_id: Optional[str] = None,
    ) -> Optional[CatalogProduct]:
        """Get a product by id."""
        pass

    @abstractmethod
    def get_by_ids(
        self,
        item_ids: Sequence[str],
        response_group: ItemResponseGroup,
        catalog_id: Optional[str] = None,
    ) -> List[CatalogProduct]:
        """Get products by ids."""
        pass

    @abstractmethod
    def get_by_code(
        self,
        code: str,
        response_group: ItemResponseGroup,
        catalog_id: Optional[str] = None,
    ) -> Optional[CatalogProduct]:
        """Get a product by code."""
        pass

    @abstractmethod
    def get_by_codes(
        self,
        codes: Sequence[str],
        response_group: ItemResponseGroup,
        catalog_id: Optional[str] = None,
    ) -> List[CatalogProduct]:
        """Get products by codes."""
        pass

    @abstractmethod
    def create(self, item: CatalogProduct) -> CatalogProduct:
        """Create a product."""
        pass

    @abstractmethod
    def create_many(self, items: Sequence[CatalogProduct]) -> None:
        """Create several products."""
        pass

    @abstractmethod
    def update(self, items: Sequence[CatalogProduct]) -> None:
        """Update products."""
        pass

    @abstractmethod
    def delete(self, item_ids: Sequence[str]) -> None:
        """Delete products."""
        pass


class CatalogSearchService(ABC):
    """Catalog-wide search."""

    @abstractmethod
    def search(self, criteria: SearchCriteria) -> SearchResult:
        """Search catalogs, categories and products."""
        pass


class PropertyService(ABC):
    """Property definitions and dictionary values."""

    @abstractmethod
    def get_by_id(self, property_id: str) -> Optional[Property]:
        """Get a property by id."""
        pass

    @abstractmethod
    def get_by_ids(self, property_ids: Sequence[str]) -> List[Property]:
        """Get properties by ids."""
        pass

    @abstractmethod
    def get_all_catalog_properties(self, catalog_id: str) -> List[Property]:
        """Get every property available in a catalog."""
        pass

    @abstractmethod
    def get_all_properties(self) -> List[Property]:
        """Get every property."""
        pass

    @abstractmethod
    def search_dictionary_values(
        self, property_id: str, keyword: Optional[str]
    ) -> List[PropertyDictionaryValue]:
        """Search the dictionary values of a property."""
        pass

    @abstractmethod
    def create(self, property: Property) -> Property:
        """Create a property."""
        pass

    @abstractmethod
    def update(self, properties: Sequence[Property]) -> None:
        """Update properties."""
        pass

    @abstractmethod
    def delete(self, property_ids: Sequence[str]) -> None:
        """Delete properties."""
        pass


class CategoryService(ABC):
    """Category lookups and mutations."""

    @abstractmethod
    def get_by_id(
        self,
        category_id: str,
        response_group: CategoryResponseGroup,
        catalog_id: Optional[str] = None,
    ) -> Optional[Category]:
        """Get a category by id."""
        pass

    @abstractmethod
    def get_by_ids(
        self,
        category_ids: Sequence[str],
        response_group: CategoryResponseGroup,
        catalog_id: Optional[str] = None,
    ) -> List[Category]:
        """Get categories by ids."""
        pass

    @abstractmethod
    def create(self, category: Category) -> Category:
        """Create a category."""
        pass

    @abstractmethod
    def create_many(self, categories: Sequence[Category]) -> None:
        """Create several categories."""
        pass

    @abstractmethod
    def update(self, categories: Sequence[Category]) -> None:
        """Update categories."""
        pass

    @abstractmethod
    def delete(self, category_ids: Sequence[str]) -> None:
        """Delete categories."""
        pass


class CatalogService(ABC):
    """Catalog lookups and mutations."""

    @abstractmethod
    def get_catalogs_list(self) -> Sequence[Catalog]:
        """List every catalog."""
        pass

    @abstractmethod
    def get_by_id(self, catalog_id: str) -> Optional[Catalog]:
        """Get a catalog by id."""
        pass

    @abstractmethod
    def create(self, catalog: Catalog) -> Catalog:
        """Create a catalog."""
        pass

    @abstractmethod
    def update(self, catalogs: Sequence[Catalog]) -> None:
        """Update catalogs."""
        pass

    @abstractmethod
    def delete(self, catalog_ids: Sequence[str]) -> None:
        """Delete catalogs."""
        pass


class CachedServiceDecorator(ABC):
    """Decorator whose cached reads can be discarded on demand."""

    @abstractmethod
    def clear_cache(self) -> None:
        """Drop every cached read."""
        pass
