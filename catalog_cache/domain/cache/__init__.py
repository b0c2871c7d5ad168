"""
Cache Domain Module

Domain-Driven Design implementation for cache management.
Contains value objects and the cache store repository interface.
"""

from .repository_interfaces import CacheStoreAdapter
from .value_objects import CacheKey, CacheRegion, CacheStatistics, render_key_part

__all__ = [
    "CacheStoreAdapter",
    "CacheKey",
    "CacheRegion",
    "CacheStatistics",
    "render_key_part",
]
