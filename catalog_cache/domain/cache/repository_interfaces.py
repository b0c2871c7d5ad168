"""
Cache Repository Interfaces

Abstract repository interfaces following DDD Repository pattern.
Defines the contract every cache store backing the catalog decorator honours.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, TypeVar

from .value_objects import CacheKey, CacheRegion, CacheStatistics

V = TypeVar("V")


class CacheStoreAdapter(ABC):
    """
    Abstract cache store with region-scoped clearing.

    Implementations own entry storage and concurrency control. Callers only
    rely on get-or-compute and whole-region clearing.
    """

    @abstractmethod
    def get_or_compute(
        self, key: CacheKey, region: CacheRegion, compute: Callable[[], V]
    ) -> V:
        """
        Return the value cached under key in region, computing it on a miss.

        On a hit compute is not called. On a miss compute is called once and
        its result is stored and returned. Exceptions raised by compute
        propagate unchanged and nothing is stored.
        """
        pass

    @abstractmethod
    def clear_region(self, region: CacheRegion) -> None:
        """Remove every entry in region. Clearing an empty or unknown region is a no-op."""
        pass

    @abstractmethod
    def get_metrics(self) -> CacheStatistics:
        """Get a snapshot of store counters."""
        pass

    @abstractmethod
    def health_check(self) -> Dict[str, Any]:
        """Report store health."""
        pass
