"""
In-Memory Cache Store

Process-local implementation of the cache store repository interface.
Thread-safe with single-flight computation per key and generation-guarded
stores, so a region clear that races an in-flight compute never lets the
pre-clear result into the cleared region.
"""

import logging
import threading
from typing import Any, Callable, Dict, Optional, Tuple, TypeVar

from opentelemetry import trace

from ...domain.cache.repository_interfaces import CacheStoreAdapter
from ...domain.cache.value_objects import CacheKey, CacheRegion, CacheStatistics

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

V = TypeVar("V")


class InMemoryCacheStore(CacheStoreAdapter):
    """In-process cache store keeping values as-is, without copying."""

    backend_name = "memory"

    def __init__(self):
        self._regions: Dict[str, Dict[str, Any]] = {}
        self._generations: Dict[str, int] = {}
        self._in_flight: Dict[Tuple[str, str], threading.Event] = {}
        self._counters: Dict[str, int] = {
            "hits": 0,
            "misses": 0,
            "stores": 0,
            "discarded_stores": 0,
            "compute_errors": 0,
            "region_clears": 0,
        }
        self._lock = threading.RLock()

    def get_or_compute(
        self, key: CacheKey, region: CacheRegion, compute: Callable[[], V]
    ) -> V:
        """Return the cached value or compute, store and return it."""
        with tracer.start_as_current_span("cache_store.get_or_compute") as span:
            span.set_attribute("cache.backend", self.backend_name)
            span.set_attribute("cache.region", region.name)
            flight_key = (region.name, key.value)

            while True:
                with self._lock:
                    entries = self._regions.get(region.name)
                    if entries is not None and key.value in entries:
                        self._counters["hits"] += 1
                        span.set_attribute("cache.hit", True)
                        logger.debug(
                            f"Cache hit: {key.value}",
                            extra={"region": region.name},
                        )
                        return entries[key.value]

                    event = self._in_flight.get(flight_key)
                    if event is None:
                        event = threading.Event()
                        self._in_flight[flight_key] = event
                        generation = self._generations.get(region.name, 0)
                        break

                # Another thread is computing this key; re-check once it finishes
                event.wait()

            span.set_attribute("cache.hit", False)
            try:
                with self._lock:
                    self._counters["misses"] += 1
                logger.debug(f"Cache miss: {key.value}", extra={"region": region.name})

                try:
                    value = compute()
                except Exception:
                    with self._lock:
                        self._counters["compute_errors"] += 1
                    raise

                self._store(key, region, value, generation)
                return value

            finally:
                with self._lock:
                    self._in_flight.pop(flight_key, None)
                event.set()

    def _store(
        self, key: CacheKey, region: CacheRegion, value: Any, generation: int
    ) -> None:
        with self._lock:
            if self._generations.get(region.name, 0) != generation:
                self._counters["discarded_stores"] += 1
                logger.debug(
                    f"Region cleared during compute, not storing {key.value}",
                    extra={"region": region.name},
                )
                return

            self._regions.setdefault(region.name, {})[key.value] = value
            self._counters["stores"] += 1

    def clear_region(self, region: CacheRegion) -> None:
        """Drop every entry of the region."""
        with tracer.start_as_current_span("cache_store.clear_region") as span:
            span.set_attribute("cache.backend", self.backend_name)
            span.set_attribute("cache.region", region.name)

            with self._lock:
                entries = self._regions.pop(region.name, None)
                self._generations[region.name] = (
                    self._generations.get(region.name, 0) + 1
                )
                self._counters["region_clears"] += 1

            count = len(entries) if entries else 0
            span.set_attribute("cache.cleared_entries", count)
            logger.info(
                f"Cleared cache region {region.name}",
                extra={"region": region.name, "count": count},
            )

    def entry_count(self, region: Optional[CacheRegion] = None) -> int:
        """Number of stored entries in one region, or in all regions."""
        with self._lock:
            if region is not None:
                return len(self._regions.get(region.name, {}))
            return sum(len(entries) for entries in self._regions.values())

    def get_metrics(self) -> CacheStatistics:
        """Get a snapshot of store counters."""
        with self._lock:
            return CacheStatistics(backend=self.backend_name, **self._counters)

    def health_check(self) -> Dict[str, Any]:
        """Report store health."""
        with self._lock:
            return {
                "status": "healthy",
                "backend": self.backend_name,
                "regions": len(self._regions),
                "entries": sum(len(entries) for entries in self._regions.values()),
            }
