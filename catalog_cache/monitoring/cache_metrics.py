"""
Catalog Cache Prometheus Metrics

Exposes cache store counters in the Prometheus text format. Counters live in
the store; each render samples them into gauges of a private registry.
"""

from typing import Optional

from prometheus_client import CollectorRegistry, Gauge, generate_latest

from ..domain.cache.value_objects import CacheRegion, CacheStatistics

COUNTER_FIELDS = (
    "hits",
    "misses",
    "stores",
    "discarded_stores",
    "compute_errors",
    "region_clears",
    "store_errors",
)


class CacheMetricsExporter:
    """Render cache statistics for Prometheus scraping."""

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry or CollectorRegistry()

        self.prom_counters = {
            name: Gauge(
                f"catalog_cache_{name}",
                f"Cache store {name.replace('_', ' ')} since start",
                ["backend", "region"],
                registry=self.registry,
            )
            for name in COUNTER_FIELDS
        }
        self.prom_hit_ratio = Gauge(
            "catalog_cache_hit_ratio",
            "Cache hit ratio (0-1)",
            ["backend", "region"],
            registry=self.registry,
        )

    def update(self, statistics: CacheStatistics, region: CacheRegion) -> None:
        """Copy a statistics snapshot into the gauges."""
        labels = {"backend": statistics.backend, "region": region.name}
        for name, gauge in self.prom_counters.items():
            gauge.labels(**labels).set(getattr(statistics, name))
        self.prom_hit_ratio.labels(**labels).set(statistics.hit_ratio)

    def render(self, statistics: CacheStatistics, region: CacheRegion) -> bytes:
        """Update the gauges and return the exposition text."""
        self.update(statistics, region)
        return generate_latest(self.registry)
