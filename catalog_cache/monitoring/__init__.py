"""
Catalog Cache Monitoring Module

Prometheus exposition of cache store counters.
"""

from .cache_metrics import CacheMetricsExporter

__all__ = ["CacheMetricsExporter"]
