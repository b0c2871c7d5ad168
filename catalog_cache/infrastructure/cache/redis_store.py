"""
Redis Cache Store

Redis implementation of the cache store repository interface.

Each region is one Redis hash, so clearing a region is a single DEL. A
per-region generation counter is bumped in the same MULTI block; values are
stored under WATCH of that counter, which aborts a store whose compute
started before a concurrent clear.
"""

import logging
import pickle
import threading
from typing import Any, Callable, Dict, Optional, TypeVar

import redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError, TimeoutError as RedisTimeoutError, WatchError

from opentelemetry import trace

from ...domain.cache.repository_interfaces import CacheStoreAdapter
from ...domain.cache.value_objects import CacheKey, CacheRegion, CacheStatistics
from .exceptions import (
    CacheStoreConnectionException,
    CacheStoreException,
    CacheStoreOperationException,
    CacheStoreSerializationException,
)

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

V = TypeVar("V")


class RedisCacheStore(CacheStoreAdapter):
    """Redis-backed cache store; values are pickled."""

    backend_name = "redis"

    def __init__(
        self,
        client: redis.Redis,
        key_prefix: str = "catalog-cache",
        region_ttl_seconds: Optional[int] = None,
    ):
        if region_ttl_seconds is not None and region_ttl_seconds <= 0:
            raise ValueError("Region TTL must be positive")

        self._client = client
        self.key_prefix = key_prefix
        self.region_ttl_seconds = region_ttl_seconds
        self._counters: Dict[str, int] = {
            "hits": 0,
            "misses": 0,
            "stores": 0,
            "discarded_stores": 0,
            "compute_errors": 0,
            "region_clears": 0,
            "store_errors": 0,
        }
        self._counters_lock = threading.Lock()

    @classmethod
    def from_url(
        cls,
        url: str,
        key_prefix: str = "catalog-cache",
        socket_timeout: float = 5.0,
        region_ttl_seconds: Optional[int] = None,
    ) -> "RedisCacheStore":
        """Create a store with its own client for the given Redis URL."""
        client = redis.Redis.from_url(
            url,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
        )
        return cls(client, key_prefix=key_prefix, region_ttl_seconds=region_ttl_seconds)

    def _region_key(self, region: CacheRegion) -> str:
        return f"{self.key_prefix}:region:{region.name}"

    def _generation_key(self, region: CacheRegion) -> str:
        return f"{self.key_prefix}:generation:{region.name}"

    def _increment(self, counter: str) -> None:
        with self._counters_lock:
            self._counters[counter] += 1

    def _translate_error(
        self,
        operation: str,
        error: RedisError,
        region: CacheRegion,
        key: Optional[CacheKey] = None,
    ) -> CacheStoreException:
        self._increment("store_errors")
        if isinstance(error, (RedisConnectionError, RedisTimeoutError)):
            return CacheStoreConnectionException(
                message=f"Redis unavailable during '{operation}'",
                original_error=error,
            )
        return CacheStoreOperationException(
            operation=operation,
            region=region.name,
            key=key.value if key else None,
            original_error=error,
        )

    def get_or_compute(
        self, key: CacheKey, region: CacheRegion, compute: Callable[[], V]
    ) -> V:
        """Return the cached value or compute, store and return it."""
        with tracer.start_as_current_span("cache_store.get_or_compute") as span:
            span.set_attribute("cache.backend", self.backend_name)
            span.set_attribute("cache.region", region.name)

            try:
                with self._client.pipeline() as pipe:
                    pipe.hget(self._region_key(region), key.value)
                    pipe.get(self._generation_key(region))
                    payload, generation = pipe.execute()
            except RedisError as e:
                logger.exception(f"Failed to read cache entry {key.value}: {e}")
                span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))
                raise self._translate_error("get", e, region, key) from e

            if payload is not None:
                self._increment("hits")
                span.set_attribute("cache.hit", True)
                logger.debug(f"Cache hit: {key.value}", extra={"region": region.name})
                return self._deserialize(payload, key, region)

            self._increment("misses")
            span.set_attribute("cache.hit", False)
            logger.debug(f"Cache miss: {key.value}", extra={"region": region.name})

            try:
                value = compute()
            except Exception:
                self._increment("compute_errors")
                raise

            self._store(key, region, value, generation)
            return value

    def _store(
        self, key: CacheKey, region: CacheRegion, value: Any, generation: Any
    ) -> None:
        payload = self._serialize(value, key, region)
        region_key = self._region_key(region)
        generation_key = self._generation_key(region)

        try:
            with self._client.pipeline() as pipe:
                pipe.watch(generation_key)
                if pipe.get(generation_key) != generation:
                    self._increment("discarded_stores")
                    logger.debug(
                        f"Region cleared during compute, not storing {key.value}",
                        extra={"region": region.name},
                    )
                    return

                pipe.multi()
                pipe.hset(region_key, key.value, payload)
                if self.region_ttl_seconds:
                    pipe.expire(region_key, self.region_ttl_seconds)
                pipe.execute()

            self._increment("stores")

        except WatchError:
            self._increment("discarded_stores")
            logger.debug(
                f"Region cleared while storing, not storing {key.value}",
                extra={"region": region.name},
            )
        except RedisError as e:
            logger.exception(f"Failed to store cache entry {key.value}: {e}")
            raise self._translate_error("set", e, region, key) from e

    def _serialize(self, value: Any, key: CacheKey, region: CacheRegion) -> bytes:
        try:
            return pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL)
        except (pickle.PicklingError, TypeError, AttributeError) as e:
            self._increment("store_errors")
            raise CacheStoreSerializationException(
                key=key.value, region=region.name, original_error=e
            ) from e

    def _deserialize(self, payload: bytes, key: CacheKey, region: CacheRegion) -> Any:
        try:
            return pickle.loads(payload)
        except Exception as e:
            self._increment("store_errors")
            raise CacheStoreSerializationException(
                key=key.value, region=region.name, original_error=e
            ) from e

    def clear_region(self, region: CacheRegion) -> None:
        """Drop the region hash and bump its generation in one transaction."""
        with tracer.start_as_current_span("cache_store.clear_region") as span:
            span.set_attribute("cache.backend", self.backend_name)
            span.set_attribute("cache.region", region.name)

            try:
                with self._client.pipeline() as pipe:
                    pipe.delete(self._region_key(region))
                    pipe.incr(self._generation_key(region))
                    deleted, generation = pipe.execute()
            except RedisError as e:
                logger.exception(f"Failed to clear cache region {region.name}: {e}")
                span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))
                raise self._translate_error("clear_region", e, region) from e

            self._increment("region_clears")
            span.set_attribute("cache.generation", generation)
            logger.info(
                f"Cleared cache region {region.name}",
                extra={
                    "region": region.name,
                    "existed": bool(deleted),
                    "generation": generation,
                },
            )

    def entry_count(self, region: CacheRegion) -> int:
        """Number of stored entries in a region."""
        try:
            return self._client.hlen(self._region_key(region))
        except RedisError as e:
            raise self._translate_error("hlen", e, region) from e

    def get_metrics(self) -> CacheStatistics:
        """Get a snapshot of this process's store counters."""
        with self._counters_lock:
            return CacheStatistics(backend=self.backend_name, **self._counters)

    def health_check(self) -> Dict[str, Any]:
        """Ping Redis and report store health."""
        try:
            self._client.ping()
            return {
                "status": "healthy",
                "backend": self.backend_name,
                "key_prefix": self.key_prefix,
            }
        except RedisError as e:
            logger.error(f"Redis cache store health check failed: {e}")
            return {
                "status": "unhealthy",
                "backend": self.backend_name,
                "key_prefix": self.key_prefix,
                "error": str(e),
            }

    def close(self) -> None:
        """Close the underlying client's connections."""
        self._client.close()
