"""
Cache Store Infrastructure Module

Cache store backends implementing the cache domain's store interface:
- InMemoryCacheStore: process-local, thread-safe store
- RedisCacheStore: Redis-backed store with region hashes
"""

from .exceptions import (
    CacheStoreConnectionException,
    CacheStoreException,
    CacheStoreHTTPException,
    CacheStoreOperationException,
    CacheStoreSerializationException,
)
from .memory_store import InMemoryCacheStore
from .redis_store import RedisCacheStore

__all__ = [
    # Stores
    "InMemoryCacheStore",
    "RedisCacheStore",
    # Exceptions
    "CacheStoreException",
    "CacheStoreConnectionException",
    "CacheStoreOperationException",
    "CacheStoreSerializationException",
    "CacheStoreHTTPException",
]
