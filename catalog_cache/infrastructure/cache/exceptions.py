"""
Cache Store Infrastructure Exceptions

Exceptions raised by cache store backends.
Store failures are never swallowed; the original error is always chained.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException


class CacheStoreException(Exception):
    """Base exception for cache store errors.

    All cache store backends raise this or its subclasses for their own
    failures. Exceptions raised by compute callables are not wrapped.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class CacheStoreConnectionException(CacheStoreException):
    """Raised when the cache backend cannot be reached."""

    def __init__(
        self,
        message: str = "Cache store connection failed",
        url: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        details = {}
        if url:
            details["url"] = url
        if original_error:
            details["original_error"] = str(original_error)
            details["original_error_type"] = type(original_error).__name__

        super().__init__(
            message=message, error_code="CACHE_STORE_CONNECTION_ERROR", details=details
        )
        if original_error:
            self.__cause__ = original_error


class CacheStoreOperationException(CacheStoreException):
    """Raised when a cache backend command fails."""

    def __init__(
        self,
        operation: str,
        region: Optional[str] = None,
        key: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        details = {"operation": operation}
        if region:
            details["region"] = region
        if key:
            details["key"] = key
        if original_error:
            details["original_error"] = str(original_error)
            details["original_error_type"] = type(original_error).__name__

        super().__init__(
            message=f"Cache store operation '{operation}' failed",
            error_code="CACHE_STORE_OPERATION_ERROR",
            details=details,
        )
        if original_error:
            self.__cause__ = original_error


class CacheStoreSerializationException(CacheStoreException):
    """Raised when a value cannot be written to or read from the backend."""

    def __init__(
        self,
        key: str,
        region: str,
        original_error: Optional[Exception] = None,
    ):
        details = {"key": key, "region": region}
        if original_error:
            details["original_error"] = str(original_error)
            details["original_error_type"] = type(original_error).__name__

        super().__init__(
            message=f"Cache value for key '{key}' could not be serialized",
            error_code="CACHE_STORE_SERIALIZATION_ERROR",
            details=details,
        )
        if original_error:
            self.__cause__ = original_error


# HTTP Exceptions for API layer
class CacheStoreHTTPException(HTTPException):
    """HTTP exception wrapper for cache store errors."""

    def __init__(self, store_exception: CacheStoreException, status_code: int = 503):
        self.store_exception = store_exception
        super().__init__(
            status_code=status_code,
            detail={
                "error": store_exception.error_code,
                "message": store_exception.message,
                "details": store_exception.details,
            },
        )
