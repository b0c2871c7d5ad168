"""
Cache Value Objects

Immutable value objects for cache domain following DDD principles.
Provides type safety for cache keys, regions and store statistics.
"""

from dataclasses import dataclass
from enum import Enum, Flag
from typing import Any, Optional

from pydantic import BaseModel, Field

from ...constants import CACHE_KEY_PREFIX, CACHE_KEY_SEPARATOR, CATALOG_REGION_NAME


def render_key_part(value: Any) -> Optional[str]:
    """
    Render a single call argument as a cache key part.

    None stays None so the key builder can keep the argument's position.
    Enum members render their name. Flag combinations render their member
    names in definition order, followed by any undefined bits as an integer;
    an empty flag renders as "0". Sequences of arguments are joined with the
    key separator.
    """
    if value is None:
        return None
    if isinstance(value, Flag):
        return _render_flag(value)
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return CACHE_KEY_SEPARATOR.join(
            render_key_part(item) or "" for item in value
        )
    return str(value)


def _render_flag(value: Flag) -> str:
    bits = int(value.value)
    if bits == 0:
        return "0"

    names = []
    covered = 0
    for member in type(value).__members__.values():
        member_bits = int(member.value)
        if member_bits and _is_single_bit(member_bits) and member_bits & bits:
            if not covered & member_bits:
                names.append(member.name)
                covered |= member_bits

    leftover = bits & ~covered
    if leftover:
        names.append(str(leftover))
    return CACHE_KEY_SEPARATOR.join(names)


def _is_single_bit(value: int) -> bool:
    return value & (value - 1) == 0


@dataclass(frozen=True)
class CacheKey:
    """
    Immutable cache key value object.

    Keys are the region prefix, the operation namespace and the positional
    parameters joined by ", ". Separators inside parameter values are not
    escaped.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate cache key format."""
        if not self.value:
            raise ValueError("Cache key cannot be empty")

    @classmethod
    def build(cls, namespace: str, *parts: Optional[str]) -> "CacheKey":
        """
        Build a cache key for an operation call.

        Args:
            namespace: Operation identity, e.g. "ItemService.GetById"
            *parts: Positional parameters; None renders as an empty segment

        Returns:
            Deterministic cache key
        """
        if not namespace:
            raise ValueError("Cache key namespace cannot be empty")

        segments = [namespace]
        segments.extend("" if part is None else part for part in parts)
        return cls(CACHE_KEY_PREFIX + CACHE_KEY_SEPARATOR.join(segments))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CacheRegion:
    """
    Cache region value object.

    A named partition of the cache store that is cleared as a whole.
    """

    name: str

    def __post_init__(self) -> None:
        """Validate region name."""
        if not self.name:
            raise ValueError("Cache region name cannot be empty")
        if len(self.name) > 100:
            raise ValueError("Cache region name too long (max 100 characters)")
        if any(char.isspace() for char in self.name):
            raise ValueError("Cache region name cannot contain whitespace")

    @classmethod
    def catalog(cls) -> "CacheRegion":
        """Region shared by every cached catalog read."""
        return cls(CATALOG_REGION_NAME)

    def __str__(self) -> str:
        return self.name


class CacheStatistics(BaseModel):
    """Cache store counters for monitoring."""

    backend: str = Field(..., description="Cache store backend name")
    hits: int = Field(0, ge=0, description="Lookups served from the cache")
    misses: int = Field(0, ge=0, description="Lookups that invoked compute")
    stores: int = Field(0, ge=0, description="Computed values written to the cache")
    discarded_stores: int = Field(
        0, ge=0, description="Computed values dropped because the region was cleared"
    )
    compute_errors: int = Field(0, ge=0, description="Compute calls that raised")
    region_clears: int = Field(0, ge=0, description="Region clear operations")
    store_errors: int = Field(0, ge=0, description="Backend failures")

    @property
    def total_lookups(self) -> int:
        """Total get-or-compute calls."""
        return self.hits + self.misses

    @property
    def hit_ratio(self) -> float:
        """Fraction of lookups served from the cache."""
        total = self.total_lookups
        return self.hits / total if total else 0.0
