"""Configurable caching of resolved flag values, keyed by flag and context."""

from __future__ import annotations

import copy
import os
import re
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Generic, Hashable, Mapping, TypeVar, Union

from flagprov.inmemory import InMemoryCache
from flagprov.lru import LruCache
from flagprov.types import EvaluationContext

V = TypeVar("V")

_UINT_PATTERN = re.compile(r"\+?[0-9]+")


def _parse_uint(text: str | None) -> int | None:
    if text is None or not _UINT_PATTERN.fullmatch(text):
        return None
    return int(text)


class CacheType(str, Enum):
    """Which cache implementation backs the service."""

    LRU = "lru"
    IN_MEMORY = "mem"
    DISABLED = "disabled"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> CacheType:
        """Parse a cache type name case-insensitively; unknown names mean LRU."""
        try:
            return cls(value.lower())
        except ValueError:
            return cls.LRU


@dataclass
class CacheSettings:
    """Cache configuration; ttl is in seconds, None means entries never expire."""

    cache_type: CacheType = CacheType.LRU
    max_size: int = 1000
    ttl: float | None = 60.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CacheSettings:
        """Read FLAGD_CACHE, FLAGD_MAX_CACHE_SIZE and FLAGD_CACHE_TTL."""
        env = os.environ if environ is None else environ
        raw_type = env.get("FLAGD_CACHE")
        cache_type = CacheType.parse(raw_type) if raw_type is not None else CacheType.LRU
        max_size = _parse_uint(env.get("FLAGD_MAX_CACHE_SIZE"))
        ttl = _parse_uint(env.get("FLAGD_CACHE_TTL"))
        return cls(
            cache_type=cache_type,
            max_size=1000 if max_size is None else max_size,
            ttl=60.0 if ttl is None else float(ttl),
        )


def _field_key(value: Any) -> tuple[str, Hashable]:
    if isinstance(value, bool):
        return ("bool", value)
    if isinstance(value, int):
        return ("int", value)
    if isinstance(value, float):
        return ("float", value.hex())
    if isinstance(value, str):
        return ("str", value)
    if isinstance(value, datetime):
        return ("datetime", str(value))
    return ("struct", repr(value))


def _cache_key(flag_key: str, context: EvaluationContext) -> tuple[Hashable, ...]:
    fields = tuple(
        (name, _field_key(value))
        for name, value in sorted(context.custom_fields.items())
    )
    return (flag_key, context.targeting_key, fields)


@dataclass
class _CacheEntry(Generic[V]):
    value: V
    created_at: float


class CacheService(Generic[V]):
    """Thread-safe cache of flag values with optional time-to-live."""

    def __init__(
        self,
        settings: CacheSettings,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl = settings.ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._cache: Union[InMemoryCache, LruCache]
        if settings.cache_type is CacheType.LRU:
            self._cache = LruCache(settings.max_size)
        else:
            self._cache = InMemoryCache()
        self.enabled = settings.cache_type is not CacheType.DISABLED

    def get(self, flag_key: str, context: EvaluationContext) -> V | None:
        """Return a copy of the cached value, or None if absent or expired."""
        if not self.enabled:
            return None
        key = _cache_key(flag_key, context)
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                return None
            if self.ttl is not None and self._clock() - entry.created_at > self.ttl:
                self._cache.remove(key)
                return None
            return copy.deepcopy(entry.value)

    def add(self, flag_key: str, context: EvaluationContext, value: V) -> bool:
        """Cache a value; return True if it replaced an existing entry."""
        if not self.enabled:
            return False
        key = _cache_key(flag_key, context)
        entry = _CacheEntry(value=value, created_at=self._clock())
        with self._lock:
            return self._cache.add(key, entry)

    def disable(self) -> None:
        """Stop caching; later lookups miss and additions are ignored."""
        self.enabled = False