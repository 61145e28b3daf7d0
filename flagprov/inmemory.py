"""Unbounded dictionary-backed cache."""

from __future__ import annotations

from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class InMemoryCache(Generic[K, V]):
    """A cache with no eviction policy."""

    def __init__(self) -> None:
        self._entries: dict[K, V] = {}

    def add(self, key: K, value: V) -> bool:
        """Store a value; return True if it replaced an existing one."""
        existed = key in self._entries
        self._entries[key] = value
        return existed

    def purge(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def get(self, key: K) -> V | None:
        """Return the cached value, or None."""
        return self._entries.get(key)

    def remove(self, key: K) -> bool:
        """Remove a key; return True if it was present."""
        return self._entries.pop(key, _MISSING) is not _MISSING

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


_MISSING = object()