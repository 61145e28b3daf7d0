"""Size-bounded least-recently-used cache."""

from __future__ import annotations

from collections import OrderedDict
from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LruCache(Generic[K, V]):
    """A cache that evicts the least recently used entry when full."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("LRU cache size must be greater than zero")
        self.size = size
        self._entries: OrderedDict[K, V] = OrderedDict()

    def add(self, key: K, value: V) -> bool:
        """Store a value; return True if it replaced an existing one."""
        existed = key in self._entries
        self._entries[key] = value
        self._entries.move_to_end(key)
        if len(self._entries) > self.size:
            self._entries.popitem(last=False)
        return existed

    def purge(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def get(self, key: K) -> V | None:
        """Return the cached value and mark it most recently used, or None."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]

    def remove(self, key: K) -> bool:
        """Remove a key; return True if it was present."""
        if key in self._entries:
            del self._entries[key]
            return True
        return False

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries