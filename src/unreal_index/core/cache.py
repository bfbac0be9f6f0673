from __future__ import annotations

from collections import OrderedDict
from collections.abc import Iterator
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")

DEFAULT_CACHE_SIZE = 50_000


class LruCache(Generic[K, V]):
    """Bounded mapping that evicts the least recently used entry on insert."""

    def __init__(self, max_size: int = DEFAULT_CACHE_SIZE) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self._max_size = max_size
        self._entries: OrderedDict[K, V] = OrderedDict()

    @property
    def max_size(self) -> int:
        return self._max_size

    def get(self, key: K) -> V | None:
        value = self._entries.get(key)
        if value is not None:
            self._entries.move_to_end(key)
        return value

    def put(self, key: K, value: V) -> None:
        self._entries[key] = value
        self._entries.move_to_end(key)
        while len(self._entries) > self._max_size:
            self._entries.popitem(last=False)

    def size(self) -> int:
        return len(self._entries)

    def values(self) -> Iterator[V]:
        """Iterate values from least to most recently used without touching recency."""
        return iter(list(self._entries.values()))

    def __contains__(self, key: object) -> bool:
        return key in self._entries
