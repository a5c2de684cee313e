"""A thread-safe least-recently-used cache guarded by a single lock."""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Any, Hashable, List

__all__ = ["Cache"]


class Cache:
    """Fixed-capacity LRU cache.

    The least recently used entry is evicted when a new key is added to a
    full cache. Every operation holds one lock, so instances can be shared
    between threads.
    """

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        # Most recently used entries sit at the end.
        self._data: OrderedDict[Hashable, Any] = OrderedDict()
        self._lock = threading.RLock()

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for ``key`` and mark it most recently used."""
        with self._lock:
            if key not in self._data:
                return default
            self._data.move_to_end(key)
            return self._data[key]

    def __getitem__(self, key: Hashable) -> Any:
        with self._lock:
            if key not in self._data:
                raise KeyError(key)
            self._data.move_to_end(key)
            return self._data[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if full."""
        with self._lock:
            if key in self._data:
                self._data[key] = value
                self._data.move_to_end(key)
                return
            if self._data and len(self._data) >= self._capacity:
                self._data.popitem(last=False)
            self._data[key] = value

    def remove(self, key: Hashable) -> bool:
        """Drop ``key``; return whether it was present."""
        with self._lock:
            if key in self._data:
                del self._data[key]
                return True
            return False

    def peek(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for ``key`` without changing the access order."""
        with self._lock:
            return self._data.get(key, default)

    def keys(self) -> List[Hashable]:
        """Return all keys, most recently used first."""
        with self._lock:
            return list(reversed(self._data))

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._data = OrderedDict()

    def contains(self, key: Hashable) -> bool:
        """Return whether ``key`` is cached, without touching the order."""
        with self._lock:
            return key in self._data

    @property
    def capacity(self) -> int:
        """The maximum number of entries."""
        return self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, keys={self.keys()!r})"