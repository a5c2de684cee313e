"""An LRU cache whose lookups avoid the ordering lock."""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Any, Dict, Hashable, List

__all__ = ["SyncMapCache"]


class _Entry:
    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value


_MISSING = object()


class SyncMapCache:
    """Fixed-capacity LRU cache with lock-free membership checks.

    Key lookups go to a plain dictionary without locking; only changes to
    the recency order take the lock.
    """

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._entries: Dict[Hashable, _Entry] = {}
        # Most recently used keys sit at the end.
        self._order: OrderedDict[Hashable, None] = OrderedDict()
        self._lock = threading.Lock()

    def _touch(self, key: Hashable) -> None:
        with self._lock:
            if key in self._order:
                self._order.move_to_end(key)

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for ``key`` and mark it most recently used."""
        entry = self._entries.get(key)
        if entry is None:
            return default
        self._touch(key)
        return entry.value

    def __getitem__(self, key: Hashable) -> Any:
        entry = self._entries.get(key)
        if entry is None:
            raise KeyError(key)
        self._touch(key)
        return entry.value

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if full."""
        entry = self._entries.get(key)
        if entry is not None:
            with self._lock:
                entry.value = value
                if key in self._order:
                    self._order.move_to_end(key)
            return

        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                entry.value = value
                self._order.move_to_end(key)
                return
            if self._order and len(self._order) >= self._capacity:
                oldest, _ = self._order.popitem(last=False)
                self._entries.pop(oldest, None)
            self._order[key] = None
            self._entries[key] = _Entry(value)

    def remove(self, key: Hashable) -> bool:
        """Drop ``key``; return whether it was present."""
        if self._entries.pop(key, None) is None:
            return False
        with self._lock:
            self._order.pop(key, None)
        return True

    def peek(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for ``key`` without changing the access order."""
        entry = self._entries.get(key, _MISSING)
        return default if entry is _MISSING else entry.value  # type: ignore[union-attr]

    def keys(self) -> List[Hashable]:
        """Return all keys, most recently used first."""
        with self._lock:
            return list(reversed(self._order))

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries = {}
            self._order = OrderedDict()

    def contains(self, key: Hashable) -> bool:
        """Return whether ``key`` is cached, without touching the order."""
        return key in self._entries

    @property
    def capacity(self) -> int:
        """The maximum number of entries."""
        return self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._order)

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, keys={self.keys()!r})"