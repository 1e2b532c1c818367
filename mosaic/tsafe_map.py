"""A dictionary guarded by a lock for use across threads."""

from __future__ import annotations

import threading
from typing import Callable, Dict, Generic, Mapping, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")

__all__ = ["ThreadSafeMap"]


class ThreadSafeMap(Generic[K, V]):
    """A mapping whose every operation holds an internal lock."""

    def __init__(self) -> None:
        self._map: Dict[K, V] = {}
        self._lock = threading.Lock()

    def insert(self, key: K, value: V) -> None:
        """Set ``key`` to ``value``, replacing any existing value."""
        with self._lock:
            self._map[key] = value

    def insert_if_absent(self, key: K, value: V) -> None:
        """Set ``key`` to ``value`` only if the key is not present."""
        with self._lock:
            self._map.setdefault(key, value)

    def insert_all(self, other: Mapping[K, V]) -> None:
        """Insert every pair from ``other``; on failure nothing is changed."""
        with self._lock:
            backup = dict(self._map)
            try:
                for key, value in other.items():
                    self._map[key] = value
            except BaseException:
                self._map = backup
                raise

    def transform(self, func: Callable[[Dict[K, V]], None]) -> None:
        """Call ``func`` on the underlying dict; roll back if it raises."""
        with self._lock:
            backup = dict(self._map)
            try:
                func(self._map)
            except BaseException:
                self._map = backup
                raise

    def get(self, key: K) -> Optional[V]:
        """Return the value for ``key``, or None if absent."""
        with self._lock:
            return self._map.get(key)

    def erase(self, key: K) -> bool:
        """Remove ``key``; return whether it was present."""
        with self._lock:
            if key in self._map:
                del self._map[key]
                return True
            return False

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._map.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._map

    def __len__(self) -> int:
        with self._lock:
            return len(self._map)