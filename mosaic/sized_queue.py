"""A fixed-capacity queue that discards its oldest element when full."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

__all__ = ["SizedQueue"]


class SizedQueue(Generic[T]):
    """Newest elements sit at the front; the oldest at the back is dropped when full."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("Capacity must be greater than 0")
        self._capacity = capacity
        self._data: deque[T] = deque(maxlen=capacity)

    def capacity(self) -> int:
        """Return the fixed maximum number of elements."""
        return self._capacity

    def push(self, value: T) -> None:
        """Add ``value`` at the front, dropping the back element if full."""
        self._data.appendleft(value)

    def pop(self) -> Optional[T]:
        """Remove and return the front element, or None if empty."""
        if not self._data:
            return None
        return self._data.popleft()

    def front(self) -> T:
        """Return the front element; raise IndexError if empty."""
        if not self._data:
            raise IndexError("Queue is empty")
        return self._data[0]

    def back(self) -> T:
        """Return the back element; raise IndexError if empty."""
        if not self._data:
            raise IndexError("Queue is empty")
        return self._data[-1]

    def clear(self) -> None:
        """Remove every element."""
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __getitem__(self, index: int) -> T:
        if not self._data:
            raise IndexError("Queue is empty")
        if index < 0 or index >= len(self._data):
            raise IndexError("Index out of range")
        return self._data[index]

    def __repr__(self) -> str:
        return f"SizedQueue(capacity={self._capacity}, items={list(self._data)!r})"