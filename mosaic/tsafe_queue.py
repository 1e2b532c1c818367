"""A FIFO queue guarded by a lock, with blocking pop."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

__all__ = ["ThreadSafeQueue"]


class ThreadSafeQueue(Generic[T]):
    """A first-in first-out queue safe for use across threads."""

    def __init__(self) -> None:
        self._queue: deque[T] = deque()
        self._cond = threading.Condition()

    def push(self, value: T) -> None:
        """Append ``value`` and wake one waiting consumer."""
        with self._cond:
            self._queue.append(value)
            self._cond.notify()

    def wait_and_pop(self, timeout: Optional[float] = None) -> T:
        """Block until an element is available and return it.

        Raises TimeoutError if ``timeout`` seconds pass first.
        """
        with self._cond:
            if not self._cond.wait_for(lambda: bool(self._queue), timeout):
                raise TimeoutError("no element became available")
            return self._queue.popleft()

    def try_pop(self) -> Optional[T]:
        """Return the oldest element without blocking, or None if empty."""
        with self._cond:
            if not self._queue:
                return None
            return self._queue.popleft()

    def empty(self) -> bool:
        """Return True if the queue holds no elements."""
        with self._cond:
            return not self._queue

    def __len__(self) -> int:
        with self._cond:
            return len(self._queue)