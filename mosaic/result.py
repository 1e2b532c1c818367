"""A success-or-failure value for railway-style error handling."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")

__all__ = ["ResultError", "Result", "ok", "err"]


class ResultError(RuntimeError):
    """Raised when the wrong side of a Result is accessed."""


class Result(Generic[T, E]):
    """Holds either a success value or an error value, never both."""

    __slots__ = ("_payload", "_is_error")

    def __init__(self, payload: Any, is_error: bool) -> None:
        self._payload = payload
        self._is_error = is_error

    def is_ok(self) -> bool:
        """Return True if this result holds a success value."""
        return not self._is_error

    def is_err(self) -> bool:
        """Return True if this result holds an error value."""
        return self._is_error

    def unwrap(self) -> T:
        """Return the success value, raising ResultError on an error result."""
        if self._is_error:
            raise ResultError("Attempted to access success from an error result")
        return self._payload

    def error(self) -> E:
        """Return the error value, raising ResultError on a success result."""
        if not self._is_error:
            raise ResultError("Attempted to access error from a success result")
        return self._payload

    def and_then(self, func: Callable[[T], "Result[Any, E]"]) -> "Result[Any, E]":
        """Apply ``func`` to the success value; pass an error through unchanged."""
        if self._is_error:
            return err(self._payload)
        return _checked(func(self._payload))

    def or_else(self, func: Callable[[E], "Result[T, Any]"]) -> "Result[T, Any]":
        """Apply ``func`` to the error value; pass a success through unchanged."""
        if not self._is_error:
            return ok(self._payload)
        return _checked(func(self._payload))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_error == other._is_error and self._payload == other._payload

    def __hash__(self) -> int:
        return hash((self._is_error, self._payload))

    def __repr__(self) -> str:
        kind = "err" if self._is_error else "ok"
        return f"{kind}({self._payload!r})"


def _checked(value: Any) -> Result:
    if not isinstance(value, Result):
        raise TypeError(
            f"chained function must return a Result, got {type(value).__name__}"
        )
    return value


def ok(value: T) -> Result[T, Any]:
    """Build a success result."""
    return Result(value, False)


def err(error: E) -> Result[Any, E]:
    """Build an error result."""
    return Result(error, True)