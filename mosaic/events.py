"""Input event records, a small 2-D vector and flag helpers."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from enum import IntFlag

__all__ = [
    "Vec2",
    "KeyButtonState",
    "InputEventMetadata",
    "KeyboardKeyEvent",
    "MouseButtonEvent",
    "MouseCursorPosEvent",
    "MouseWheelScrollEvent",
    "has_flag",
]


@dataclass(frozen=True)
class Vec2:
    """An immutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.hypot(self.x, self.y)

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y


class KeyButtonState(IntFlag):
    """States shared by keyboard keys and mouse buttons."""

    NONE = 0
    RELEASE = 1 << 0
    PRESS = 1 << 1
    HOLD = 1 << 2
    DOUBLE_PRESS = 1 << 3


def has_flag(flags: int, flag: int) -> bool:
    """Return True if every bit of ``flag`` is set in ``flags``."""
    return (int(flags) & int(flag)) == int(flag)


def _now() -> float:
    return time.perf_counter()


@dataclass
class InputEventMetadata:
    """When an event happened and how long its state has lasted, in seconds."""

    timestamp: float = field(default_factory=_now)
    duration: float = 0.0


@dataclass
class KeyboardKeyEvent:
    """The processed state of one keyboard key."""

    state: KeyButtonState = KeyButtonState.NONE
    last_significant_state: KeyButtonState = KeyButtonState.NONE
    metadata: InputEventMetadata = field(default_factory=InputEventMetadata)


@dataclass
class MouseButtonEvent:
    """The processed state of one mouse button."""

    state: KeyButtonState = KeyButtonState.NONE
    last_significant_state: KeyButtonState = KeyButtonState.NONE
    metadata: InputEventMetadata = field(default_factory=InputEventMetadata)


@dataclass
class MouseCursorPosEvent:
    """The current and previous cursor positions."""

    raw_pos: Vec2 = Vec2()
    last_raw_pos: Vec2 = Vec2()
    metadata: InputEventMetadata = field(default_factory=InputEventMetadata)


@dataclass
class MouseWheelScrollEvent:
    """The latest mouse wheel scroll offset."""

    raw_scroll_offset: Vec2 = Vec2()
    metadata: InputEventMetadata = field(default_factory=InputEventMetadata)