"""Turns raw input into key/button events and derived cursor and wheel data."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import IntFlag
from typing import Callable, Dict, Iterable, Optional, TypeVar, Union

from .events import (
    InputEventMetadata,
    KeyboardKeyEvent,
    KeyButtonState,
    MouseButtonEvent,
    MouseCursorPosEvent,
    MouseWheelScrollEvent,
    Vec2,
    has_flag,
)
from .mappings import KeyboardKey, MouseButton
from .raw_input import InputAction, RawInputHandler
from .sized_queue import SizedQueue

__all__ = [
    "KEY_PRESS_MIN_DURATION_MS",
    "KEY_RELEASE_DURATION_MS",
    "DOUBLE_CLICK_MAX_INTERVAL_MS",
    "DOUBLE_CLICK_MIN_INTERVAL_MS",
    "KEY_HOLD_MIN_DURATION_MS",
    "SAMPLE_INTERVAL",
    "MOUSE_WHEEL_NUM_SAMPLES",
    "MOUSE_CURSOR_NUM_SAMPLES",
    "MovementDirection",
    "InputArena",
]

KEY_PRESS_MIN_DURATION_MS = 8
KEY_RELEASE_DURATION_MS = 12
DOUBLE_CLICK_MAX_INTERVAL_MS = 500
DOUBLE_CLICK_MIN_INTERVAL_MS = 20
KEY_HOLD_MIN_DURATION_MS = 35

# Minimum spacing, in seconds, between recorded cursor and wheel samples.
SAMPLE_INTERVAL = 0.016

MOUSE_WHEEL_NUM_SAMPLES = 8
MOUSE_CURSOR_NUM_SAMPLES = 16

_DIRECTION_THRESHOLD = 128


class MovementDirection(IntFlag):
    """Directions of cursor movement; may be combined."""

    NONE = 0
    UP = 1 << 0
    DOWN = 1 << 1
    LEFT = 1 << 2
    RIGHT = 1 << 3


@dataclass(frozen=True)
class _WheelSample:
    raw_scroll_offset: Vec2
    timestamp: float


@dataclass(frozen=True)
class _CursorSample:
    pos: Vec2
    last_pos: Vec2
    timestamp: float

    @property
    def delta(self) -> Vec2:
        return self.pos - self.last_pos


_ButtonLike = TypeVar("_ButtonLike", KeyboardKeyEvent, MouseButtonEvent)


def _whole_ms(seconds: float) -> int:
    return int(seconds * 1000)


def _mean(vectors: Iterable[Vec2]) -> Vec2:
    total = Vec2()
    count = 0
    for vector in vectors:
        total = total + vector
        count += 1
    if count == 0:
        return Vec2()
    return total / count


def _advance(event: _ButtonLike, action: InputAction, now: float) -> _ButtonLike:
    """Return the next state of a key or button event given its raw action."""
    kind = type(event)
    was_down = has_flag(event.state, KeyButtonState.PRESS) or has_flag(
        event.state, KeyButtonState.HOLD
    )
    elapsed_ms = _whole_ms(now - event.metadata.timestamp)

    if action == InputAction.RELEASE:
        if elapsed_ms < KEY_RELEASE_DURATION_MS:
            return event
        if was_down:
            return kind(
                KeyButtonState.RELEASE,
                KeyButtonState.RELEASE,
                InputEventMetadata(now),
            )
        return kind(
            KeyButtonState.NONE,
            event.last_significant_state,
            InputEventMetadata(event.metadata.timestamp, event.metadata.duration),
        )

    if action == InputAction.PRESS:
        if (
            has_flag(event.last_significant_state, KeyButtonState.RELEASE)
            and DOUBLE_CLICK_MIN_INTERVAL_MS < elapsed_ms < DOUBLE_CLICK_MAX_INTERVAL_MS
        ):
            return kind(
                KeyButtonState.DOUBLE_PRESS,
                KeyButtonState.DOUBLE_PRESS,
                InputEventMetadata(now, elapsed_ms / 1000),
            )
        if was_down and elapsed_ms < KEY_HOLD_MIN_DURATION_MS:
            return kind(
                KeyButtonState.HOLD,
                KeyButtonState.HOLD,
                InputEventMetadata(
                    now, event.metadata.duration + now - event.metadata.timestamp
                ),
            )
        return kind(
            KeyButtonState.PRESS,
            KeyButtonState.PRESS,
            InputEventMetadata(now),
        )

    return event


class InputArena:
    """Processes raw input into high-level events and derived motion data."""

    def __init__(
        self,
        handler: RawInputHandler,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self._handler = handler
        self._clock = clock if clock is not None else time.perf_counter
        now = self._clock()

        self._key_events: Dict[int, KeyboardKeyEvent] = {
            int(key): KeyboardKeyEvent(metadata=InputEventMetadata(now))
            for key in KeyboardKey
        }
        self._button_events: Dict[int, MouseButtonEvent] = {
            int(button): MouseButtonEvent(metadata=InputEventMetadata(now))
            for button in MouseButton
        }
        self._unmapped_key = KeyboardKeyEvent(metadata=InputEventMetadata(now))
        self._unmapped_button = MouseButtonEvent(metadata=InputEventMetadata(now))
        self._scroll_event = MouseWheelScrollEvent(metadata=InputEventMetadata(now))
        self._cursor_event = MouseCursorPosEvent(metadata=InputEventMetadata(now))

        self._wheel_samples: SizedQueue[_WheelSample] = SizedQueue(
            MOUSE_WHEEL_NUM_SAMPLES
        )
        self._cursor_samples: SizedQueue[_CursorSample] = SizedQueue(
            MOUSE_CURSOR_NUM_SAMPLES
        )
        self._cursor_samples.push(_CursorSample(Vec2(), Vec2(), now))
        self._wheel_samples.push(_WheelSample(Vec2(), now))

    def update(self) -> None:
        """Poll the raw handler once and refresh every event and sample."""
        now = self._clock()
        handler = self._handler

        for key in KeyboardKey:
            if not handler.is_active():
                break
            code = int(key)
            self._key_events[code] = _advance(
                self._key_events[code], handler.key_input(key), now
            )

        for button in MouseButton:
            if not handler.is_active():
                break
            code = int(button)
            self._button_events[code] = _advance(
                self._button_events[code], handler.mouse_button_input(button), now
            )

        self._update_cursor(now)
        self._update_wheel(now)

    def _update_cursor(self, now: float) -> None:
        last_sample = self._cursor_samples.back()
        if not self._handler.is_active():
            self._cursor_samples.push(_CursorSample(Vec2(), last_sample.pos, now))
            return

        pos = self._handler.cursor_pos_input()
        self._cursor_event = MouseCursorPosEvent(
            pos, self._cursor_event.raw_pos, InputEventMetadata(now)
        )
        if now - last_sample.timestamp > SAMPLE_INTERVAL:
            self._cursor_samples.push(_CursorSample(pos, last_sample.pos, now))

    def _update_wheel(self, now: float) -> None:
        handler = self._handler
        if not handler.scroll_input_available() or not handler.is_active():
            self._wheel_samples.push(_WheelSample(Vec2(), now))
            return

        while handler.scroll_input_available():
            offset = handler.pop_scroll_input()
            self._scroll_event = MouseWheelScrollEvent(
                offset,
                InputEventMetadata(now, self._scroll_event.metadata.duration),
            )
            if now - self._wheel_samples.back().timestamp > SAMPLE_INTERVAL:
                self._wheel_samples.push(_WheelSample(offset, now))

    def key_event(self, key: Union[KeyboardKey, int]) -> KeyboardKeyEvent:
        """Return the current event of ``key``; unknown codes give an idle event."""
        return self._key_events.get(int(key), self._unmapped_key)

    def mouse_button_event(self, button: Union[MouseButton, int]) -> MouseButtonEvent:
        """Return the current event of ``button``; unknown codes give an idle event."""
        return self._button_events.get(int(button), self._unmapped_button)

    def cursor_pos_event(self) -> MouseCursorPosEvent:
        """Return the latest cursor position event."""
        return self._cursor_event

    def wheel_scroll_event(self) -> MouseWheelScrollEvent:
        """Return the latest wheel scroll event."""
        return self._scroll_event

    def wheel_offset(self) -> Vec2:
        """Return the latest raw scroll offset."""
        return self._scroll_event.raw_scroll_offset

    def averaged_wheel_deltas(self) -> Vec2:
        """Return the mean scroll offset over the kept samples."""
        return _mean(sample.raw_scroll_offset for sample in self._wheel_samples)

    def _wheel_span(self) -> float:
        if len(self._wheel_samples) == 0:
            return 0.0
        return self._wheel_samples.back().timestamp - self._wheel_samples.front().timestamp

    def wheel_speed(self) -> Vec2:
        """Return the averaged scroll delta per second across the sample span."""
        span = self._wheel_span()
        if span == 0:
            return Vec2()
        return self.averaged_wheel_deltas() / span

    def wheel_acceleration(self) -> Vec2:
        """Return the wheel speed divided by the sample span."""
        span = self._wheel_span()
        if span == 0:
            return Vec2()
        return self.averaged_wheel_deltas() / span / span

    def cursor_position(self) -> Vec2:
        """Return the latest cursor position."""
        return self._cursor_event.raw_pos

    def cursor_delta(self) -> Vec2:
        """Return the movement between the last two cursor positions."""
        return self._cursor_event.raw_pos - self._cursor_event.last_raw_pos

    def averaged_cursor_deltas(self) -> Vec2:
        """Return the mean cursor movement over the kept samples."""
        return _mean(sample.delta for sample in self._cursor_samples)

    def _cursor_span(self) -> float:
        if len(self._cursor_samples) == 0:
            return 0.0
        return (
            self._cursor_samples.back().timestamp
            - self._cursor_samples.front().timestamp
        )

    def cursor_speed(self) -> Vec2:
        """Return the averaged cursor delta per second across the sample span."""
        span = self._cursor_span()
        if span == 0:
            return Vec2()
        return self.averaged_cursor_deltas() / span

    def cursor_linear_speed(self) -> float:
        """Return the length of the cursor speed."""
        return self.cursor_speed().length()

    def cursor_acceleration(self) -> Vec2:
        """Return the cursor speed divided by the sample span."""
        span = self._cursor_span()
        if span == 0:
            return Vec2()
        return self.averaged_cursor_deltas() / span / span

    def cursor_linear_acceleration(self) -> float:
        """Return the length of the cursor acceleration."""
        return self.cursor_acceleration().length()

    def cursor_movement_direction(self) -> MovementDirection:
        """Classify the averaged cursor movement into directions."""
        delta = self.averaged_cursor_deltas()
        if delta.length() < _DIRECTION_THRESHOLD:
            return MovementDirection.NONE

        direction = MovementDirection.NONE
        if abs(delta.x) > _DIRECTION_THRESHOLD:
            direction |= MovementDirection.LEFT if delta.x < 0 else MovementDirection.RIGHT
        if abs(delta.y) > _DIRECTION_THRESHOLD:
            direction |= MovementDirection.UP if delta.y < 0 else MovementDirection.DOWN
        return direction