"""Polled raw input state for one window, plus its queued scroll input."""

from __future__ import annotations

from collections import deque
from enum import IntEnum
from typing import Deque, Dict

from .events import Vec2
from .mappings import KeyboardKey, MouseButton

__all__ = ["InputAction", "RawInputHandler"]


class InputAction(IntEnum):
    """Raw action reported for a key or button, using the windowing library's codes."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class RawInputHandler:
    """Holds the raw state of keys, buttons and cursor, and queues scroll input.

    Keys, buttons and the cursor are polled; scroll offsets arrive through
    ``push_scroll`` and are consumed in arrival order.
    """

    def __init__(self, focused: bool = True) -> None:
        self._active = bool(focused)
        self._keys: Dict[int, InputAction] = {}
        self._buttons: Dict[int, InputAction] = {}
        self._cursor = Vec2()
        self._scroll_queue: Deque[Vec2] = deque()

    def is_active(self) -> bool:
        """Return True while the window has input focus."""
        return self._active

    def set_focused(self, focused: bool) -> None:
        """Record a focus change of the window."""
        self._active = bool(focused)

    def set_key(self, key: KeyboardKey, action: InputAction) -> None:
        """Record the raw action of a keyboard key."""
        self._keys[int(key)] = InputAction(action)

    def set_mouse_button(self, button: MouseButton, action: InputAction) -> None:
        """Record the raw action of a mouse button."""
        self._buttons[int(button)] = InputAction(action)

    def set_cursor_pos(self, x: float, y: float) -> None:
        """Record the cursor position."""
        self._cursor = Vec2(float(x), float(y))

    def push_scroll(self, x_offset: float, y_offset: float) -> None:
        """Queue one scroll offset."""
        self._scroll_queue.append(Vec2(float(x_offset), float(y_offset)))

    def key_input(self, key: KeyboardKey) -> InputAction:
        """Return the raw action of ``key``; keys never set are released."""
        return self._keys.get(int(key), InputAction.RELEASE)

    def mouse_button_input(self, button: MouseButton) -> InputAction:
        """Return the raw action of ``button``; buttons never set are released."""
        return self._buttons.get(int(button), InputAction.RELEASE)

    def cursor_pos_input(self) -> Vec2:
        """Return the current cursor position."""
        return self._cursor

    def scroll_input_available(self) -> bool:
        """Return True if queued scroll input is waiting."""
        return bool(self._scroll_queue)

    def pop_scroll_input(self) -> Vec2:
        """Remove and return the oldest queued scroll offset."""
        if not self._scroll_queue:
            raise IndexError("No scroll input available")
        return self._scroll_queue.popleft()