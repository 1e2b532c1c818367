"""Per-window input context: virtual key mappings, actions and cached motion data."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from .arena import InputArena, MovementDirection
from .events import (
    KeyboardKeyEvent,
    MouseButtonEvent,
    MouseCursorPosEvent,
    MouseWheelScrollEvent,
    Vec2,
)
from .mappings import KeyboardKey, MouseButton
from .raw_input import RawInputHandler

__all__ = [
    "KeyboardKeyActionTrigger",
    "MouseButtonActionTrigger",
    "MouseCursorPosActionTrigger",
    "MouseWheelScrollActionTrigger",
    "ActionTrigger",
    "Action",
    "InputContext",
]

_log = logging.getLogger(__name__)

_KEYBOARD_SECTION = "virtualKeyboardKeys"
_MOUSE_SECTION = "virtualMouseButtons"


@dataclass
class KeyboardKeyActionTrigger:
    """Fires when ``callback`` accepts the events of the required virtual keys."""

    required_virtual_keys: List[str]
    key: KeyboardKey
    callback: Callable[[Dict[str, KeyboardKeyEvent]], bool]


@dataclass
class MouseButtonActionTrigger:
    """Fires when ``callback`` accepts the events of the required virtual buttons."""

    required_virtual_keys: List[str]
    button: MouseButton
    callback: Callable[[Dict[str, MouseButtonEvent]], bool]


@dataclass
class MouseCursorPosActionTrigger:
    """Fires when ``callback`` accepts the current cursor event."""

    callback: Callable[[MouseCursorPosEvent], bool]


@dataclass
class MouseWheelScrollActionTrigger:
    """Fires when ``callback`` accepts the current wheel scroll event."""

    callback: Callable[[MouseWheelScrollEvent], bool]


ActionTrigger = Union[
    KeyboardKeyActionTrigger,
    MouseButtonActionTrigger,
    MouseCursorPosActionTrigger,
    MouseWheelScrollActionTrigger,
]

# An action fires only when all of its triggers are satisfied.
Action = List[ActionTrigger]

_TRIGGER_TYPES = (
    KeyboardKeyActionTrigger,
    MouseButtonActionTrigger,
    MouseCursorPosActionTrigger,
    MouseWheelScrollActionTrigger,
)


@dataclass
class _Snapshot:
    wheel_offset: Vec2 = Vec2()
    averaged_wheel_deltas: Vec2 = Vec2()
    wheel_speed: Vec2 = Vec2()
    wheel_acceleration: Vec2 = Vec2()
    cursor_position: Vec2 = Vec2()
    cursor_delta: Vec2 = Vec2()
    averaged_cursor_deltas: Vec2 = Vec2()
    cursor_speed: Vec2 = Vec2()
    cursor_linear_speed: float = 0.0
    cursor_acceleration: Vec2 = Vec2()
    cursor_linear_acceleration: float = 0.0
    cursor_movement_direction: MovementDirection = field(
        default=MovementDirection.NONE
    )


class InputContext:
    """Maps virtual names to keys and buttons and evaluates registered actions."""

    def __init__(
        self,
        handler: RawInputHandler,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self._arena = InputArena(handler, clock)
        self._virtual_keyboard_keys: Dict[str, KeyboardKey] = {}
        self._virtual_mouse_buttons: Dict[str, MouseButton] = {}
        self._actions: Dict[str, Action] = {}
        self._triggered_cache: Dict[str, bool] = {}
        self._snapshot = _Snapshot()

    # ------------------------------------------------------------------ update

    def update(self) -> None:
        """Advance the arena one step, clear the action cache and refresh derived data."""
        arena = self._arena
        arena.update()
        self._triggered_cache.clear()
        self._snapshot = _Snapshot(
            wheel_offset=arena.wheel_offset(),
            averaged_wheel_deltas=arena.averaged_wheel_deltas(),
            wheel_speed=arena.wheel_speed(),
            wheel_acceleration=arena.wheel_acceleration(),
            cursor_position=arena.cursor_position(),
            cursor_delta=arena.cursor_delta(),
            averaged_cursor_deltas=arena.averaged_cursor_deltas(),
            cursor_speed=arena.cursor_speed(),
            cursor_linear_speed=arena.cursor_linear_speed(),
            cursor_acceleration=arena.cursor_acceleration(),
            cursor_linear_acceleration=arena.cursor_linear_acceleration(),
            cursor_movement_direction=arena.cursor_movement_direction(),
        )

    # ------------------------------------------------------ virtual mappings

    @property
    def virtual_keyboard_keys(self) -> Dict[str, KeyboardKey]:
        """A copy of the virtual keyboard key mapping."""
        return dict(self._virtual_keyboard_keys)

    @property
    def virtual_mouse_buttons(self) -> Dict[str, MouseButton]:
        """A copy of the virtual mouse button mapping."""
        return dict(self._virtual_mouse_buttons)

    def load_virtual_keys_and_buttons(self, path: Union[str, Path]) -> None:
        """Read virtual key and button mappings from a JSON file.

        Raises OSError if the file cannot be read and ValueError if it is not
        valid JSON or names an unknown key or button code. Nothing changes on error.
        """
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
        if not isinstance(data, dict):
            raise ValueError("virtual key file must hold a JSON object")

        buttons = {
            name: MouseButton(int(code))
            for name, code in data.get(_MOUSE_SECTION, {}).items()
        }
        keys = {
            name: KeyboardKey(int(code))
            for name, code in data.get(_KEYBOARD_SECTION, {}).items()
        }
        self._virtual_mouse_buttons.update(buttons)
        self._virtual_keyboard_keys.update(keys)

    def save_virtual_keys_and_buttons(self, path: Union[str, Path]) -> None:
        """Write the virtual key and button mappings to a JSON file."""
        data = {
            _MOUSE_SECTION: {
                name: int(button) for name, button in self._virtual_mouse_buttons.items()
            },
            _KEYBOARD_SECTION: {
                name: int(key) for name, key in self._virtual_keyboard_keys.items()
            },
        }
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2)

    def update_virtual_keyboard_keys(self, mapping: Mapping[str, KeyboardKey]) -> None:
        """Set virtual keyboard keys; on any error the mapping is left unchanged."""
        backup = dict(self._virtual_keyboard_keys)
        try:
            for name, key in mapping.items():
                if name not in self._virtual_keyboard_keys:
                    _log.warning("Virtual keyboard key not found: %s", name)
                self._virtual_keyboard_keys[name] = KeyboardKey(key)
        except Exception:
            self._virtual_keyboard_keys = backup
            raise

    def update_virtual_mouse_buttons(self, mapping: Mapping[str, MouseButton]) -> None:
        """Set virtual mouse buttons; on any error the mapping is left unchanged."""
        backup = dict(self._virtual_mouse_buttons)
        try:
            for name, button in mapping.items():
                if name not in self._virtual_mouse_buttons:
                    _log.warning("Virtual mouse button not found: %s", name)
                self._virtual_mouse_buttons[name] = MouseButton(button)
        except Exception:
            self._virtual_mouse_buttons = backup
            _log.error("Failed to update virtual mouse buttons")
            raise

    # ---------------------------------------------------------------- actions

    @property
    def action_names(self) -> List[str]:
        """Names of the registered actions."""
        return list(self._actions)

    def register_actions(self, actions: Mapping[str, Sequence[ActionTrigger]]) -> None:
        """Register new actions; names already registered are kept as they are.

        Raises TypeError for a trigger of unknown type, leaving actions unchanged.
        """
        backup = dict(self._actions)
        try:
            for name, triggers in actions.items():
                if name in self._actions:
                    _log.warning("Action already registered: %s", name)
                    continue
                triggers = list(triggers)
                for trigger in triggers:
                    if not isinstance(trigger, _TRIGGER_TYPES):
                        raise TypeError(
                            f"Unknown action trigger type: {type(trigger).__name__}"
                        )
                self._actions[name] = triggers
        except Exception:
            self._actions = backup
            _log.error("Failed to register actions")
            raise

    def unregister_actions(self, names: Iterable[str]) -> None:
        """Remove the named actions; unknown names are skipped with a warning."""
        for name in names:
            if self._actions.pop(name, None) is None:
                _log.warning("Action not found: %s", name)
            self._triggered_cache.pop(name, None)

    def is_action_triggered(self, name: str) -> bool:
        """Return True if every trigger of the named action is satisfied.

        A positive answer is cached until the next ``update``. Raises KeyError
        if the action is not registered or has no triggers.
        """
        triggers = self._actions.get(name)
        if not triggers:
            raise KeyError(f"Action not found: {name}")

        if name in self._triggered_cache:
            return self._triggered_cache[name]

        if all(self._evaluate(trigger) for trigger in triggers):
            self._triggered_cache[name] = True
            return True
        return False

    def _evaluate(self, trigger: ActionTrigger) -> bool:
        arena = self._arena
        if isinstance(trigger, KeyboardKeyActionTrigger):
            key_events = {
                name: arena.key_event(self._virtual_keyboard_keys.get(name, 0))
                for name in trigger.required_virtual_keys
            }
            return bool(trigger.callback(key_events))
        if isinstance(trigger, MouseButtonActionTrigger):
            button_events = {
                name: arena.mouse_button_event(self._virtual_mouse_buttons.get(name, 0))
                for name in trigger.required_virtual_keys
            }
            return bool(trigger.callback(button_events))
        if isinstance(trigger, MouseCursorPosActionTrigger):
            return bool(trigger.callback(arena.cursor_pos_event()))
        if isinstance(trigger, MouseWheelScrollActionTrigger):
            return bool(trigger.callback(arena.wheel_scroll_event()))
        raise TypeError(f"Unknown action trigger type: {type(trigger).__name__}")

    # ------------------------------------------------------------ cached data

    @property
    def wheel_offset(self) -> Vec2:
        return self._snapshot.wheel_offset

    @property
    def averaged_wheel_deltas(self) -> Vec2:
        return self._snapshot.averaged_wheel_deltas

    @property
    def wheel_speed(self) -> Vec2:
        return self._snapshot.wheel_speed

    @property
    def wheel_acceleration(self) -> Vec2:
        return self._snapshot.wheel_acceleration

    @property
    def cursor_position(self) -> Vec2:
        return self._snapshot.cursor_position

    @property
    def cursor_delta(self) -> Vec2:
        return self._snapshot.cursor_delta

    @property
    def averaged_cursor_deltas(self) -> Vec2:
        return self._snapshot.averaged_cursor_deltas

    @property
    def cursor_speed(self) -> Vec2:
        return self._snapshot.cursor_speed

    @property
    def cursor_linear_speed(self) -> float:
        return self._snapshot.cursor_linear_speed

    @property
    def cursor_acceleration(self) -> Vec2:
        return self._snapshot.cursor_acceleration

    @property
    def cursor_linear_acceleration(self) -> float:
        return self._snapshot.cursor_linear_acceleration

    @property
    def cursor_movement_direction(self) -> MovementDirection:
        return self._snapshot.cursor_movement_direction