# mosaic

This package is the input layer of a small game engine. It also holds a few
general-purpose building blocks. It needs no third-party packages.

## What is inside

- `mosaic.result` has `Result`, built with `ok(...)` or `err(...)`.
  - `is_ok()` and `is_err()` tell you which side the result holds.
  - `unwrap()` and `error()` read the value. They raise `ResultError` when you ask for the wrong side.
  - `and_then(func)` and `or_else(func)` chain results. The chained function must return a `Result`; otherwise `TypeError` is raised.
- `mosaic.sized_queue` has `SizedQueue`, a fixed-capacity queue.
  - New elements go to the front. When the queue is full, the element at the back is dropped.
  - `pop()` returns `None` when the queue is empty.
  - `front()`, `back()` and indexing raise `IndexError` when the queue is empty.
- `mosaic.tsafe_map` has `ThreadSafeMap`, a dict guarded by a lock.
  - Methods: `insert`, `insert_if_absent`, `insert_all`, `transform`, `get`, `erase` and `clear`, plus `in` and `len()`.
  - `insert_all` and `transform` restore the previous contents if they raise.
- `mosaic.tsafe_queue` has `ThreadSafeQueue`, a FIFO queue.
  - Methods: `push`, `try_pop`, `wait_and_pop(timeout=None)` and `empty`, plus `len()`.
  - `wait_and_pop` blocks until an element arrives. It raises `TimeoutError` if the timeout runs out first.
- `mosaic.units` handles byte units.
  - `ByteUnit` covers KB, MB, GB, KiB, MiB and GiB.
  - Conversions: `to_bytes`, `from_bytes`, `from_bytes_ceil`, `remainder` and `convert`. Negative amounts raise `ValueError`.
  - `platform_name()` returns `"Windows"`, `"macOS"`, `"Linux"` or `"WASM"`.
- `mosaic.mappings` has the `KeyboardKey` and `MouseButton` enums. Their values are the usual windowing-library key and button codes.
- `mosaic.events` has:
  - `Vec2`, an immutable 2-D vector.
  - the `KeyButtonState` flags (`NONE`, `RELEASE`, `PRESS`, `HOLD`, `DOUBLE_PRESS`), with `has_flag(flags, flag)`.
  - the event records `KeyboardKeyEvent`, `MouseButtonEvent`, `MouseCursorPosEvent` and `MouseWheelScrollEvent`.
- `mosaic.raw_input` has `RawInputHandler`. It holds the raw state that you feed into it:
  - `set_focused`, `set_key` and `set_mouse_button`, with `InputAction` values `RELEASE`, `PRESS` and `REPEAT`.
  - `set_cursor_pos`.
  - `push_scroll` for queued scroll offsets.
- `mosaic.arena` has `InputArena`.
  - On each `update()` it turns raw actions into press, hold, release and double-press events.
  - It keeps recent cursor and wheel samples. From them it derives averaged deltas, speed, acceleration and a `MovementDirection`.
  - It takes an optional `clock` callable, which defaults to `time.perf_counter`.
- `mosaic.context` has `InputContext`.
  - It maps virtual names to keys and buttons. The mappings can be saved to and loaded from JSON.
  - It evaluates named actions. An action is a list of triggers: `KeyboardKeyActionTrigger`, `MouseButtonActionTrigger`, `MouseCursorPosActionTrigger` and `MouseWheelScrollActionTrigger`.
  - An action fires when all of its triggers are satisfied. A positive answer is cached until the next `update()`.
  - `is_action_triggered` raises `KeyError` for an unknown action.
- `mosaic.system` has `InputSystem`, which keeps one `InputContext` per window key.
  - `get_input_system()` returns a shared instance.
  - `get_context` raises `KeyError` for a window that is not registered.

## Installing

```
pip install .
pip install ".[test]"   # adds pytest
```

## Example

```python
from mosaic.events import has_flag, KeyButtonState
from mosaic.mappings import KeyboardKey
from mosaic.raw_input import RawInputHandler, InputAction
from mosaic.context import InputContext, KeyboardKeyActionTrigger

handler = RawInputHandler(focused=True)
context = InputContext(handler)

context.update_virtual_keyboard_keys({"jump": KeyboardKey.KEY_SPACE})
context.register_actions({
    "jump": [
        KeyboardKeyActionTrigger(
            ["jump"],
            KeyboardKey.KEY_SPACE,
            lambda events: has_flag(events["jump"].state, KeyButtonState.PRESS),
        )
    ]
})

handler.set_key(KeyboardKey.KEY_SPACE, InputAction.PRESS)
context.update()
print(context.is_action_triggered("jump"))  # True
```

## Results

```python
from mosaic.result import ok

doubled = ok(5).and_then(lambda v: ok(v * 2))
assert doubled.unwrap() == 10
```

## What it does not do

The package opens no windows and reads no devices. It renders nothing and
runs no application loop.

Raw key, button, cursor, focus and scroll state must be fed into a
`RawInputHandler` by your own windowing code.

## Running the tests

```
pytest
```