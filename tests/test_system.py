import pytest

from mosaic.context import InputContext
from mosaic.events import Vec2
from mosaic.raw_input import RawInputHandler
from mosaic.system import InputSystem, get_input_system


def test_register_returns_context_and_get_finds_it():
    system = InputSystem()
    context = system.register_window("main")
    assert isinstance(context, InputContext)
    assert system.get_context("main") is context


def test_register_twice_returns_same_context():
    system = InputSystem()
    first = system.register_window("main")
    second = system.register_window("main", RawInputHandler())
    assert first is second


def test_separate_windows_get_separate_contexts():
    system = InputSystem()
    assert system.register_window("a") is not system.register_window("b")


def test_get_unknown_window_raises():
    system = InputSystem()
    with pytest.raises(KeyError):
        system.get_context("nowhere")


def test_unregister_window():
    system = InputSystem()
    system.register_window("main")
    system.unregister_window("main")
    system.unregister_window("main")
    with pytest.raises(KeyError):
        system.get_context("main")


def test_unregister_all_windows():
    system = InputSystem()
    system.register_window("a")
    system.register_window("b")
    system.unregister_all_windows()
    with pytest.raises(KeyError):
        system.get_context("a")
    with pytest.raises(KeyError):
        system.get_context("b")


def test_update_contexts_updates_each_context():
    system = InputSystem()
    handler_a = RawInputHandler()
    handler_b = RawInputHandler()
    system.register_window("a", handler_a)
    system.register_window("b", handler_b)
    handler_a.set_cursor_pos(5, 6)
    handler_b.set_cursor_pos(7, 8)
    system.update_contexts()
    assert system.get_context("a").cursor_position == Vec2(5.0, 6.0)
    assert system.get_context("b").cursor_position == Vec2(7.0, 8.0)


def test_get_input_system_is_shared():
    window = "shared-system-test-window"
    context = get_input_system().register_window(window)
    try:
        assert get_input_system().get_context(window) is context
    finally:
        get_input_system().unregister_window(window)
    with pytest.raises(KeyError):
        get_input_system().get_context(window)