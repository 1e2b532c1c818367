"""Registry of input contexts, one per window."""

from __future__ import annotations

import functools
import logging
from typing import Dict, Hashable, Optional

from .context import InputContext
from .raw_input import RawInputHandler

__all__ = ["InputSystem", "get_input_system"]

_log = logging.getLogger(__name__)


class InputSystem:
    """Holds one InputContext for each registered window."""

    def __init__(self) -> None:
        self._contexts: Dict[Hashable, InputContext] = {}

    def register_window(
        self, window: Hashable, handler: Optional[RawInputHandler] = None
    ) -> InputContext:
        """Create and return the context of ``window``.

        If the window is already registered its existing context is returned.
        """
        existing = self._contexts.get(window)
        if existing is not None:
            _log.error("InputSystem: Window already registered")
            return existing
        context = InputContext(handler if handler is not None else RawInputHandler())
        self._contexts[window] = context
        return context

    def unregister_window(self, window: Hashable) -> None:
        """Drop the context of ``window`` if there is one."""
        self._contexts.pop(window, None)

    def unregister_all_windows(self) -> None:
        """Drop every context."""
        self._contexts.clear()

    def update_contexts(self) -> None:
        """Update every registered context."""
        for context in self._contexts.values():
            context.update()

    def get_context(self, window: Hashable) -> InputContext:
        """Return the context of ``window``; raise KeyError if not registered."""
        try:
            return self._contexts[window]
        except KeyError:
            raise KeyError("Input context not found for the given window.") from None


@functools.lru_cache(maxsize=None)
def get_input_system() -> InputSystem:
    """Return the shared InputSystem."""
    return InputSystem()