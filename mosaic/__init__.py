"""Game input handling: key and button events, actions, cursor and wheel data, and small containers."""

__version__ = "0.0.1"