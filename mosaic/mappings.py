"""Keyboard keys and mouse buttons with their windowing-library codes."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["KeyboardKey", "MouseButton"]


class KeyboardKey(IntEnum):
    """Supported keyboard keys; values are the windowing library's key codes."""

    KEY_A = 65
    KEY_B = 66
    KEY_C = 67
    KEY_D = 68
    KEY_E = 69
    KEY_F = 70
    KEY_G = 71
    KEY_H = 72
    KEY_I = 73
    KEY_J = 74
    KEY_K = 75
    KEY_L = 76
    KEY_M = 77
    KEY_N = 78
    KEY_O = 79
    KEY_P = 80
    KEY_Q = 81
    KEY_R = 82
    KEY_S = 83
    KEY_T = 84
    KEY_U = 85
    KEY_V = 86
    KEY_W = 87
    KEY_X = 88
    KEY_Y = 89
    KEY_Z = 90
    KEY_0 = 48
    KEY_1 = 49
    KEY_2 = 50
    KEY_3 = 51
    KEY_4 = 52
    KEY_5 = 53
    KEY_6 = 54
    KEY_7 = 55
    KEY_8 = 56
    KEY_9 = 57
    KEY_SPACE = 32
    KEY_ENTER = 257
    KEY_ESCAPE = 256
    KEY_LEFT_SHIFT = 340
    KEY_RIGHT_SHIFT = 344
    KEY_LEFT_CONTROL = 341
    KEY_RIGHT_CONTROL = 345
    KEY_LEFT_ALT = 342
    KEY_RIGHT_ALT = 346
    KEY_TAB = 258
    KEY_BACKSPACE = 259
    KEY_INSERT = 260
    KEY_DELETE = 261
    KEY_HOME = 268
    KEY_END = 269
    KEY_PAGE_UP = 266
    KEY_PAGE_DOWN = 267
    KEY_ARROW_UP = 265
    KEY_ARROW_DOWN = 264
    KEY_ARROW_LEFT = 263
    KEY_ARROW_RIGHT = 262
    KEY_F1 = 290
    KEY_F2 = 291
    KEY_F3 = 292
    KEY_F4 = 293
    KEY_F5 = 294
    KEY_F6 = 295
    KEY_F7 = 296
    KEY_F8 = 297
    KEY_F9 = 298
    KEY_F10 = 299
    KEY_F11 = 300
    KEY_F12 = 301


class MouseButton(IntEnum):
    """Supported mouse buttons; values are the windowing library's button codes."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    BUTTON_4 = 3
    BUTTON_5 = 4
    BUTTON_6 = 5
    BUTTON_7 = 6
    BUTTON_8 = 7