"""
Terminal I/O primitives.

Low-level terminal control, keyboard input, and color handling.
"""

from .terminal import (
    TerminalIO,
    FrameRenderer,
    is_terminal,
    HIDE_CURSOR,
    SHOW_CURSOR,
    CLEAR_LINE,
    CLEAR_RIGHT,
    MOVE_UP,
    LINE_END,
)
from .keyboard_input import (
    KeyEvent,
    decode_key,
    read_key,
    raw_session,
    KEY_UNKNOWN,
    KEY_ENTER,
    KEY_BACKSPACE,
    KEY_TAB,
    KEY_ESC,
    KEY_SPACE,
    KEY_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_HOME,
    KEY_END,
    KEY_DELETE,
    KEY_CTRL_A,
    KEY_CTRL_C,
    KEY_CTRL_D,
    KEY_CTRL_E,
    KEY_CTRL_K,
    KEY_CTRL_U,
    KEY_CTRL_W,
)
from .colors import (
    ColorMode,
    RGB,
    DETECTED_COLOR_MODE,
    detect_color_mode,
    rgb_to_ansi256,
)
from .theme import (
    Theme,
    RenderContext,
    MOCHA,
    LATTE,
    THEMES,
    DEFAULT_CONTEXT,
)

__all__ = [
    # Terminal
    "TerminalIO",
    "FrameRenderer",
    "is_terminal",
    "HIDE_CURSOR",
    "SHOW_CURSOR",
    "CLEAR_LINE",
    "CLEAR_RIGHT",
    "MOVE_UP",
    "LINE_END",
    # Keyboard input
    "KeyEvent",
    "decode_key",
    "read_key",
    "raw_session",
    "KEY_UNKNOWN",
    "KEY_ENTER",
    "KEY_BACKSPACE",
    "KEY_TAB",
    "KEY_ESC",
    "KEY_SPACE",
    "KEY_UP",
    "KEY_DOWN",
    "KEY_LEFT",
    "KEY_RIGHT",
    "KEY_HOME",
    "KEY_END",
    "KEY_DELETE",
    "KEY_CTRL_A",
    "KEY_CTRL_C",
    "KEY_CTRL_D",
    "KEY_CTRL_E",
    "KEY_CTRL_K",
    "KEY_CTRL_U",
    "KEY_CTRL_W",
    # Colors
    "ColorMode",
    "RGB",
    "DETECTED_COLOR_MODE",
    "detect_color_mode",
    "rgb_to_ansi256",
    # Theme
    "Theme",
    "RenderContext",
    "MOCHA",
    "LATTE",
    "THEMES",
    "DEFAULT_CONTEXT",
]
