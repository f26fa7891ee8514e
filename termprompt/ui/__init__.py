"""
User interface module.

Organized into layers:
- primitives/: Terminal I/O (keyboard, raw mode, redraw, colors, themes)
- components/: Non-interactive output (messages, tables)
- widgets/: Interactive prompts (confirm, input, text, select, file, spinner)
"""

from .primitives import (
    TerminalIO,
    FrameRenderer,
    is_terminal,
    KeyEvent,
    decode_key,
    ColorMode,
    RGB,
    Theme,
    RenderContext,
    MOCHA,
    LATTE,
    DEFAULT_CONTEXT,
)
from .components import (
    info,
    warn,
    error,
    debug,
    fatal,
    title,
    format_table,
    print_table,
)
from .widgets import (
    confirm,
    prompt_input,
    prompt_text,
    select,
    browse_file,
    run_spinner,
    must_confirm,
    must_input,
    must_text,
    must_select,
    must_browse_file,
    must_run,
)

__all__ = [
    # Primitives
    "TerminalIO",
    "FrameRenderer",
    "is_terminal",
    "KeyEvent",
    "decode_key",
    "ColorMode",
    "RGB",
    "Theme",
    "RenderContext",
    "MOCHA",
    "LATTE",
    "DEFAULT_CONTEXT",
    # Components
    "info",
    "warn",
    "error",
    "debug",
    "fatal",
    "title",
    "format_table",
    "print_table",
    # Widgets
    "confirm",
    "prompt_input",
    "prompt_text",
    "select",
    "browse_file",
    "run_spinner",
    "must_confirm",
    "must_input",
    "must_text",
    "must_select",
    "must_browse_file",
    "must_run",
]
