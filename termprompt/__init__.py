"""
termprompt - interactive terminal prompts.

Confirm, single-line input, multi-line text, filterable select, file
browser, and a spinner for long-running actions.
"""

from .core import UserAborted, EmptyInput, TerminalError
from .config import UISettings
from .ui import (
    is_terminal,
    RenderContext,
    MOCHA,
    LATTE,
    ColorMode,
    RGB,
    info,
    warn,
    error,
    debug,
    fatal,
    title,
    format_table,
    print_table,
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

__version__ = "0.1.0"

__all__ = [
    # Errors
    "UserAborted",
    "EmptyInput",
    "TerminalError",
    # Configuration
    "UISettings",
    "RenderContext",
    "MOCHA",
    "LATTE",
    "ColorMode",
    "RGB",
    # Output
    "is_terminal",
    "info",
    "warn",
    "error",
    "debug",
    "fatal",
    "title",
    "format_table",
    "print_table",
    # Prompts
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
