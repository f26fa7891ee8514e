"""
Core utilities for termprompt.

Errors, paths, text formatting, and logging.
"""

from .errors import (
    UserAborted,
    EmptyInput,
    TerminalError,
)

from .paths import (
    get_data_dir,
    get_settings_path,
    get_logs_dir,
    get_home_dir,
    is_root_dir,
    shorten_home,
)

from .formatting import (
    strip_ansi,
    visible_width,
    truncate_text,
    name_sort_key,
    sort_by_name,
)

from .logging import TeeOutput, debug_log

__all__ = [
    # Errors
    "UserAborted",
    "EmptyInput",
    "TerminalError",
    # Paths
    "get_data_dir",
    "get_settings_path",
    "get_logs_dir",
    "get_home_dir",
    "is_root_dir",
    "shorten_home",
    # Formatting
    "strip_ansi",
    "visible_width",
    "truncate_text",
    "name_sort_key",
    "sort_by_name",
    # Logging
    "TeeOutput",
    "debug_log",
]
