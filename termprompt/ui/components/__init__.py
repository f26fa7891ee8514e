"""
Reusable visual building blocks.

Non-interactive components for rendering output.
"""

from .messages import (
    info,
    warn,
    error,
    debug,
    fatal,
    title,
)
from .table import (
    BOX_TL,
    BOX_TR,
    BOX_BL,
    BOX_BR,
    BOX_H,
    BOX_V,
    format_table,
    print_table,
)

__all__ = [
    # Messages
    "info",
    "warn",
    "error",
    "debug",
    "fatal",
    "title",
    # Table
    "BOX_TL",
    "BOX_TR",
    "BOX_BL",
    "BOX_BR",
    "BOX_H",
    "BOX_V",
    "format_table",
    "print_table",
]
