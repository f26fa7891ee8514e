"""
Text formatting helpers shared by the UI layers.
"""

import re
from typing import Any, Callable, List, Optional

from wcwidth import wcswidth, wcwidth

ANSI_PATTERN = re.compile(r'\x1b\[[0-9;?]*[A-Za-z]')


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_PATTERN.sub('', text)


def visible_width(text: str) -> int:
    """Terminal column width of text, ignoring escape codes."""
    plain = strip_ansi(text)
    width = wcswidth(plain)
    if width < 0:
        # Non-printable characters present; count them as zero-width
        return sum(max(0, wcwidth(ch)) for ch in plain)
    return width


def truncate_text(text: str, max_len: int, suffix: str = "...") -> str:
    """Truncate text to max_len columns, adding suffix if truncated. Returns plain text (no ANSI)."""
    text = strip_ansi(text)
    if visible_width(text) <= max_len:
        return text
    if max_len <= len(suffix):
        return _take_columns(text, max_len)
    return _take_columns(text, max_len - len(suffix)) + suffix


def _take_columns(text: str, columns: int) -> str:
    result = []
    used = 0
    for ch in text:
        w = max(0, wcwidth(ch))
        if used + w > columns:
            break
        result.append(ch)
        used += w
    return ''.join(result)


def name_sort_key(name: str) -> str:
    """Sort key for case-insensitive name sorting."""
    return name.casefold()


def sort_by_name(items: List[Any], key: Optional[Callable[[Any], str]] = None) -> List[Any]:
    """
    Sort items by name, case-insensitive.

    Args:
        items: List of items to sort
        key: Optional function to extract name from item (default: item itself)
    """
    if key is None:
        return sorted(items, key=name_sort_key)
    return sorted(items, key=lambda x: name_sort_key(key(x)))
