"""
Exit-on-error wrappers around the prompt widgets.

For scripts where any failure (including Ctrl+C) should just end the
program with a message.
"""

from typing import Any, Callable

from ..components.messages import fatal
from ..primitives.theme import RenderContext, DEFAULT_CONTEXT
from .confirm import confirm
from .file_browser import browse_file
from .line_input import prompt_input
from .select import select
from .spinner import run_spinner
from .text_editor import prompt_text


def must(fn: Callable[..., Any], *args, ctx: RenderContext = DEFAULT_CONTEXT, **kwargs) -> Any:
    """Call fn, turning any exception into fatal(message)."""
    try:
        return fn(*args, ctx=ctx, **kwargs)
    except Exception as e:
        fatal(e, ctx=ctx)


def must_confirm(label: str, default: bool = False, **kwargs) -> bool:
    return must(confirm, label, default, **kwargs)


def must_input(label: str, placeholder: str = "", **kwargs) -> str:
    return must(prompt_input, label, placeholder, **kwargs)


def must_text(label: str, placeholder: str = "", **kwargs) -> str:
    return must(prompt_text, label, placeholder, **kwargs)


def must_select(label: str, items, **kwargs) -> tuple[int, str]:
    return must(select, label, items, **kwargs)


def must_browse_file(label: str, extensions=(), **kwargs) -> str:
    return must(browse_file, label, extensions, **kwargs)


def must_run(title: str, action: Callable[[], Any], **kwargs) -> Any:
    return must(run_spinner, title, action, **kwargs)
