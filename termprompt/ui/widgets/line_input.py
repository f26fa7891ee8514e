"""
Single-line text input prompt.
"""

from dataclasses import dataclass, replace

from ..primitives.keyboard_input import (
    KeyEvent,
    KEY_CTRL_C,
    KEY_ENTER,
    KEY_BACKSPACE,
    KEY_CTRL_U,
    KEY_CTRL_W,
)
from ..primitives.terminal import TerminalIO
from ..primitives.theme import RenderContext, DEFAULT_CONTEXT
from .prompt import Outcome, CONTINUE, ABORTED, submitted, run_prompt


@dataclass(frozen=True)
class InputModel:
    label: str
    placeholder: str = ""
    buffer: str = ""


def delete_word(text: str) -> str:
    """Drop the last word and any whitespace after it (Ctrl+W)."""
    stripped = text.rstrip()
    cut = max(stripped.rfind(" "), stripped.rfind("\t"))
    return stripped[:cut + 1]


def update(model: InputModel, event: KeyEvent) -> tuple[InputModel, Outcome]:
    if event.kind == KEY_CTRL_C:
        return model, ABORTED

    if event.kind == KEY_ENTER:
        if not model.buffer and model.placeholder:
            return model, submitted(model.placeholder)
        return model, submitted(model.buffer)

    if event.kind == KEY_BACKSPACE:
        return replace(model, buffer=model.buffer[:-1]), CONTINUE

    if event.kind == KEY_CTRL_U:
        return replace(model, buffer=""), CONTINUE

    if event.kind == KEY_CTRL_W:
        return replace(model, buffer=delete_word(model.buffer)), CONTINUE

    if event.printable:
        return replace(model, buffer=model.buffer + event.char), CONTINUE

    return model, CONTINUE


def _prompt(model: InputModel, ctx: RenderContext) -> str:
    return ctx.accent(ctx.bold(model.label)) + ctx.accent(": ")


def render(model: InputModel, ctx: RenderContext) -> list[str]:
    if model.placeholder and not model.buffer:
        return [_prompt(model, ctx) + ctx.subtle(model.placeholder)]
    return [_prompt(model, ctx) + ctx.text(model.buffer)]


def finish(model: InputModel, outcome: Outcome, ctx: RenderContext) -> list[str]:
    if outcome.kind == "submit":
        return [_prompt(model, ctx) + ctx.text(outcome.value)]
    return render(model, ctx)


def prompt_input(
    label: str,
    placeholder: str = "",
    *,
    ctx: RenderContext = DEFAULT_CONTEXT,
    terminal: TerminalIO | None = None,
) -> str:
    """
    Read a single line of text.

    Enter on an empty buffer submits the placeholder, if one was given.

    Raises:
        UserAborted: If Ctrl+C is pressed
    """
    return run_prompt(
        InputModel(label, placeholder),
        update,
        lambda m: render(m, ctx),
        lambda m, o: finish(m, o, ctx),
        terminal=terminal,
        inline=True,
        name="input",
    )
