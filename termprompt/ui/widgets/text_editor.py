"""
Multi-line text editor prompt.

Enter starts a new line rather than submitting; Ctrl+D submits.
"""

from dataclasses import dataclass, replace

from ...core.formatting import truncate_text
from ..primitives.keyboard_input import (
    KeyEvent,
    KEY_CTRL_C,
    KEY_CTRL_D,
    KEY_CTRL_U,
    KEY_ENTER,
    KEY_BACKSPACE,
    KEY_UP,
    KEY_DOWN,
)
from ..primitives.terminal import TerminalIO
from ..primitives.theme import RenderContext, DEFAULT_CONTEXT
from .prompt import Outcome, CONTINUE, ABORTED, submitted, run_prompt

PREVIEW_WIDTH = 60


@dataclass(frozen=True)
class EditorModel:
    label: str
    placeholder: str = ""
    lines: tuple[str, ...] = ("",)
    current: int = 0

    @property
    def value(self) -> str:
        return "\n".join(self.lines)


def _set_current_line(model: EditorModel, text: str) -> EditorModel:
    lines = list(model.lines)
    lines[model.current] = text
    return replace(model, lines=tuple(lines))


def update(model: EditorModel, event: KeyEvent) -> tuple[EditorModel, Outcome]:
    if event.kind == KEY_CTRL_C:
        return model, ABORTED

    if event.kind == KEY_CTRL_D:
        return model, submitted(model.value)

    line = model.lines[model.current]

    if event.kind == KEY_ENTER:
        lines = list(model.lines)
        lines.insert(model.current + 1, "")
        return replace(model, lines=tuple(lines), current=model.current + 1), CONTINUE

    if event.kind == KEY_BACKSPACE:
        if line:
            return _set_current_line(model, line[:-1]), CONTINUE
        if model.current > 0:
            # Join into the previous line
            lines = list(model.lines)
            del lines[model.current]
            lines[model.current - 1] += line
            return replace(model, lines=tuple(lines), current=model.current - 1), CONTINUE
        return model, CONTINUE

    if event.kind == KEY_CTRL_U:
        return _set_current_line(model, ""), CONTINUE

    if event.kind == KEY_UP:
        return replace(model, current=max(0, model.current - 1)), CONTINUE

    if event.kind == KEY_DOWN:
        return replace(model, current=min(len(model.lines) - 1, model.current + 1)), CONTINUE

    if event.printable:
        return _set_current_line(model, line + event.char), CONTINUE

    return model, CONTINUE


def render(model: EditorModel, ctx: RenderContext) -> list[str]:
    lines = []
    if model.label:
        lines.append(ctx.accent(ctx.bold(model.label)) + " " + ctx.subtle("(Ctrl+D to submit)"))

    show_placeholder = model.placeholder and model.lines == ("",)
    for i, text in enumerate(model.lines):
        gutter = ctx.muted(f"{i + 1:2d} │ ")
        if show_placeholder:
            body = ctx.subtle("█") + ctx.dim(ctx.muted(model.placeholder))
        elif i == model.current:
            body = ctx.text(text) + ctx.subtle("█")
        else:
            body = ctx.text(text)
        lines.append(gutter + body)
    return lines


def finish(model: EditorModel, outcome: Outcome, ctx: RenderContext) -> list[str]:
    if outcome.kind != "submit":
        return []
    lines = []
    if model.label:
        lines.append(ctx.accent(ctx.bold(model.label)))
    preview = truncate_text(" ".join(model.lines), PREVIEW_WIDTH)
    lines.append(ctx.success("> ") + ctx.text(preview))
    return lines


def prompt_text(
    label: str,
    placeholder: str = "",
    *,
    ctx: RenderContext = DEFAULT_CONTEXT,
    terminal: TerminalIO | None = None,
) -> str:
    """
    Read multi-line text. Lines are joined with newlines on Ctrl+D.

    Raises:
        UserAborted: If Ctrl+C is pressed
    """
    return run_prompt(
        EditorModel(label, placeholder),
        update,
        lambda m: render(m, ctx),
        lambda m, o: finish(m, o, ctx),
        terminal=terminal,
        hide_cursor=True,
        name="text",
    )
