"""
Yes/No confirmation prompt.
"""

from dataclasses import dataclass

from ..primitives.keyboard_input import KeyEvent, KEY_CTRL_C, KEY_ENTER
from ..primitives.terminal import TerminalIO
from ..primitives.theme import RenderContext, DEFAULT_CONTEXT
from .prompt import Outcome, CONTINUE, ABORTED, submitted, run_prompt


@dataclass(frozen=True)
class ConfirmModel:
    label: str
    default: bool = False


def update(model: ConfirmModel, event: KeyEvent) -> tuple[ConfirmModel, Outcome]:
    if event.kind == KEY_CTRL_C:
        return model, ABORTED
    if event.kind == KEY_ENTER:
        return model, submitted(model.default)
    if event.char in ("y", "Y"):
        return model, submitted(True)
    if event.char in ("n", "N"):
        return model, submitted(False)
    return model, CONTINUE


def _prompt_line(model: ConfirmModel, ctx: RenderContext) -> str:
    hint = "(Y/n)" if model.default else "(y/N)"
    return ctx.accent(ctx.bold(model.label)) + " " + ctx.subtle(hint) + ctx.accent(": ")


def render(model: ConfirmModel, ctx: RenderContext) -> list[str]:
    return [_prompt_line(model, ctx)]


def finish(model: ConfirmModel, outcome: Outcome, ctx: RenderContext) -> list[str]:
    line = _prompt_line(model, ctx)
    if outcome.kind == "submit":
        line += ctx.success("yes") if outcome.value else ctx.error("no")
    return [line]


def confirm(
    label: str,
    default: bool = False,
    *,
    ctx: RenderContext = DEFAULT_CONTEXT,
    terminal: TerminalIO | None = None,
) -> bool:
    """
    Ask a yes/no question.

    y/n answer immediately, Enter takes the default.

    Raises:
        UserAborted: If Ctrl+C is pressed
    """
    return run_prompt(
        ConfirmModel(label, default),
        update,
        lambda m: render(m, ctx),
        lambda m, o: finish(m, o, ctx),
        terminal=terminal,
        inline=True,
        name="confirm",
    )
