"""
Shared driver for interactive prompts.

Every widget is a model plus two pure functions:

    update(model, event) -> (model, Outcome)
    render(model)        -> list of frame lines

run_prompt owns the raw-mode session and the read/update/redraw loop, so
widgets never touch the terminal directly.
"""

from dataclasses import dataclass
from typing import Any, Callable

from ...core.errors import UserAborted
from ...core.logging import debug_log
from ..primitives.keyboard_input import KeyEvent
from ..primitives.terminal import TerminalIO, FrameRenderer


@dataclass(frozen=True)
class Outcome:
    """Result of applying one key event: keep going, submit a value, or abort."""
    kind: str  # "continue", "submit" or "abort"
    value: Any = None

    @property
    def done(self) -> bool:
        return self.kind != "continue"


CONTINUE = Outcome("continue")
ABORTED = Outcome("abort")


def submitted(value: Any) -> Outcome:
    return Outcome("submit", value)


def run_prompt(
    model: Any,
    update: Callable[[Any, KeyEvent], tuple[Any, Outcome]],
    render: Callable[[Any], list[str]],
    finish: Callable[[Any, Outcome], list[str]],
    terminal: TerminalIO | None = None,
    inline: bool = False,
    hide_cursor: bool = False,
    name: str = "prompt",
) -> Any:
    """
    Drive a widget until it submits or aborts.

    Args:
        model: Initial widget model
        update: Transition function applied to each key event
        render: Produces the lines of the live frame
        finish: Produces the lines left on screen after the prompt ends
        terminal: Terminal to run against (default: process stdin/stdout)
        inline: Keep the cursor on the frame's last line (single-line prompts)
        hide_cursor: Hide the terminal cursor while the prompt is live
        name: Widget name for the debug log

    Returns:
        The submitted value

    Raises:
        UserAborted: If Ctrl+C was pressed
        TerminalError: If raw mode couldn't be entered or restored
        OSError: If reading from the terminal failed
    """
    terminal = terminal or TerminalIO()
    frame = FrameRenderer(terminal, inline=inline)

    with terminal.session():
        debug_log(f"PROMPT | {name} | raw mode entered")
        if hide_cursor:
            terminal.hide_cursor()
        try:
            frame.draw(render(model))
            while True:
                event = terminal.read_key()
                model, outcome = update(model, event)
                if not outcome.done:
                    frame.redraw(render(model))
                    continue

                frame.clear()
                # Final lines are always terminated so the caller starts on a fresh line
                frame.inline = False
                frame.draw(finish(model, outcome))
                if outcome.kind == "abort":
                    debug_log(f"PROMPT | {name} | aborted")
                    raise UserAborted()
                debug_log(f"PROMPT | {name} | submitted")
                return outcome.value
        finally:
            if hide_cursor:
                terminal.show_cursor()
