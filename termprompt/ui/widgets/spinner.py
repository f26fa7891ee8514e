"""
Spinner shown while a long-running action executes.

The action runs on a worker thread; the calling thread animates a single
status line until the worker signals completion.
"""

import threading
from typing import Any, Callable

from ...core.logging import debug_log
from ..primitives.terminal import TerminalIO
from ..primitives.theme import RenderContext, DEFAULT_CONTEXT

# Braille dot frames
SPINNER_FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"
DEFAULT_INTERVAL_MS = 80


class _Worker:
    """Runs the action once and records its result or exception."""

    def __init__(self, action: Callable[[], Any]):
        self._action = action
        self.result = None
        self.error: BaseException | None = None
        self.done = threading.Event()
        self.thread = threading.Thread(target=self._run, daemon=True)

    def _run(self):
        try:
            self.result = self._action()
        except BaseException as e:
            self.error = e
        finally:
            self.done.set()


def run_spinner(
    title: str,
    action: Callable[[], Any],
    *,
    interval_ms: int = DEFAULT_INTERVAL_MS,
    ctx: RenderContext = DEFAULT_CONTEXT,
    terminal: TerminalIO | None = None,
) -> Any:
    """
    Run action while animating a spinner next to title.

    The action is not interruptible: it always runs to completion. The
    worker is joined before returning.

    Returns:
        Whatever action returned

    Raises:
        Whatever action raised (the same exception object)
    """
    terminal = terminal or TerminalIO()
    worker = _Worker(action)
    interval = interval_ms / 1000.0

    worker.thread.start()
    terminal.hide_cursor()
    try:
        frame = 0
        # wait() returns True once the action finished, False when the tick is due
        while not worker.done.wait(interval):
            terminal.clear_line()
            terminal.write(ctx.highlight(SPINNER_FRAMES[frame]) + " " + ctx.text(title))
            frame = (frame + 1) % len(SPINNER_FRAMES)

        terminal.clear_line()
        if worker.error is None:
            terminal.write(ctx.success("✓") + " " + ctx.text(title) + "\n")
        else:
            terminal.write(ctx.error("✗") + " " + ctx.text(title) + "\n")
    finally:
        terminal.show_cursor()
        # Even if the caller is interrupted, the action runs to completion
        worker.thread.join()

    if worker.error is not None:
        debug_log(f"SPINNER | {title} | failed: {worker.error!r}")
        raise worker.error
    debug_log(f"SPINNER | {title} | done")
    return worker.result
