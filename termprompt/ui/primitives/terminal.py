"""
Terminal I/O for termprompt.

TerminalIO bundles the input fd and output stream a prompt talks to;
FrameRenderer implements the clear-then-reprint redraw every widget uses.
"""

import os
import sys

from .keyboard_input import KeyEvent, raw_session, read_key

# Cursor control
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CLEAR_LINE = "\033[2K"
CLEAR_RIGHT = "\033[K"
MOVE_UP = "\033[A"

# Raw mode disables output post-processing, so lines need an explicit \r
LINE_END = "\r\n"


class TerminalIO:
    """The input fd and output stream an interactive prompt runs against."""

    def __init__(self, stdin=None, stdout=None):
        self._stdin = stdin
        self._stdout = stdout

    @property
    def out(self):
        # Resolve sys.stdout lazily so a TeeOutput installed later still sees prompt output
        return self._stdout if self._stdout is not None else sys.stdout

    def fileno(self) -> int:
        stdin = self._stdin if self._stdin is not None else sys.stdin
        return stdin.fileno()

    def session(self):
        """Raw-mode session for the input fd."""
        return raw_session(self.fileno())

    def read_key(self) -> KeyEvent:
        return read_key(self.fileno())

    def write(self, text: str):
        self.out.write(text)
        self.out.flush()

    def hide_cursor(self):
        self.write(HIDE_CURSOR)

    def show_cursor(self):
        self.write(SHOW_CURSOR)

    def clear_line(self):
        """Return to column 0 and clear the whole line."""
        self.write("\r" + CLEAR_LINE)

    def is_tty(self) -> bool:
        """True when both the input and the output are attached to a terminal."""
        try:
            return os.isatty(self.fileno()) and self.out.isatty()
        except (AttributeError, ValueError, OSError):
            return False


def is_terminal() -> bool:
    """Whether the process stdin/stdout can host an interactive prompt."""
    return TerminalIO().is_tty()


class FrameRenderer:
    """
    Clears the previous frame and draws the next one.

    Tracks how many lines the last frame occupied so exactly that many are
    erased before the next draw. Width is never consulted: a line that
    wraps takes more rows than counted and leaves residue above the frame.

    Inline frames leave the cursor at the end of their last line instead of
    moving to a fresh one (used by single-line prompts).
    """

    def __init__(self, terminal: TerminalIO, inline: bool = False):
        self.terminal = terminal
        self.inline = inline
        self.line_count = 0

    def clear(self):
        """Erase every line of the previous frame."""
        if self.line_count == 0:
            return
        parts = []
        if self.inline:
            # Cursor is still on the last line; clear it where it is
            parts.append("\r" + CLEAR_RIGHT)
            ups = self.line_count - 1
        else:
            ups = self.line_count
        for _ in range(ups):
            parts.append(MOVE_UP + "\r" + CLEAR_RIGHT)
        self.terminal.write("".join(parts))
        self.line_count = 0

    def draw(self, lines: list[str]):
        """Print a frame and remember its height."""
        if not lines:
            self.line_count = 0
            return
        buf = []
        for i, line in enumerate(lines):
            buf.append("\r" + CLEAR_RIGHT + line)
            if not (self.inline and i == len(lines) - 1):
                buf.append(LINE_END)
        self.terminal.write("".join(buf))
        self.line_count = len(lines)

    def redraw(self, lines: list[str]):
        self.clear()
        self.draw(lines)
