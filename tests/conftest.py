"""Pytest configuration and shared fixtures."""

import io
from contextlib import contextmanager

import pytest

from termprompt.ui.primitives.colors import ColorMode
from termprompt.ui.primitives.keyboard_input import decode_key
from termprompt.ui.primitives.terminal import TerminalIO
from termprompt.ui.primitives.theme import RenderContext, MOCHA

# Byte sequences for common keys
ENTER = b"\r"
BACKSPACE = b"\x7f"
ESC = b"\x1b"
CTRL_C = b"\x03"
CTRL_D = b"\x04"
CTRL_U = b"\x15"
CTRL_W = b"\x17"
UP = b"\x1b[A"
DOWN = b"\x1b[B"
RIGHT = b"\x1b[C"
LEFT = b"\x1b[D"
HOME = b"\x1b[H"


def typed(text: str) -> list[bytes]:
    """One read per character, as a human typing would produce."""
    return [ch.encode("utf-8") for ch in text]


class FakeTerminal(TerminalIO):
    """
    Scripted terminal for driving prompts without a TTY.

    Each entry in `keys` is the bytes returned by one read. Output is
    captured in `output`; raw-mode entry/exit are counted.
    """

    def __init__(self, keys: list[bytes], fail_session: Exception | None = None):
        self._stream = io.StringIO()
        super().__init__(stdout=self._stream)
        self.keys = list(keys)
        self.fail_session = fail_session
        self.sessions_entered = 0
        self.sessions_restored = 0
        self.reads = 0

    @property
    def output(self) -> str:
        return self._stream.getvalue()

    @property
    def in_raw_mode(self) -> bool:
        return self.sessions_entered != self.sessions_restored

    @contextmanager
    def session(self):
        if self.fail_session is not None:
            raise self.fail_session
        self.sessions_entered += 1
        try:
            yield None
        finally:
            self.sessions_restored += 1

    def read_key(self):
        if not self.keys:
            raise OSError("scripted input exhausted")
        self.reads += 1
        return decode_key(self.keys.pop(0))


@pytest.fixture
def plain_ctx():
    """Render context with color disabled, so output is plain text."""
    return RenderContext(theme=MOCHA, color_mode=ColorMode.NONE)


@pytest.fixture
def color_ctx():
    """Render context forcing true color."""
    return RenderContext(theme=MOCHA, color_mode=ColorMode.TRUE_COLOR)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep settings/log writes out of the real home directory."""
    monkeypatch.setenv("TERMPROMPT_HOME", str(tmp_path / "termprompt-home"))
