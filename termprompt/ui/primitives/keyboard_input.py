"""
Keyboard input handling for termprompt.

Decodes raw key presses into KeyEvents and manages the raw-mode session
every interactive prompt runs inside.
"""

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass

from ...core.errors import TerminalError

# Platform-specific imports
if os.name == 'nt':
    import msvcrt
else:
    import termios
    import tty


# Maximum bytes consumed per key press
READ_SIZE = 4

# Special key constants
KEY_UNKNOWN = "KEY_UNKNOWN"
KEY_ENTER = "KEY_ENTER"
KEY_BACKSPACE = "KEY_BACKSPACE"
KEY_TAB = "KEY_TAB"
KEY_ESC = "KEY_ESC"
KEY_SPACE = "KEY_SPACE"
KEY_UP = "KEY_UP"
KEY_DOWN = "KEY_DOWN"
KEY_LEFT = "KEY_LEFT"
KEY_RIGHT = "KEY_RIGHT"
KEY_HOME = "KEY_HOME"
KEY_END = "KEY_END"
KEY_DELETE = "KEY_DELETE"
KEY_CTRL_A = "KEY_CTRL_A"
KEY_CTRL_C = "KEY_CTRL_C"
KEY_CTRL_D = "KEY_CTRL_D"
KEY_CTRL_E = "KEY_CTRL_E"
KEY_CTRL_K = "KEY_CTRL_K"
KEY_CTRL_U = "KEY_CTRL_U"
KEY_CTRL_W = "KEY_CTRL_W"


@dataclass(frozen=True)
class KeyEvent:
    """A single decoded key press. `char` is "" for non-printing keys."""
    kind: str
    char: str = ""

    @property
    def printable(self) -> bool:
        # C0/C1 controls and DEL are never inserted into a buffer
        return bool(self.char) and (" " <= self.char < "\x7f" or self.char >= "\xa0")


# Single control bytes -> (KEY_* constant, char)
CONTROL_BYTES = {
    1: (KEY_CTRL_A, ""),
    3: (KEY_CTRL_C, ""),
    4: (KEY_CTRL_D, ""),
    5: (KEY_CTRL_E, ""),
    8: (KEY_BACKSPACE, ""),
    9: (KEY_TAB, "\t"),
    10: (KEY_ENTER, "\n"),
    11: (KEY_CTRL_K, ""),
    13: (KEY_ENTER, "\n"),
    21: (KEY_CTRL_U, ""),
    23: (KEY_CTRL_W, ""),
    32: (KEY_SPACE, " "),
    127: (KEY_BACKSPACE, ""),
}

# Final byte of ESC [ x / ESC O x sequences
ESCAPE_FINAL_BYTES = {
    'A': KEY_UP,
    'B': KEY_DOWN,
    'C': KEY_RIGHT,
    'D': KEY_LEFT,
    'H': KEY_HOME,
    'F': KEY_END,
}

# Numeric CSI sequences (ESC [ n ~)
CSI_TILDE_CODES = {
    '1': KEY_HOME,
    '3': KEY_DELETE,
    '4': KEY_END,
}

# Windows console: arrow/navigation keys arrive as a 0x00/0xe0 prefix plus a scan code
WINDOWS_KEY_CODES = {
    b'H': KEY_UP,
    b'P': KEY_DOWN,
    b'K': KEY_LEFT,
    b'M': KEY_RIGHT,
    b'G': KEY_HOME,
    b'O': KEY_END,
    b'S': KEY_DELETE,
}


def _parse_escape_sequence(buf: bytes) -> KeyEvent:
    """Classify ESC-prefixed input. Anything unrecognised is a plain Escape."""
    if len(buf) < 3:
        return KeyEvent(KEY_ESC)

    introducer = chr(buf[1])
    final = chr(buf[2])

    if introducer == '[':
        if final in ESCAPE_FINAL_BYTES:
            return KeyEvent(ESCAPE_FINAL_BYTES[final])
        if final in CSI_TILDE_CODES and len(buf) > 3 and buf[3] == ord('~'):
            return KeyEvent(CSI_TILDE_CODES[final])
    elif introducer == 'O':
        if final in ESCAPE_FINAL_BYTES:
            return KeyEvent(ESCAPE_FINAL_BYTES[final])

    return KeyEvent(KEY_ESC)


def _utf8_length(lead: int) -> int:
    """Sequence length implied by a UTF-8 lead byte's high bits."""
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    return 2


def decode_key(buf: bytes) -> KeyEvent:
    """
    Decode one read's worth of bytes into a KeyEvent.

    Only the first key in the buffer is decoded; anything after it is
    dropped. An escape sequence split across two reads decodes as a bare
    Escape followed by stray characters.
    """
    if not buf:
        return KeyEvent(KEY_UNKNOWN)

    b = buf[0]

    if b == 27:
        if len(buf) == 1:
            return KeyEvent(KEY_ESC)
        return _parse_escape_sequence(buf)

    if b in CONTROL_BYTES:
        kind, char = CONTROL_BYTES[b]
        return KeyEvent(kind, char)

    # Printable ASCII
    if 32 < b < 127:
        return KeyEvent(KEY_UNKNOWN, chr(b))

    # UTF-8 multi-byte characters
    if b >= 0xC0:
        size = _utf8_length(b)
        try:
            return KeyEvent(KEY_UNKNOWN, buf[:size].decode('utf-8'))
        except UnicodeDecodeError:
            return KeyEvent(KEY_UNKNOWN)

    return KeyEvent(KEY_UNKNOWN)


def read_key(fd: int) -> KeyEvent:
    """
    Block for one key press on fd and decode it.

    OSError from the read propagates unchanged. A zero-length read gives
    KeyEvent(KEY_UNKNOWN) which callers treat as a no-op.
    """
    if os.name == 'nt':
        return _read_key_windows()
    return decode_key(os.read(fd, READ_SIZE))


def _read_key_windows() -> KeyEvent:
    ch = msvcrt.getch()

    if ch in (b'\xe0', b'\x00'):
        return KeyEvent(WINDOWS_KEY_CODES.get(msvcrt.getch(), KEY_UNKNOWN))

    buf = ch
    # Collect the rest of an escape or UTF-8 sequence if it's already waiting
    while len(buf) < READ_SIZE and msvcrt.kbhit():
        buf += msvcrt.getch()
    return decode_key(buf)


@contextmanager
def raw_session(fd: int | None = None):
    """
    Context manager for raw terminal mode.

    Saves the current mode, switches fd to raw (unbuffered, unechoed), and
    restores the saved mode on every exit path. Raises TerminalError before
    entering the body if fd isn't a terminal or the switch fails. No-op on
    Windows, where msvcrt already reads unbuffered.
    """
    if os.name == 'nt':
        yield None
        return

    if fd is None:
        fd = sys.stdin.fileno()

    if not os.isatty(fd):
        raise TerminalError("stdin is not an interactive terminal")

    try:
        old_settings = termios.tcgetattr(fd)
        tty.setraw(fd)
    except termios.error as e:
        raise TerminalError(f"could not enter raw mode: {e}") from e

    try:
        yield fd
    finally:
        try:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
        except termios.error as e:
            raise TerminalError(f"could not restore terminal mode: {e}") from e
