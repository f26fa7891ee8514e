"""
Tests for key decoding and the raw-mode session.

Run with: pytest tests/test_keyboard_input.py -v
"""

import os

import pytest

from termprompt.core.errors import TerminalError
from termprompt.ui.primitives import keyboard_input
from termprompt.ui.primitives.keyboard_input import (
    KeyEvent,
    decode_key,
    read_key,
    raw_session,
    KEY_UNKNOWN,
    KEY_ENTER,
    KEY_BACKSPACE,
    KEY_TAB,
    KEY_ESC,
    KEY_SPACE,
    KEY_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_HOME,
    KEY_END,
    KEY_DELETE,
    KEY_CTRL_A,
    KEY_CTRL_C,
    KEY_CTRL_D,
    KEY_CTRL_E,
    KEY_CTRL_K,
    KEY_CTRL_U,
    KEY_CTRL_W,
)


class TestControlBytes:
    """Single control bytes map straight to named keys."""

    @pytest.mark.parametrize("byte,kind", [
        (1, KEY_CTRL_A),
        (3, KEY_CTRL_C),
        (4, KEY_CTRL_D),
        (5, KEY_CTRL_E),
        (11, KEY_CTRL_K),
        (21, KEY_CTRL_U),
        (23, KEY_CTRL_W),
        (127, KEY_BACKSPACE),
        (8, KEY_BACKSPACE),
    ])
    def test_control_keys_have_no_char(self, byte, kind):
        assert decode_key(bytes([byte])) == KeyEvent(kind, "")

    def test_enter_cr_and_lf(self):
        assert decode_key(b"\r") == KeyEvent(KEY_ENTER, "\n")
        assert decode_key(b"\n") == KeyEvent(KEY_ENTER, "\n")

    def test_tab_and_space_carry_char(self):
        assert decode_key(b"\t") == KeyEvent(KEY_TAB, "\t")
        assert decode_key(b" ") == KeyEvent(KEY_SPACE, " ")

    def test_lone_escape(self):
        assert decode_key(b"\x1b") == KeyEvent(KEY_ESC)


class TestPrintable:
    def test_ascii_letter(self):
        event = decode_key(b"a")
        assert event == KeyEvent(KEY_UNKNOWN, "a")
        assert event.printable

    def test_only_first_key_decoded(self):
        """A read holding several characters yields just the first."""
        assert decode_key(b"ab") == KeyEvent(KEY_UNKNOWN, "a")

    def test_control_keys_not_printable(self):
        assert not decode_key(b"\x03").printable
        assert not decode_key(b"\t").printable

    def test_space_is_printable(self):
        assert decode_key(b" ").printable

    @pytest.mark.parametrize("char", ["\x7f", "\x80", "\x9b", "\x9f"])
    def test_del_and_c1_controls_not_printable(self, char):
        assert not KeyEvent(KEY_UNKNOWN, char).printable

    def test_utf8_encoded_csi_not_printable(self):
        event = decode_key(b"\xc2\x9b")
        assert event.char == "\x9b"
        assert not event.printable

    @pytest.mark.parametrize("char", ["\xa0", "é", "€", "日"])
    def test_non_ascii_text_printable(self, char):
        assert KeyEvent(KEY_UNKNOWN, char).printable


class TestUtf8:
    def test_two_byte(self):
        assert decode_key("é".encode("utf-8")) == KeyEvent(KEY_UNKNOWN, "é")

    def test_three_byte(self):
        assert decode_key("€".encode("utf-8")) == KeyEvent(KEY_UNKNOWN, "€")

    def test_four_byte(self):
        assert decode_key("😀".encode("utf-8")) == KeyEvent(KEY_UNKNOWN, "😀")

    def test_truncated_sequence_gives_no_char(self):
        assert decode_key("€".encode("utf-8")[:2]) == KeyEvent(KEY_UNKNOWN, "")

    def test_stray_continuation_byte_ignored(self):
        assert decode_key(b"\x80") == KeyEvent(KEY_UNKNOWN, "")


class TestEscapeSequences:
    """CSI and SS3 navigation sequences."""

    @pytest.mark.parametrize("seq,kind", [
        (b"\x1b[A", KEY_UP),
        (b"\x1b[B", KEY_DOWN),
        (b"\x1b[C", KEY_RIGHT),
        (b"\x1b[D", KEY_LEFT),
        (b"\x1b[H", KEY_HOME),
        (b"\x1b[F", KEY_END),
        (b"\x1b[1~", KEY_HOME),
        (b"\x1b[3~", KEY_DELETE),
        (b"\x1b[4~", KEY_END),
        (b"\x1bOA", KEY_UP),
        (b"\x1bOB", KEY_DOWN),
        (b"\x1bOC", KEY_RIGHT),
        (b"\x1bOD", KEY_LEFT),
        (b"\x1bOH", KEY_HOME),
        (b"\x1bOF", KEY_END),
    ])
    def test_navigation_keys(self, seq, kind):
        assert decode_key(seq) == KeyEvent(kind)

    def test_navigation_wins_over_trailing_printable(self):
        assert decode_key(b"\x1b[Ax") == KeyEvent(KEY_UP)

    def test_incomplete_csi_is_escape(self):
        assert decode_key(b"\x1b[") == KeyEvent(KEY_ESC)

    def test_numeric_without_tilde_is_escape(self):
        assert decode_key(b"\x1b[3") == KeyEvent(KEY_ESC)

    def test_unknown_sequence_is_escape(self):
        assert decode_key(b"\x1b[5~") == KeyEvent(KEY_ESC)

    def test_ss3_numeric_not_recognised(self):
        assert decode_key(b"\x1bO3~") == KeyEvent(KEY_ESC)


class TestReadKey:
    def test_reads_from_fd(self):
        r, w = os.pipe()
        try:
            os.write(w, b"\x1b[B")
            assert read_key(r) == KeyEvent(KEY_DOWN)
        finally:
            os.close(r)
            os.close(w)

    def test_zero_length_read_is_unknown(self):
        r, w = os.pipe()
        os.close(w)
        try:
            assert read_key(r) == KeyEvent(KEY_UNKNOWN, "")
        finally:
            os.close(r)

    def test_read_error_propagates(self):
        r, w = os.pipe()
        os.close(r)
        os.close(w)
        with pytest.raises(OSError):
            read_key(r)


@pytest.mark.skipif(os.name == "nt", reason="termios only")
class TestRawSession:
    """raw_session restores the saved mode on every exit path."""

    @pytest.fixture
    def fake_tty(self, monkeypatch):
        calls = []
        monkeypatch.setattr(keyboard_input.os, "isatty", lambda fd: True)
        monkeypatch.setattr(keyboard_input.termios, "tcgetattr", lambda fd: ["saved"])
        monkeypatch.setattr(keyboard_input.tty, "setraw", lambda fd: calls.append(("raw", fd)))
        monkeypatch.setattr(
            keyboard_input.termios, "tcsetattr",
            lambda fd, when, attrs: calls.append(("restore", fd, attrs)),
        )
        return calls

    def test_restores_on_success(self, fake_tty):
        with raw_session(7) as fd:
            assert fd == 7
            assert fake_tty == [("raw", 7)]
        assert fake_tty[-1] == ("restore", 7, ["saved"])

    def test_restores_on_error(self, fake_tty):
        with pytest.raises(RuntimeError):
            with raw_session(7):
                raise RuntimeError("boom")
        assert fake_tty[-1] == ("restore", 7, ["saved"])
        assert sum(1 for c in fake_tty if c[0] == "restore") == 1

    def test_not_a_tty_never_enters_body(self, monkeypatch):
        monkeypatch.setattr(keyboard_input.os, "isatty", lambda fd: False)
        entered = []
        with pytest.raises(TerminalError):
            with raw_session(7):
                entered.append(True)
        assert entered == []

    def test_setraw_failure_raises_terminal_error(self, monkeypatch):
        def fail(fd):
            raise keyboard_input.termios.error(25, "Inappropriate ioctl")

        monkeypatch.setattr(keyboard_input.os, "isatty", lambda fd: True)
        monkeypatch.setattr(keyboard_input.termios, "tcgetattr", lambda fd: ["saved"])
        monkeypatch.setattr(keyboard_input.tty, "setraw", fail)
        with pytest.raises(TerminalError):
            with raw_session(7):
                pytest.fail("body should not run")
