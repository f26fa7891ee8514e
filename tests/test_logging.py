"""
Tests for TeeOutput session logging.

Run with: pytest tests/test_logging.py -v
"""

import io
import sys

import pytest

from termprompt.core.logging import TeeOutput, debug_log


@pytest.fixture
def tee(tmp_path, monkeypatch):
    screen = io.StringIO()
    monkeypatch.setattr(sys, "stdout", screen)
    tee = TeeOutput(tmp_path / "session.log", version="0.1.0")
    yield tee, screen, tmp_path / "session.log"
    if not tee.log_file.closed:
        tee.close()


def log_lines(path):
    """Logged lines without the session header or timestamps."""
    lines = []
    for line in path.read_text(encoding="utf-8").splitlines():
        if line.startswith("[") and "] " in line:
            lines.append(line.split("] ", 1)[1])
    return lines


class TestTeeOutput:
    def test_header_includes_version(self, tee):
        t, _, path = tee
        t.close()
        assert "Session started:" in path.read_text()
        assert "v0.1.0" in path.read_text()

    def test_writes_through_to_terminal(self, tee):
        t, screen, _ = tee
        assert t.write("\x1b[1mhello\x1b[0m\n") == len("\x1b[1mhello\x1b[0m\n")
        assert screen.getvalue() == "\x1b[1mhello\x1b[0m\n"

    def test_strips_escapes_in_log(self, tee):
        t, _, path = tee
        t.write("\x1b[38;2;1;2;3mhello\x1b[0m\r\n")
        t.close()
        assert log_lines(path) == ["hello"]

    def test_redrawn_line_keeps_last_version(self, tee):
        t, _, path = tee
        t.write("\r\x1b[Kfirst")
        t.write("\r\x1b[Ksecond\r\n")
        t.close()
        assert log_lines(path) == ["second"]

    def test_skips_frame_noise(self, tee):
        t, _, path = tee
        t.write("⠋ Working\n")
        t.write("  ↓ more items below\n")
        t.write("┌───┐\n")
        t.write("\n")
        t.write("✓ Working\n")
        t.close()
        assert log_lines(path) == ["✓ Working"]

    def test_partial_line_flushed_on_close(self, tee):
        t, _, path = tee
        t.write("Name: Ada")
        t.close()
        assert log_lines(path) == ["Name: Ada"]

    def test_debug_log_is_file_only(self, tee):
        t, screen, path = tee
        sys.stdout = t
        try:
            debug_log("SETTINGS | theme=mocha")
        finally:
            sys.stdout = screen
        t.close()
        assert screen.getvalue() == ""
        assert log_lines(path) == ["SETTINGS | theme=mocha"]


def test_debug_log_without_tee_is_silent(capsys):
    debug_log("nothing to see")
    assert capsys.readouterr().out == ""
