"""
Logging utilities for termprompt.
"""

import re
import sys
from datetime import datetime
from pathlib import Path


class TeeOutput:
    """Write to both stdout and a log file, filtering out prompt redraw noise."""

    # Patterns to skip in log file (live frames, indicators, etc.)
    _SKIP_PATTERNS = [
        r'[┌┐└┘├┤┬┴┼─│]',              # Box drawing characters (tables, editor gutter)
        r'[⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏]',               # Spinner frames
        r'more items (above|below)',    # Browser scroll indicators
        r'navigate • Enter select',     # Browser key help
        r'^\s*$',                       # Blank lines
    ]

    # Cursor movement, clearing, SGR and private-mode sequences
    _ESCAPE_REGEX = re.compile(r'\x1b\[[0-9;?]*[A-Za-z]')

    def __init__(self, log_path: Path, version: str = None):
        self.terminal = sys.stdout
        self.log_file = open(log_path, "a", encoding="utf-8")
        self._skip_regex = re.compile('|'.join(self._SKIP_PATTERNS))
        self._line_buffer = ""
        # Write session header with version
        self.log_file.write(f"\n{'='*60}\n")
        version_str = f" v{version}" if version else ""
        self.log_file.write(f"Session started: {datetime.now().isoformat()}{version_str}\n")
        self.log_file.write(f"{'='*60}\n\n")
        self.log_file.flush()

    def write(self, message):
        self.terminal.write(message)

        clean = self._ESCAPE_REGEX.sub('', message)

        # Raw mode terminates lines with \r\n; normalize before buffering
        self._line_buffer += clean.replace('\r\n', '\n')

        # Process complete lines
        while '\n' in self._line_buffer:
            line, self._line_buffer = self._line_buffer.split('\n', 1)
            # A redrawn line only keeps what came after the last carriage return
            line = line.rsplit('\r', 1)[-1]
            if not self._skip_regex.search(line):
                stripped = line.rstrip()
                if stripped:
                    timestamp = datetime.now().strftime("[%H:%M:%S]")
                    self.log_file.write(f"{timestamp} {stripped}\n")

        # Handle \r (carriage return) - only keep the last version
        if '\r' in self._line_buffer:
            self._line_buffer = self._line_buffer.rsplit('\r', 1)[-1]

        self.log_file.flush()
        return len(message)

    def flush(self):
        self.terminal.flush()
        self.log_file.flush()

    def fileno(self):
        return self.terminal.fileno()

    def isatty(self):
        return self.terminal.isatty()

    def close(self):
        # Flush any remaining buffer
        if self._line_buffer.strip() and not self._skip_regex.search(self._line_buffer):
            timestamp = datetime.now().strftime("[%H:%M:%S]")
            self.log_file.write(f"{timestamp} {self._line_buffer.rstrip()}\n")
        self._line_buffer = ""
        self.log_file.close()

    def log_only(self, message: str):
        """Write a message only to the log file, not to terminal."""
        timestamp = datetime.now().strftime("[%H:%M:%S]")
        self.log_file.write(f"{timestamp} {message}\n")
        self.log_file.flush()


def debug_log(message: str):
    """Log a debug message to file only (not shown to user)."""
    if hasattr(sys.stdout, 'log_only'):
        sys.stdout.log_only(message)
    # If not using TeeOutput (e.g., tests), silently ignore
