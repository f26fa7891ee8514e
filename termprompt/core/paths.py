"""
Centralized path management for termprompt.

Settings and logs live in a single data directory so the demo app stays
self-contained:

    ~/.termprompt/           (or $TERMPROMPT_HOME)
        settings.json        - UI preferences (theme, color mode, etc.)
        logs/                - Session logs written by TeeOutput
"""

import os
from pathlib import Path

# Directory name for app data (hidden on Unix)
DATA_DIR_NAME = ".termprompt"


def get_data_dir() -> Path:
    """
    Get the data directory, creating it if needed.

    TERMPROMPT_HOME overrides the default location (used by tests).
    """
    root = os.environ.get("TERMPROMPT_HOME")
    data_dir = Path(root) if root else Path.home() / DATA_DIR_NAME
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_settings_path() -> Path:
    """Get path to settings.json."""
    return get_data_dir() / "settings.json"


def get_logs_dir() -> Path:
    """Get the logs directory, creating it if needed."""
    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(exist_ok=True)
    return logs_dir


def get_home_dir() -> Path | None:
    """Get the user's home directory, or None if it can't be resolved."""
    try:
        return Path.home()
    except RuntimeError:
        return None


def is_root_dir(path: Path) -> bool:
    """True for a filesystem root ("/" on Unix, "C:\\" on Windows)."""
    path = Path(path)
    return path.parent == path


def shorten_home(path: Path) -> str:
    """Display a path with the home directory prefix replaced by ~."""
    text = str(path)
    home = get_home_dir()
    if home is None:
        return text
    home_text = str(home)
    if text == home_text or text.startswith(home_text + os.sep):
        return "~" + text[len(home_text):]
    return text
