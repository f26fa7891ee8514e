"""
UI settings management for termprompt.

Manages settings.json - rendering preferences that persist across runs.
"""

import json
from pathlib import Path

from ..core.logging import debug_log
from ..ui.primitives.colors import ColorMode, DETECTED_COLOR_MODE
from ..ui.primitives.theme import THEMES, MOCHA, RenderContext

# settings.json value -> ColorMode ("auto" uses the detected mode)
COLOR_MODE_NAMES = {
    "none": ColorMode.NONE,
    "256": ColorMode.PALETTE_256,
    "truecolor": ColorMode.TRUE_COLOR,
}


class UISettings:
    """
    Manages settings.json - rendering preferences that persist across runs.

    Stores:
    - Theme name ("mocha" dark, "latte" light)
    - Color mode override ("auto", "none", "256", "truecolor")
    - Spinner tick interval and file browser page size
    """

    DEFAULT_THEME = "mocha"
    DEFAULT_COLOR_MODE = "auto"
    DEFAULT_SPINNER_INTERVAL_MS = 80
    DEFAULT_BROWSER_MAX_VISIBLE = 12

    def __init__(self, path: Path):
        self.path = path
        self.theme: str = self.DEFAULT_THEME
        self.color_mode: str = self.DEFAULT_COLOR_MODE
        self.spinner_interval_ms: int = self.DEFAULT_SPINNER_INTERVAL_MS
        self.browser_max_visible: int = self.DEFAULT_BROWSER_MAX_VISIBLE

    @classmethod
    def load(cls, path: Path) -> "UISettings":
        """Load settings from file. Missing or unreadable files give defaults."""
        settings = cls(path)

        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)

                settings.theme = data.get("theme", cls.DEFAULT_THEME)
                settings.color_mode = data.get("color_mode", cls.DEFAULT_COLOR_MODE)
                settings.spinner_interval_ms = int(data.get("spinner_interval_ms", cls.DEFAULT_SPINNER_INTERVAL_MS))
                settings.browser_max_visible = int(data.get("browser_max_visible", cls.DEFAULT_BROWSER_MAX_VISIBLE))
            except (json.JSONDecodeError, IOError, TypeError, ValueError, AttributeError) as e:
                debug_log(f"SETTINGS | ignoring unreadable {path}: {e}")
                return cls(path)

        return settings

    def save(self):
        """Save settings to file."""
        data = {
            "theme": self.theme,
            "color_mode": self.color_mode,
            "spinner_interval_ms": self.spinner_interval_ms,
            "browser_max_visible": self.browser_max_visible,
        }
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def resolved_color_mode(self) -> ColorMode:
        """The configured color mode, falling back to detection for "auto" or unknown values."""
        return COLOR_MODE_NAMES.get(self.color_mode, DETECTED_COLOR_MODE)

    def render_context(self) -> RenderContext:
        """Build the RenderContext widgets should draw with."""
        theme = THEMES.get(self.theme, MOCHA)
        return RenderContext(theme=theme, color_mode=self.resolved_color_mode())
