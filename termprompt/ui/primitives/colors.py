"""
Color capability detection and RGB rendering.

The terminal's color depth is inferred once, at import, from environment
variables. RGB colors render as 24-bit escapes when true color is available
and are quantized onto the xterm 256-color palette otherwise.
"""

import os
from dataclasses import dataclass
from enum import IntEnum


RESET = "\x1b[0m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"
UNDERLINE = "\x1b[4m"


class ColorMode(IntEnum):
    NONE = 0
    PALETTE_256 = 1
    TRUE_COLOR = 2


# Terminal programs known to support 24-bit color
TRUE_COLOR_PROGRAMS = {"iTerm.app", "Apple_Terminal", "Hyper", "vscode"}

# Per-channel intensities of the xterm 6x6x6 color cube
CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def detect_color_mode(environ=None) -> ColorMode:
    """Infer color support from COLORTERM, TERM, TERM_PROGRAM and WT_SESSION."""
    env = os.environ if environ is None else environ

    colorterm = env.get("COLORTERM", "")
    if colorterm in ("truecolor", "24bit"):
        return ColorMode.TRUE_COLOR

    term = env.get("TERM", "")
    if "256color" in term or "24bit" in term:
        return ColorMode.TRUE_COLOR

    if env.get("TERM_PROGRAM", "") in TRUE_COLOR_PROGRAMS:
        return ColorMode.TRUE_COLOR

    # Windows Terminal
    if env.get("WT_SESSION"):
        return ColorMode.TRUE_COLOR

    if term and term != "dumb":
        return ColorMode.PALETTE_256

    return ColorMode.NONE


DETECTED_COLOR_MODE = detect_color_mode()


def _nearest_cube_index(value: int) -> int:
    return min(range(len(CUBE_LEVELS)), key=lambda i: abs(CUBE_LEVELS[i] - value))


def rgb_to_ansi256(r: int, g: int, b: int) -> int:
    """Map an RGB value to the closest xterm 256-color palette index."""
    if r == g == b:
        # Grayscale ramp (232-255), with pure black/white from the cube
        if r < 8:
            return 16
        if r > 248:
            return 231
        return int((r - 8) / 247 * 24) + 232

    ri = _nearest_cube_index(r)
    gi = _nearest_cube_index(g)
    bi = _nearest_cube_index(b)
    return 16 + 36 * ri + 6 * gi + bi


@dataclass(frozen=True)
class RGB:
    """An RGB color, rendered according to a ColorMode."""
    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: str) -> "RGB":
        """Parse "#rrggbb" (leading # optional). Malformed input gives black."""
        value = value.lstrip("#")
        if len(value) != 6:
            return cls(0, 0, 0)
        try:
            return cls(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))
        except ValueError:
            return cls(0, 0, 0)

    def sgr(self, mode: ColorMode, background: bool = False) -> str:
        """Escape sequence selecting this color, or "" when color is off."""
        if mode == ColorMode.NONE:
            return ""
        layer = 48 if background else 38
        if mode == ColorMode.TRUE_COLOR:
            return f"\x1b[{layer};2;{self.r};{self.g};{self.b}m"
        return f"\x1b[{layer};5;{rgb_to_ansi256(self.r, self.g, self.b)}m"

    def color(self, text: str, mode: ColorMode = DETECTED_COLOR_MODE) -> str:
        """Apply this color as foreground."""
        code = self.sgr(mode)
        if not code:
            return text
        return f"{code}{text}{RESET}"

    def bg(self, text: str, mode: ColorMode = DETECTED_COLOR_MODE) -> str:
        """Apply this color as background."""
        code = self.sgr(mode, background=True)
        if not code:
            return text
        return f"{code}{text}{RESET}"
