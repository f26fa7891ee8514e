"""
Color themes and the render context passed to every widget.
"""

from dataclasses import dataclass

from .colors import RGB, ColorMode, DETECTED_COLOR_MODE, BOLD, DIM, UNDERLINE, RESET


@dataclass(frozen=True)
class Theme:
    """Catppuccin-style named palette."""
    name: str
    # Base colors
    rosewater: RGB
    flamingo: RGB
    pink: RGB
    mauve: RGB
    red: RGB
    maroon: RGB
    peach: RGB
    yellow: RGB
    green: RGB
    teal: RGB
    sky: RGB
    sapphire: RGB
    blue: RGB
    lavender: RGB
    # Text colors
    text: RGB
    subtext1: RGB
    subtext0: RGB
    # Overlay colors
    overlay2: RGB
    overlay1: RGB
    overlay0: RGB
    # Surface colors
    surface2: RGB
    surface1: RGB
    surface0: RGB
    # Background colors
    base: RGB
    mantle: RGB
    crust: RGB


def _theme(name: str, **hex_colors: str) -> Theme:
    return Theme(name=name, **{key: RGB.from_hex(value) for key, value in hex_colors.items()})


# Catppuccin Mocha (dark)
MOCHA = _theme(
    "mocha",
    rosewater="#f5e0dc", flamingo="#f2cdcd", pink="#f5c2e7", mauve="#cba6f7",
    red="#f38ba8", maroon="#eba0ac", peach="#fab387", yellow="#f9e2af",
    green="#a6e3a1", teal="#94e2d5", sky="#89dceb", sapphire="#74c7ec",
    blue="#89b4fa", lavender="#b4befe",
    text="#cdd6f4", subtext1="#bac2de", subtext0="#a6adc8",
    overlay2="#9399b2", overlay1="#7f849c", overlay0="#6c7086",
    surface2="#585b70", surface1="#45475a", surface0="#313244",
    base="#1e1e2e", mantle="#181825", crust="#11111b",
)

# Catppuccin Latte (light)
LATTE = _theme(
    "latte",
    rosewater="#dc8a78", flamingo="#dd7878", pink="#ea76cb", mauve="#8839ef",
    red="#d20f39", maroon="#e64553", peach="#fe640b", yellow="#df8e1d",
    green="#40a02b", teal="#179299", sky="#04a5e5", sapphire="#209fb5",
    blue="#1e66f5", lavender="#7287fd",
    text="#4c4f69", subtext1="#5c5f77", subtext0="#6c6f85",
    overlay2="#7c7f93", overlay1="#8c8fa1", overlay0="#9ca0b0",
    surface2="#acb0be", surface1="#bcc0cc", surface0="#ccd0da",
    base="#eff1f5", mantle="#e6e9ef", crust="#dce0e8",
)

THEMES = {
    "mocha": MOCHA,
    "latte": LATTE,
}


@dataclass(frozen=True)
class RenderContext:
    """
    Rendering configuration threaded through every widget call.

    Maps semantic roles (accent, success, muted, ...) onto the theme and
    renders them for the given color mode.
    """
    theme: Theme = MOCHA
    color_mode: ColorMode = DETECTED_COLOR_MODE

    def _style(self, code: str, text: str) -> str:
        if self.color_mode == ColorMode.NONE:
            return text
        return f"{code}{text}{RESET}"

    def bold(self, text: str) -> str:
        return self._style(BOLD, text)

    def dim(self, text: str) -> str:
        return self._style(DIM, text)

    def underline(self, text: str) -> str:
        return self._style(UNDERLINE, text)

    def text(self, text: str) -> str:
        return self.theme.text.color(text, self.color_mode)

    def subtle(self, text: str) -> str:
        return self.theme.subtext0.color(text, self.color_mode)

    def muted(self, text: str) -> str:
        return self.theme.overlay0.color(text, self.color_mode)

    def accent(self, text: str) -> str:
        return self.theme.blue.color(text, self.color_mode)

    def success(self, text: str) -> str:
        return self.theme.green.color(text, self.color_mode)

    def warning(self, text: str) -> str:
        return self.theme.yellow.color(text, self.color_mode)

    def error(self, text: str) -> str:
        return self.theme.red.color(text, self.color_mode)

    def highlight(self, text: str) -> str:
        return self.theme.mauve.color(text, self.color_mode)


DEFAULT_CONTEXT = RenderContext()
