"""
Tests for color detection, palette quantization and themed rendering.

Run with: pytest tests/test_colors.py -v
"""

import pytest

from termprompt.ui.primitives.colors import (
    ColorMode,
    RGB,
    RESET,
    detect_color_mode,
    rgb_to_ansi256,
)
from termprompt.ui.primitives.theme import RenderContext, MOCHA, LATTE, THEMES


class TestDetectColorMode:
    @pytest.mark.parametrize("env,expected", [
        ({"COLORTERM": "truecolor"}, ColorMode.TRUE_COLOR),
        ({"COLORTERM": "24bit", "TERM": "dumb"}, ColorMode.TRUE_COLOR),
        ({"TERM": "xterm-256color"}, ColorMode.TRUE_COLOR),
        ({"TERM": "xterm", "TERM_PROGRAM": "iTerm.app"}, ColorMode.TRUE_COLOR),
        ({"TERM_PROGRAM": "vscode"}, ColorMode.TRUE_COLOR),
        ({"WT_SESSION": "abc"}, ColorMode.TRUE_COLOR),
        ({"TERM": "xterm"}, ColorMode.PALETTE_256),
        ({"TERM": "screen"}, ColorMode.PALETTE_256),
        ({"TERM": "dumb"}, ColorMode.NONE),
        ({}, ColorMode.NONE),
    ])
    def test_detection(self, env, expected):
        assert detect_color_mode(env) == expected


class TestQuantization:
    @pytest.mark.parametrize("rgb,index", [
        ((0, 0, 0), 16),
        ((255, 255, 255), 231),
        ((128, 128, 128), 243),
        ((8, 8, 8), 232),
        ((248, 248, 248), 255),
        ((255, 0, 0), 196),
        ((0, 255, 0), 46),
        ((0, 0, 255), 21),
        ((95, 135, 175), 67),
    ])
    def test_known_values(self, rgb, index):
        assert rgb_to_ansi256(*rgb) == index

    def test_grays_use_gray_ramp(self):
        for v in range(8, 249):
            assert 232 <= rgb_to_ansi256(v, v, v) <= 255

    def test_nearest_cube_level(self):
        # 100 is closest to 95 (level 1), 120 to 135 (level 2)
        assert rgb_to_ansi256(100, 0, 0) == 16 + 36 * 1
        assert rgb_to_ansi256(120, 0, 0) == 16 + 36 * 2

    def test_all_results_in_palette(self):
        for r in range(0, 256, 15):
            for g in range(0, 256, 51):
                for b in range(0, 256, 85):
                    assert 16 <= rgb_to_ansi256(r, g, b) <= 255

    def test_deterministic(self):
        assert rgb_to_ansi256(12, 200, 99) == rgb_to_ansi256(12, 200, 99)


class TestRGB:
    def test_from_hex(self):
        assert RGB.from_hex("#89b4fa") == RGB(0x89, 0xb4, 0xfa)
        assert RGB.from_hex("ff0000") == RGB(255, 0, 0)

    @pytest.mark.parametrize("value", ["", "#fff", "#gggggg", "#1234567"])
    def test_malformed_hex_is_black(self, value):
        assert RGB.from_hex(value) == RGB(0, 0, 0)

    def test_true_color_escape(self):
        assert RGB(1, 2, 3).color("x", ColorMode.TRUE_COLOR) == "\x1b[38;2;1;2;3mx" + RESET

    def test_palette_escape(self):
        assert RGB(255, 0, 0).color("x", ColorMode.PALETTE_256) == "\x1b[38;5;196mx" + RESET

    def test_background(self):
        assert RGB(1, 2, 3).bg("x", ColorMode.TRUE_COLOR) == "\x1b[48;2;1;2;3mx" + RESET

    def test_no_color_is_plain(self):
        assert RGB(1, 2, 3).color("x", ColorMode.NONE) == "x"
        assert RGB(1, 2, 3).bg("x", ColorMode.NONE) == "x"


class TestRenderContext:
    def test_plain_mode_has_no_escapes(self, plain_ctx):
        for role in ("bold", "dim", "underline", "text", "subtle", "muted",
                     "accent", "success", "warning", "error", "highlight"):
            assert getattr(plain_ctx, role)("hi") == "hi"

    def test_roles_use_theme_colors(self, color_ctx):
        assert color_ctx.accent("hi") == MOCHA.blue.color("hi", ColorMode.TRUE_COLOR)
        assert color_ctx.error("hi") == MOCHA.red.color("hi", ColorMode.TRUE_COLOR)

    def test_themes_differ(self):
        dark = RenderContext(MOCHA, ColorMode.TRUE_COLOR)
        light = RenderContext(LATTE, ColorMode.TRUE_COLOR)
        assert dark.text("hi") != light.text("hi")

    def test_theme_registry(self):
        assert THEMES["mocha"] is MOCHA
        assert THEMES["latte"].name == "latte"
