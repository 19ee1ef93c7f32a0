"""Tests for style-to-CSS mapping."""

import pytest

from email_styler.rendering.css import (
    escape_font_family,
    format_number,
    hex_to_rgb,
    hex_to_rgba,
    margin,
    round_half_up,
    text_declarations,
)
from email_styler.styles import StyleConfig


class TestHexToRgb:
    def test_uppercase_hex(self):
        """Test the documented example color."""
        assert hex_to_rgb("#1A2B3C") == "rgb(26,43,60)"

    def test_lowercase_without_hash(self):
        """Test that the leading # is optional and case does not matter."""
        assert hex_to_rgb("1a2b3c") == "rgb(26,43,60)"

    def test_black_and_white(self):
        assert hex_to_rgb("#000000") == "rgb(0,0,0)"
        assert hex_to_rgb("#FFFFFF") == "rgb(255,255,255)"

    @pytest.mark.parametrize("color", ["tomato", "#abc", "#12345g", "", "rgb(1,2,3)"])
    def test_invalid_passes_through(self, color):
        """Test that anything but #rrggbb is returned unchanged."""
        assert hex_to_rgb(color) == color

    def test_rgba(self):
        assert hex_to_rgba("#ff0000", 0.2) == "rgba(255,0,0,0.2)"
        assert hex_to_rgba("tomato", 0.2) == "tomato"


class TestFontFamily:
    def test_double_quotes_become_entities(self):
        """Test that quoted family names survive a double-quoted attribute."""
        value = 'Georgia, "Times New Roman", serif'
        assert escape_font_family(value) == "Georgia, &quot;Times New Roman&quot;, serif"

    def test_unquoted_unchanged(self):
        assert escape_font_family("Arial, sans-serif") == "Arial, sans-serif"


class TestNumbers:
    def test_round_half_up(self):
        """Test that .5 rounds up instead of to even."""
        assert round_half_up(40.5) == 41
        assert round_half_up(31.5) == 32
        assert round_half_up(25.6) == 26
        assert round_half_up(19.2) == 19

    def test_round_half_up_non_finite(self):
        assert round_half_up(float("inf")) == 0

    def test_format_number(self):
        assert format_number(16) == "16"
        assert format_number(1.5) == "1.5"
        assert format_number(1.5 * 0.9) == "1.35"
        assert format_number(0.1 + 0.2) == "0.3"
        assert format_number(2.0) == "2"
        assert format_number(0.0) == "0"

    def test_margin(self):
        assert margin("0", "18px") == "margin:0 0 18px 0;"


class TestTextDeclarations:
    def test_defaults(self):
        declarations = text_declarations(StyleConfig())
        assert "font-size:16px;" in declarations
        assert "line-height:1.5;" in declarations
        assert "font-weight:400;" in declarations
        assert "color:rgb(0,0,0);" in declarations
        assert "&quot;Segoe UI&quot;" in declarations

    def test_overrides(self):
        declarations = text_declarations(StyleConfig(), weight=700, font_size=36, line_height=1.35)
        assert "font-size:36px;" in declarations
        assert "line-height:1.35;" in declarations
        assert "font-weight:700;" in declarations
