"""Tests for core value types: colors, borders, positions."""

import pytest

from tui_styles.core.border import (
    BORDERS,
    Border,
    block_border,
    double_border,
    hidden_border,
    inner_half_block_border,
    normal_border,
    outer_half_block_border,
    rounded_border,
    thick_border,
)
from tui_styles.core.color import AdaptiveColor, Color, ColorError, ColorMode
from tui_styles.core.position import Position
from tui_styles.env import is_light_terminal


class TestColor:
    """Tests for Color parsing and normalization."""

    def test_hex_is_uppercased(self) -> None:
        assert Color("#ff8800").value == "#FF8800"

    def test_short_hex_is_expanded(self) -> None:
        assert Color("#f80").value == "#FF8800"
        assert Color("#abc") == Color("#AABBCC")

    def test_names_are_lowercased(self) -> None:
        assert Color("RED").value == "red"
        assert Color("Bright-Blue").value == "bright-blue"
        assert Color("grey").value == "grey"

    def test_numeric_codes(self) -> None:
        assert Color("0").value == "0"
        assert Color("255").value == "255"
        assert Color("214").mode == ColorMode.EXTENDED_256

    @pytest.mark.parametrize("spec", ["", "#GG0000", "#12345", "#1234567", "FF0000", "256", "-1", "purple", "1.5", "#FFF\n", "#FFFFFF\n", "12\n", "red\n", " 12"])
    def test_invalid_specs_raise(self, spec: str) -> None:
        with pytest.raises(ColorError):
            Color(spec)

    def test_error_messages(self) -> None:
        with pytest.raises(ColorError, match="empty"):
            Color("")
        with pytest.raises(ColorError, match="invalid hex color"):
            Color("#GG0000")
        with pytest.raises(ColorError, match="out of range"):
            Color("300")

    def test_color_error_is_value_error(self) -> None:
        assert issubclass(ColorError, ValueError)

    def test_modes(self) -> None:
        assert Color("#000000").mode == ColorMode.TRUE_COLOR
        assert Color("cyan").mode == ColorMode.STANDARD_16
        assert Color("42").mode == ColorMode.EXTENDED_256

    def test_from_rgb(self) -> None:
        color = Color.from_rgb(255, 128, 0)
        assert color.value == "#FF8000"
        assert color.rgb() == (255, 128, 0)

    def test_from_256(self) -> None:
        assert Color.from_256(196).value == "196"
        with pytest.raises(ColorError):
            Color.from_256(256)

    def test_named_constants(self) -> None:
        assert Color.RED.value == "red"
        assert Color.BRIGHT_WHITE.value == "bright-white"

    def test_to_ansi_named(self) -> None:
        assert Color("red").to_ansi() == "\x1b[31m"
        assert Color("bright-cyan").to_ansi() == "\x1b[96m"
        assert Color("gray").to_ansi() == "\x1b[90m"
        assert Color("bright-grey").to_ansi() == "\x1b[97m"

    def test_to_ansi_background_named(self) -> None:
        assert Color("blue").to_ansi_background() == "\x1b[44m"
        assert Color("bright-green").to_ansi_background() == "\x1b[102m"

    def test_to_ansi_hex(self) -> None:
        assert Color("#FF0000").to_ansi() == "\x1b[38;2;255;0;0m"
        assert Color("#0f0").to_ansi_background() == "\x1b[48;2;0;255;0m"

    def test_to_ansi_256(self) -> None:
        assert Color("196").to_ansi() == "\x1b[38;5;196m"
        assert Color("21").to_ansi_background() == "\x1b[48;5;21m"

    def test_colors_are_hashable(self) -> None:
        assert len({Color("#f00"), Color("#FF0000"), Color("red")}) == 2


class TestAdaptiveColor:
    """Tests for AdaptiveColor resolution."""

    def test_parse(self) -> None:
        adaptive = AdaptiveColor.parse("#000", "white")
        assert adaptive.light == Color("#000000")
        assert adaptive.dark == Color("white")

    def test_parse_names_bad_side(self) -> None:
        with pytest.raises(ColorError, match="invalid light color"):
            AdaptiveColor.parse("nope", "white")
        with pytest.raises(ColorError, match="invalid dark color"):
            AdaptiveColor.parse("black", "#XYZ")

    def test_constructor_parses_strings(self) -> None:
        adaptive = AdaptiveColor("#fff", "BLACK")
        assert adaptive.light == Color("#FFFFFF")
        assert adaptive.dark == Color("black")
        assert adaptive == AdaptiveColor(Color("#FFFFFF"), Color("black"))

    def test_constructor_rejects_invalid_side(self) -> None:
        with pytest.raises(ColorError, match="invalid light color"):
            AdaptiveColor("not-a-color", "#000")
        with pytest.raises(ColorError, match="invalid dark color"):
            AdaptiveColor(Color("black"), "#FFF\n")

    def test_constructor_rejects_non_colors(self) -> None:
        with pytest.raises(ColorError, match="expected Color or str"):
            AdaptiveColor(Color("black"), 42)  # type: ignore[arg-type]

    def test_injected_detector(self) -> None:
        adaptive = AdaptiveColor(Color("black"), Color("white"))
        assert adaptive.to_color(lambda: True) == Color("black")
        assert adaptive.to_color(lambda: False) == Color("white")

    def test_defaults_to_dark(self) -> None:
        adaptive = AdaptiveColor(Color("black"), Color("white"))
        assert adaptive.to_color() == Color("white")

    def test_light_environment(self, light_terminal: None) -> None:
        adaptive = AdaptiveColor(Color("black"), Color("white"))
        assert adaptive.to_color() == Color("black")


class TestBackgroundDetection:
    """Tests for the environment heuristic."""

    def test_empty_environment_is_dark(self) -> None:
        assert is_light_terminal({}) is False

    def test_term_background(self) -> None:
        assert is_light_terminal({"TERM_BACKGROUND": "LIGHT"}) is True
        assert is_light_terminal({"TERM_BACKGROUND": "dark"}) is False

    def test_term_background_wins(self) -> None:
        env = {"TERM_BACKGROUND": "dark", "COLORFGBG": "0;15"}
        assert is_light_terminal(env) is False

    def test_colorfgbg(self) -> None:
        assert is_light_terminal({"COLORFGBG": "0;15"}) is True
        assert is_light_terminal({"COLORFGBG": "15;0"}) is False
        assert is_light_terminal({"COLORFGBG": "15;6"}) is False
        assert is_light_terminal({"COLORFGBG": "15;7"}) is True

    def test_malformed_colorfgbg(self) -> None:
        assert is_light_terminal({"COLORFGBG": "default"}) is False
        assert is_light_terminal({"COLORFGBG": "0;x"}) is False
        assert is_light_terminal({"COLORFGBG": "0;default;15"}) is False


class TestBorder:
    """Tests for the predefined borders."""

    def test_normal_border(self) -> None:
        b = normal_border()
        assert (b.top_left, b.top, b.top_right) == ("┌", "─", "┐")
        assert (b.left, b.right) == ("│", "│")
        assert (b.bottom_left, b.bottom, b.bottom_right) == ("└", "─", "┘")

    def test_rounded_border_corners(self) -> None:
        b = rounded_border()
        assert (b.top_left, b.top_right, b.bottom_left, b.bottom_right) == ("╭", "╮", "╰", "╯")

    def test_thick_and_double(self) -> None:
        assert thick_border().top_left == "┏"
        assert thick_border().left == "┃"
        assert double_border().top == "═"
        assert double_border().bottom_right == "╝"

    def test_block_border_is_uniform(self) -> None:
        b = block_border()
        assert {b.top, b.bottom, b.left, b.right, b.top_left, b.top_right, b.bottom_left, b.bottom_right} == {"█"}

    def test_half_block_borders(self) -> None:
        outer = outer_half_block_border()
        inner = inner_half_block_border()
        assert (outer.top, outer.bottom, outer.left, outer.right) == ("▀", "▄", "▌", "▐")
        assert (inner.top, inner.bottom, inner.left, inner.right) == ("▄", "▀", "▐", "▌")
        assert outer.top_left == "▛"
        assert inner.top_left == "▗"

    def test_hidden_border_uses_spaces(self) -> None:
        b = hidden_border()
        assert b.top == b.left == b.top_left == b.bottom_right == " "

    @pytest.mark.parametrize("name", list(BORDERS))
    def test_all_glyphs_present(self, name: str) -> None:
        b = BORDERS[name]()
        for glyph in (b.top, b.bottom, b.left, b.right, b.top_left, b.top_right, b.bottom_left, b.bottom_right):
            assert glyph

    def test_empty_glyph_rejected(self) -> None:
        with pytest.raises(ValueError):
            Border("-", "-", "|", "|", "+", "+", "+", "")

    def test_constructors_return_distinct_sets(self) -> None:
        assert len({make() for make in BORDERS.values()}) == 8


class TestPosition:
    """Tests for Position."""

    def test_axes(self) -> None:
        assert Position.LEFT.is_horizontal and not Position.LEFT.is_vertical
        assert Position.TOP.is_vertical and not Position.TOP.is_horizontal
        assert Position.CENTER.is_horizontal and Position.CENTER.is_vertical

    def test_str(self) -> None:
        assert str(Position.CENTER) == "Center"
        assert str(Position.BOTTOM) == "Bottom"
