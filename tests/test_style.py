"""Tests for the immutable Style builder."""

import dataclasses

import pytest

from tui_styles import (
    AdaptiveColor,
    CENTER,
    Color,
    ColorError,
    RIGHT,
    Style,
    new_style,
    normal_border,
    rounded_border,
)


class TestImmutability:
    """Setters always return a new Style."""

    def test_setter_leaves_receiver_unchanged(self) -> None:
        base = new_style()
        bold = base.bold()

        assert base is not bold
        assert base.get_bold() is False
        assert bold.get_bold() is True
        assert base == Style()

    def test_branching_from_a_shared_base(self) -> None:
        base = new_style().foreground("red")
        a = base.bold()
        b = base.italic()

        assert a.get_bold() and not a.get_italic()
        assert b.get_italic() and not b.get_bold()
        assert a.get_foreground() == b.get_foreground() == Color("red")

    def test_fields_cannot_be_assigned(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Style()._bold = True  # type: ignore[misc]

    def test_copy_is_equal(self) -> None:
        style = new_style().bold().padding(1, 2)
        assert style.copy() == style

    def test_repr_lists_set_fields(self) -> None:
        text = repr(new_style().bold().width(10))
        assert text.startswith("Style(")
        assert "bold=True" in text
        assert "width=10" in text
        assert "italic" not in text


class TestAttributes:
    """Tests for text attribute setters and readers."""

    def test_defaults(self) -> None:
        style = Style()
        assert not style.get_bold()
        assert not style.get_strikethrough()
        assert style.get_foreground() is None
        assert style.get_width() is None
        assert not style.has_any_style()

    def test_all_attributes(self) -> None:
        style = Style().bold().faint().italic().underline().blink().reverse().strikethrough()
        assert all((
            style.get_bold(), style.get_faint(), style.get_italic(), style.get_underline(),
            style.get_blink(), style.get_reverse(), style.get_strikethrough(),
        ))

    def test_explicit_false_counts_as_set(self) -> None:
        style = Style().bold(False)
        assert style.get_bold() is False
        assert style.has_any_style()


class TestColors:
    """Tests for color setters."""

    def test_string_is_parsed(self) -> None:
        assert Style().foreground("#abc").get_foreground() == Color("#AABBCC")

    def test_color_object(self) -> None:
        assert Style().background(Color.BLUE).get_background() == Color("blue")

    def test_adaptive_color_kept(self) -> None:
        adaptive = AdaptiveColor.parse("black", "white")
        assert Style().foreground(adaptive).get_foreground() is adaptive

    def test_set_string_sets_foreground(self) -> None:
        assert Style().set_string("214").get_foreground() == Color("214")

    def test_invalid_color_raises(self) -> None:
        with pytest.raises(ColorError):
            Style().foreground("not-a-color")
        with pytest.raises(ColorError):
            Style().border_background("#12")

    def test_border_colors(self) -> None:
        style = Style().border_foreground("red").border_background("blue")
        assert style.get_border_foreground() == Color("red")
        assert style.get_border_background() == Color("blue")


class TestDimensions:
    """Tests for size and alignment setters."""

    def test_negative_values_clamp_to_zero(self) -> None:
        style = Style().width(-5).height(-1).max_width(-2).max_height(-3)
        assert style.get_width() == 0
        assert style.get_height() == 0
        assert style.get_max_width() == 0
        assert style.get_max_height() == 0

    def test_alignment(self) -> None:
        style = Style().align(RIGHT).align_vertical(CENTER)
        assert style.get_align() == RIGHT
        assert style.get_align_vertical() == CENTER


class TestSpacing:
    """Tests for the CSS-style padding and margin shorthand."""

    def test_padding_one_value(self) -> None:
        assert Style().padding(2).get_padding() == (2, 2, 2, 2)

    def test_padding_two_values(self) -> None:
        assert Style().padding(1, 3).get_padding() == (1, 3, 1, 3)

    def test_padding_four_values(self) -> None:
        assert Style().padding(1, 2, 3, 4).get_padding() == (1, 2, 3, 4)

    @pytest.mark.parametrize("values", [(), (1, 2, 3), (1, 2, 3, 4, 5)])
    def test_padding_bad_arity(self, values: tuple) -> None:
        with pytest.raises(TypeError, match="padding"):
            Style().padding(*values)

    def test_margin_shorthand(self) -> None:
        assert Style().margin(1, 2).get_margin() == (1, 2, 1, 2)
        with pytest.raises(TypeError, match="margin"):
            Style().margin(1, 2, 3)

    def test_negative_padding_clamps(self) -> None:
        assert Style().padding(-1, 2).get_padding() == (0, 2, 0, 2)

    def test_per_edge_setters(self) -> None:
        style = Style().padding_top(1).padding_left(4).margin_bottom(2).margin_right(-1)
        assert style.get_padding() == (1, 0, 0, 4)
        assert style.get_margin() == (0, 0, 2, 0)

    def test_has_padding_and_margin(self) -> None:
        assert not Style().has_padding()
        assert not Style().padding(0).has_padding()
        assert Style().padding(0, 1).has_padding()
        assert Style().margin_top(1).has_margin()


class TestBorder:
    """Tests for border configuration."""

    def test_border_enables_all_edges(self) -> None:
        style = Style().border(rounded_border())
        assert style.get_border_type() == rounded_border()
        assert style.get_border_edges() == (True, True, True, True)
        assert style.has_border()

    def test_single_flag_applies_to_all(self) -> None:
        style = Style().border(normal_border(), False)
        assert style.get_border_edges() == (False, False, False, False)
        assert not style.has_border()

    def test_four_flags(self) -> None:
        style = Style().border(normal_border(), True, False, True, False)
        assert style.get_border_edges() == (True, False, True, False)

    @pytest.mark.parametrize("edges", [(True, False), (True, True, True)])
    def test_bad_arity(self, edges: tuple) -> None:
        with pytest.raises(TypeError, match="border"):
            Style().border(normal_border(), *edges)

    def test_edge_setters(self) -> None:
        style = Style().border(normal_border()).border_left(False)
        assert style.get_border_edges() == (True, True, True, False)

    def test_no_border_type_means_no_border(self) -> None:
        assert not Style().border_top().has_border()
