"""Style - immutable description of how a block of text is rendered."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Optional

from tui_styles.core.border import Border
from tui_styles.core.color import ColorLike, coerce
from tui_styles.core.position import Position


def _clamp(value: int) -> int:
    return max(0, value)


def _shorthand(name: str, values: tuple[int, ...]) -> tuple[int, int, int, int]:
    """Expand CSS shorthand into (top, right, bottom, left)."""
    if len(values) == 1:
        v = values[0]
        return v, v, v, v
    if len(values) == 2:
        vertical, horizontal = values
        return vertical, horizontal, vertical, horizontal
    if len(values) == 4:
        top, right, bottom, left = values
        return top, right, bottom, left
    raise TypeError(f"{name}() accepts 1, 2, or 4 arguments, got {len(values)}")


@dataclass(frozen=True, repr=False)
class Style:
    """
    Immutable text styling configuration.

    Every attribute is optional: ``None`` means "not set", anything else is
    an explicit value (even ``False`` or ``0``). Setters never modify the
    receiver; each returns a new Style with only the named attribute changed,
    so a Style can be shared freely and branched from.

    Example:
        >>> style = (Style()
        ...     .bold()
        ...     .foreground("#FF5F87")
        ...     .padding(1, 2)
        ...     .border(rounded_border()))
        >>> print(style.render("Hello"))
    """

    # Text attributes
    _bold: Optional[bool] = None
    _faint: Optional[bool] = None
    _italic: Optional[bool] = None
    _underline: Optional[bool] = None
    _blink: Optional[bool] = None
    _reverse: Optional[bool] = None
    _strikethrough: Optional[bool] = None

    # Colors
    _foreground: Optional[ColorLike] = None
    _background: Optional[ColorLike] = None

    # Dimensions
    _width: Optional[int] = None
    _height: Optional[int] = None
    _max_width: Optional[int] = None
    _max_height: Optional[int] = None

    # Alignment
    _align: Optional[Position] = None
    _align_vertical: Optional[Position] = None

    # Spacing
    _padding_top: Optional[int] = None
    _padding_right: Optional[int] = None
    _padding_bottom: Optional[int] = None
    _padding_left: Optional[int] = None
    _margin_top: Optional[int] = None
    _margin_right: Optional[int] = None
    _margin_bottom: Optional[int] = None
    _margin_left: Optional[int] = None

    # Border
    _border_type: Optional[Border] = None
    _border_top: Optional[bool] = None
    _border_right: Optional[bool] = None
    _border_bottom: Optional[bool] = None
    _border_left: Optional[bool] = None
    _border_foreground: Optional[ColorLike] = None
    _border_background: Optional[ColorLike] = None

    def __repr__(self) -> str:
        attrs = [
            f"{f.name.lstrip('_')}={getattr(self, f.name)!r}"
            for f in fields(self)
            if getattr(self, f.name) is not None
        ]
        return f"Style({', '.join(attrs)})"

    def copy(self) -> Style:
        """Return an equal, independent Style."""
        return replace(self)

    # Text attributes

    def bold(self, value: bool = True) -> Style:
        return replace(self, _bold=value)

    def faint(self, value: bool = True) -> Style:
        return replace(self, _faint=value)

    def italic(self, value: bool = True) -> Style:
        return replace(self, _italic=value)

    def underline(self, value: bool = True) -> Style:
        return replace(self, _underline=value)

    def blink(self, value: bool = True) -> Style:
        """Blinking text; rarely supported by modern terminals."""
        return replace(self, _blink=value)

    def reverse(self, value: bool = True) -> Style:
        """Swap foreground and background colors."""
        return replace(self, _reverse=value)

    def strikethrough(self, value: bool = True) -> Style:
        return replace(self, _strikethrough=value)

    # Colors

    def foreground(self, color: ColorLike | str) -> Style:
        """Set the text color. Strings are parsed; raises ColorError if invalid."""
        return replace(self, _foreground=coerce(color))

    def background(self, color: ColorLike | str) -> Style:
        """Set the background color, also used for padding and alignment cells."""
        return replace(self, _background=coerce(color))

    def set_string(self, color: str) -> Style:
        """Parse ``color`` and use it as the foreground."""
        return self.foreground(color)

    # Dimensions

    def width(self, value: int) -> Style:
        """Target width in cells, used by horizontal alignment."""
        return replace(self, _width=_clamp(value))

    def height(self, value: int) -> Style:
        """Exact height in lines; content is padded or cut to fit."""
        return replace(self, _height=_clamp(value))

    def max_width(self, value: int) -> Style:
        """Lines wider than this are truncated with an ellipsis."""
        return replace(self, _max_width=_clamp(value))

    def max_height(self, value: int) -> Style:
        """The finished block is cut to at most this many lines."""
        return replace(self, _max_height=_clamp(value))

    # Alignment

    def align(self, position: Position) -> Style:
        """Horizontal alignment (LEFT, CENTER, RIGHT) within width()."""
        return replace(self, _align=position)

    def align_vertical(self, position: Position) -> Style:
        """Vertical alignment (TOP, CENTER, BOTTOM) within height()."""
        return replace(self, _align_vertical=position)

    # Spacing

    def padding(self, *values: int) -> Style:
        """
        Set padding using CSS shorthand.

        One value applies to all sides, two are (vertical, horizontal), four
        are (top, right, bottom, left). Any other count raises TypeError.
        """
        top, right, bottom, left = _shorthand("padding", values)
        return replace(
            self,
            _padding_top=_clamp(top),
            _padding_right=_clamp(right),
            _padding_bottom=_clamp(bottom),
            _padding_left=_clamp(left),
        )

    def padding_top(self, value: int) -> Style:
        return replace(self, _padding_top=_clamp(value))

    def padding_right(self, value: int) -> Style:
        return replace(self, _padding_right=_clamp(value))

    def padding_bottom(self, value: int) -> Style:
        return replace(self, _padding_bottom=_clamp(value))

    def padding_left(self, value: int) -> Style:
        return replace(self, _padding_left=_clamp(value))

    def margin(self, *values: int) -> Style:
        """Set margin using CSS shorthand, same rules as padding()."""
        top, right, bottom, left = _shorthand("margin", values)
        return replace(
            self,
            _margin_top=_clamp(top),
            _margin_right=_clamp(right),
            _margin_bottom=_clamp(bottom),
            _margin_left=_clamp(left),
        )

    def margin_top(self, value: int) -> Style:
        return replace(self, _margin_top=_clamp(value))

    def margin_right(self, value: int) -> Style:
        return replace(self, _margin_right=_clamp(value))

    def margin_bottom(self, value: int) -> Style:
        return replace(self, _margin_bottom=_clamp(value))

    def margin_left(self, value: int) -> Style:
        return replace(self, _margin_left=_clamp(value))

    # Border

    def border(self, border: Border, *edges: bool) -> Style:
        """
        Set the border glyphs and which edges are drawn.

        No edge flags enables all four, one flag applies to all four, four
        flags are (top, right, bottom, left). Any other count raises TypeError.
        """
        if not edges:
            edges = (True,)
        if len(edges) == 1:
            edges = edges * 4
        if len(edges) != 4:
            raise TypeError(f"border() accepts 0, 1, or 4 edge arguments, got {len(edges)}")
        top, right, bottom, left = edges
        return replace(
            self,
            _border_type=border,
            _border_top=top,
            _border_right=right,
            _border_bottom=bottom,
            _border_left=left,
        )

    def border_top(self, value: bool = True) -> Style:
        return replace(self, _border_top=value)

    def border_right(self, value: bool = True) -> Style:
        return replace(self, _border_right=value)

    def border_bottom(self, value: bool = True) -> Style:
        return replace(self, _border_bottom=value)

    def border_left(self, value: bool = True) -> Style:
        return replace(self, _border_left=value)

    def border_foreground(self, color: ColorLike | str) -> Style:
        return replace(self, _border_foreground=coerce(color))

    def border_background(self, color: ColorLike | str) -> Style:
        return replace(self, _border_background=coerce(color))

    # Readers

    def get_bold(self) -> bool:
        return bool(self._bold)

    def get_faint(self) -> bool:
        return bool(self._faint)

    def get_italic(self) -> bool:
        return bool(self._italic)

    def get_underline(self) -> bool:
        return bool(self._underline)

    def get_blink(self) -> bool:
        return bool(self._blink)

    def get_reverse(self) -> bool:
        return bool(self._reverse)

    def get_strikethrough(self) -> bool:
        return bool(self._strikethrough)

    def get_foreground(self) -> Optional[ColorLike]:
        return self._foreground

    def get_background(self) -> Optional[ColorLike]:
        return self._background

    def get_width(self) -> Optional[int]:
        return self._width

    def get_height(self) -> Optional[int]:
        return self._height

    def get_max_width(self) -> Optional[int]:
        return self._max_width

    def get_max_height(self) -> Optional[int]:
        return self._max_height

    def get_align(self) -> Optional[Position]:
        return self._align

    def get_align_vertical(self) -> Optional[Position]:
        return self._align_vertical

    def get_padding(self) -> tuple[int, int, int, int]:
        """Padding as (top, right, bottom, left); unset edges read as 0."""
        return (
            self._padding_top or 0,
            self._padding_right or 0,
            self._padding_bottom or 0,
            self._padding_left or 0,
        )

    def get_margin(self) -> tuple[int, int, int, int]:
        """Margin as (top, right, bottom, left); unset edges read as 0."""
        return (
            self._margin_top or 0,
            self._margin_right or 0,
            self._margin_bottom or 0,
            self._margin_left or 0,
        )

    def get_border_type(self) -> Optional[Border]:
        return self._border_type

    def get_border_edges(self) -> tuple[bool, bool, bool, bool]:
        """Enabled edges as (top, right, bottom, left); unset edges read as enabled."""
        return tuple(  # type: ignore[return-value]
            edge is None or edge
            for edge in (self._border_top, self._border_right, self._border_bottom, self._border_left)
        )

    def get_border_foreground(self) -> Optional[ColorLike]:
        return self._border_foreground

    def get_border_background(self) -> Optional[ColorLike]:
        return self._border_background

    def has_any_style(self) -> bool:
        """True if any text attribute or color has been set, even to False."""
        return any(
            value is not None
            for value in (
                self._bold, self._faint, self._italic, self._underline,
                self._blink, self._reverse, self._strikethrough,
                self._foreground, self._background,
            )
        )

    def has_padding(self) -> bool:
        return any(v > 0 for v in self.get_padding())

    def has_margin(self) -> bool:
        return any(v > 0 for v in self.get_margin())

    def has_border(self) -> bool:
        """True if a border type is set and at least one edge is enabled."""
        return self._border_type is not None and any(self.get_border_edges())

    # Rendering

    def render(self, text: str) -> str:
        """Apply this style to ``text`` and return the ANSI-escaped result."""
        from tui_styles.render.terminal import StyleRenderer
        return StyleRenderer().render(self, text)
