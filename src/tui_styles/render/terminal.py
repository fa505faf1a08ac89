"""Render styled text to terminal-compatible escape sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from tui_styles.core.border import Border
from tui_styles.core.color import Color, resolve
from tui_styles.core.constants import (
    RESET,
    SGR_BLINK,
    SGR_BOLD,
    SGR_FAINT,
    SGR_ITALIC,
    SGR_REVERSE,
    SGR_STRIKETHROUGH,
    SGR_UNDERLINE,
    sgr,
)
from tui_styles.core.position import Position
from tui_styles.text.ansi_text import truncate, width

if TYPE_CHECKING:
    from tui_styles.core.style import Style

ELLIPSIS = "..."


@dataclass(frozen=True)
class _Colors:
    """A style's colors with adaptive colors resolved for one render."""
    fg: Optional[Color]
    bg: Optional[Color]
    border_fg: Optional[Color]
    border_bg: Optional[Color]


def _widest(lines: list[str]) -> int:
    return max((width(line) for line in lines), default=0)


class StyleRenderer:
    """
    Render text through a Style.

    The pipeline always runs in the same order: per-line attributes and
    colors, horizontal alignment, vertical alignment, padding, border,
    margin, then the max-height cut. A stage whose attributes are unset
    leaves the lines untouched.

    ``is_light`` decides which half of an AdaptiveColor is used; it defaults
    to the environment heuristic in ``tui_styles.env``.
    """

    def __init__(self, is_light: Optional[Callable[[], bool]] = None):
        self.is_light = is_light

    def render(self, style: Style, text: str) -> str:
        """Render text to an ANSI string."""
        # Padding and borders still draw around empty content
        if not text and not style.has_padding() and not style.has_border():
            return ""

        colors = self._resolve_colors(style)

        if text:
            lines = self._style_lines(style, colors, text)
        else:
            lines = [""]

        if style.get_width() is not None and style.get_align() is not None:
            lines = self._align_horizontal(style, colors, lines)

        if style.get_height() is not None:
            lines = self._align_vertical(style, colors, lines)

        if style.has_padding():
            lines = self._apply_padding(style, colors, lines)

        if style.has_border():
            lines = self._apply_border(style, colors, lines)

        if style.has_margin():
            lines = self._apply_margin(style, lines)

        max_height = style.get_max_height()
        if max_height is not None:
            lines = lines[:max_height]

        return "\n".join(lines)

    def _resolve_colors(self, style: Style) -> _Colors:
        def res(color):
            return None if color is None else resolve(color, self.is_light)

        return _Colors(
            fg=res(style.get_foreground()),
            bg=res(style.get_background()),
            border_fg=res(style.get_border_foreground()),
            border_bg=res(style.get_border_background()),
        )

    # Per-line attributes

    def _prefix(self, style: Style, colors: _Colors) -> str:
        """SGR codes opening a styled line, in fixed order."""
        parts: list[str] = []

        for enabled, code in (
            (style.get_bold(), SGR_BOLD),
            (style.get_faint(), SGR_FAINT),
            (style.get_italic(), SGR_ITALIC),
            (style.get_underline(), SGR_UNDERLINE),
            (style.get_blink(), SGR_BLINK),
            (style.get_reverse(), SGR_REVERSE),
            (style.get_strikethrough(), SGR_STRIKETHROUGH),
        ):
            if enabled:
                parts.append(sgr(code))

        if colors.fg is not None:
            parts.append(colors.fg.to_ansi())
        if colors.bg is not None:
            parts.append(colors.bg.to_ansi_background())

        return "".join(parts)

    def _style_lines(self, style: Style, colors: _Colors, text: str) -> list[str]:
        max_width = style.get_max_width()

        if "\n" not in text and max_width is None:
            raw_lines = [text]
        else:
            raw_lines = text.split("\n")

        prefix = self._prefix(style, colors)
        # An unstyled render must stay plain text
        suffix = RESET if style.has_any_style() else ""

        styled: list[str] = []
        for line in raw_lines:
            if max_width and width(line) > max_width:
                line = truncate(line, max_width, ELLIPSIS)
            if not line:
                # Empty lines carry no codes at all
                styled.append("")
                continue
            styled.append(f"{prefix}{line}{suffix}")
        return styled

    # Blank cells

    def _blank(self, count: int, bg: Optional[Color]) -> str:
        """``count`` spaces, on the background color when there is one."""
        if count <= 0:
            return ""
        if bg is None:
            return " " * count
        return f"{bg.to_ansi_background()}{' ' * count}{RESET}"

    # Alignment

    def _align_horizontal(self, style: Style, colors: _Colors, lines: list[str]) -> list[str]:
        target = style.get_width()
        align = style.get_align()
        result: list[str] = []

        for line in lines:
            gap = target - width(line)
            if gap <= 0:
                result.append(line)
            elif align == Position.RIGHT:
                result.append(self._blank(gap, colors.bg) + line)
            elif align == Position.CENTER:
                left = gap // 2
                result.append(self._blank(left, colors.bg) + line + self._blank(gap - left, colors.bg))
            else:
                result.append(line + self._blank(gap, colors.bg))

        return result

    def _align_vertical(self, style: Style, colors: _Colors, lines: list[str]) -> list[str]:
        target = style.get_height()
        if len(lines) > target:
            return lines[:target]

        fill_width = style.get_width()
        if fill_width is None:
            fill_width = _widest(lines)

        lines = [line + self._blank(fill_width - width(line), colors.bg) for line in lines]
        blank_line = self._blank(fill_width, colors.bg)
        missing = target - len(lines)

        valign = style.get_align_vertical()
        if valign == Position.BOTTOM:
            top = missing
        elif valign == Position.CENTER:
            top = missing // 2
        else:
            top = 0

        return [blank_line] * top + lines + [blank_line] * (missing - top)

    # Padding

    def _apply_padding(self, style: Style, colors: _Colors, lines: list[str]) -> list[str]:
        top, right, bottom, left = style.get_padding()
        content_width = _widest(lines)

        full_line = self._blank(content_width + left + right, colors.bg)
        left_cells = self._blank(left, colors.bg)

        padded = [full_line] * top
        for line in lines:
            fill = content_width - width(line) + right
            padded.append(left_cells + line + self._blank(fill, colors.bg))
        padded.extend([full_line] * bottom)

        return padded

    # Border

    def _border_glyph(self, glyph: str, colors: _Colors) -> str:
        if not glyph:
            return ""
        if colors.border_fg is None and colors.border_bg is None:
            return glyph

        parts: list[str] = []
        if colors.border_fg is not None:
            parts.append(colors.border_fg.to_ansi())
        if colors.border_bg is not None:
            parts.append(colors.border_bg.to_ansi_background())
        parts.append(glyph)
        parts.append(RESET)
        return "".join(parts)

    def _border_line(
        self,
        left_corner: str,
        horizontal: str,
        right_corner: str,
        content_width: int,
        left: bool,
        right: bool,
        colors: _Colors,
    ) -> str:
        parts: list[str] = []
        if left:
            parts.append(self._border_glyph(left_corner, colors))
        parts.append(self._border_glyph(horizontal * content_width, colors))
        if right:
            parts.append(self._border_glyph(right_corner, colors))
        return "".join(parts)

    def _apply_border(self, style: Style, colors: _Colors, lines: list[str]) -> list[str]:
        border: Border = style.get_border_type()
        top, right, bottom, left = style.get_border_edges()
        content_width = _widest(lines)

        boxed: list[str] = []

        if top:
            boxed.append(self._border_line(
                border.top_left, border.top, border.top_right,
                content_width, left, right, colors,
            ))

        for line in lines:
            parts: list[str] = []
            if left:
                parts.append(self._border_glyph(border.left, colors))
            parts.append(line)
            parts.append(" " * (content_width - width(line)))
            if right:
                parts.append(self._border_glyph(border.right, colors))
            boxed.append("".join(parts))

        if bottom:
            boxed.append(self._border_line(
                border.bottom_left, border.bottom, border.bottom_right,
                content_width, left, right, colors,
            ))

        return boxed

    # Margin

    def _apply_margin(self, style: Style, lines: list[str]) -> list[str]:
        top, right, bottom, left = style.get_margin()
        block_width = _widest(lines)

        blank_line = " " * (left + block_width + right)
        result = [blank_line] * top
        for line in lines:
            result.append(" " * left + line + " " * (block_width - width(line) + right))
        result.extend([blank_line] * bottom)

        return result
