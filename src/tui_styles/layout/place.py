"""Position a rendered block inside a fixed-size box."""

from __future__ import annotations

from tui_styles.core.position import Position
from tui_styles.text.ansi_text import truncate, width as text_width


def _offset(space: int, size: int, pos: Position, end: Position) -> int:
    """Start offset of ``size`` cells inside ``space``, never negative."""
    if pos == Position.CENTER:
        return max(0, (space - size) // 2)
    if pos == end:
        return max(0, space - size)
    return 0


def place(width: int, height: int, h_pos: Position, v_pos: Position, content: str) -> str:
    """
    Place content in a ``width`` x ``height`` box filled with spaces.

    Lines running past the right edge are cut (escape sequences are kept),
    rows below the bottom edge are dropped. A box with no area is "".
    """
    if width <= 0 or height <= 0:
        return ""

    lines = content.split("\n")
    content_width = max(text_width(line) for line in lines)

    start_row = _offset(height, len(lines), v_pos, Position.BOTTOM)
    start_col = _offset(width, content_width, h_pos, Position.RIGHT)

    box = [" " * width for _ in range(height)]

    for i, line in enumerate(lines):
        row = start_row + i
        if row >= height:
            break
        line = truncate(line, width - start_col)
        line_width = text_width(line)
        box[row] = " " * start_col + line + " " * (width - start_col - line_width)

    return "\n".join(box)
