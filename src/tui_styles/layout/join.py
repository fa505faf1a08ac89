"""Join rendered blocks side by side or on top of each other."""

from __future__ import annotations

from tui_styles.core.position import Position
from tui_styles.text.ansi_text import width


def _split_gap(gap: int, pos: Position, leading: Position, trailing: Position) -> tuple[int, int]:
    """
    Divide ``gap`` blank cells/lines into (before, after).

    ``leading`` places the content first (all blanks after), ``trailing``
    places it last. CENTER splits the gap with the odd one after. Positions
    that don't belong to the axis behave like ``leading``.
    """
    if pos == trailing:
        return gap, 0
    if pos == Position.CENTER:
        before = gap // 2
        return before, gap - before
    return 0, gap


def join_horizontal(pos: Position, *blocks: str) -> str:
    """
    Place blocks next to each other, left to right.

    ``pos`` (TOP, CENTER or BOTTOM) decides where shorter blocks sit against
    the tallest one. Each block keeps its own width; its lines are padded to
    that width so the columns line up.

    Example:
        >>> join_horizontal(Position.TOP, "a\\nbb", "c")
        'a c\\nbb '
    """
    if not blocks:
        return ""
    if len(blocks) == 1:
        return blocks[0]

    columns = [block.split("\n") for block in blocks]
    widths = [max(width(line) for line in lines) for lines in columns]
    height = max(len(lines) for lines in columns)

    for i, lines in enumerate(columns):
        before, after = _split_gap(height - len(lines), pos, Position.TOP, Position.BOTTOM)
        empty = " " * widths[i]
        lines = [empty] * before + lines + [empty] * after
        columns[i] = [line + " " * (widths[i] - width(line)) for line in lines]

    return "\n".join(
        "".join(column[row] for column in columns)
        for row in range(height)
    )


def join_vertical(pos: Position, *blocks: str) -> str:
    """
    Stack blocks on top of each other.

    ``pos`` (LEFT, CENTER or RIGHT) aligns narrower lines against the widest
    line of all blocks.
    """
    if not blocks:
        return ""
    if len(blocks) == 1:
        return blocks[0]

    all_lines = [line for block in blocks for line in block.split("\n")]
    target = max(width(line) for line in all_lines)

    result: list[str] = []
    for line in all_lines:
        before, after = _split_gap(target - width(line), pos, Position.LEFT, Position.RIGHT)
        result.append(" " * before + line + " " * after)

    return "\n".join(result)
