"""Alignment positions shared by both axes."""

from enum import Enum


class Position(Enum):
    """
    Horizontal or vertical placement.

    LEFT/CENTER/RIGHT apply horizontally, TOP/CENTER/BOTTOM vertically.
    CENTER is shared between the two axes.
    """
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    def __str__(self) -> str:
        return self.value.capitalize()

    @property
    def is_horizontal(self) -> bool:
        return self in (Position.LEFT, Position.CENTER, Position.RIGHT)

    @property
    def is_vertical(self) -> bool:
        return self in (Position.TOP, Position.CENTER, Position.BOTTOM)


LEFT = Position.LEFT
CENTER = Position.CENTER
RIGHT = Position.RIGHT
TOP = Position.TOP
BOTTOM = Position.BOTTOM
