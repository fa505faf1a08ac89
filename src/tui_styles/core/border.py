"""Border glyph sets for boxes drawn around rendered text."""

from dataclasses import dataclass, fields
from typing import Callable

from tui_styles.core.constants import BLOCK


@dataclass(frozen=True)
class Border:
    """
    The eight glyphs of a box: four edges and four corners.

    Every glyph must be non-empty; an invisible border uses spaces.
    """
    top: str
    bottom: str
    left: str
    right: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str

    def __post_init__(self) -> None:
        for f in fields(self):
            if not getattr(self, f.name):
                raise ValueError(f"Border glyph '{f.name}' must not be empty")


def normal_border() -> Border:
    """Standard box-drawing border: ┌─┐ │ └─┘."""
    return Border(
        top="─", bottom="─", left="│", right="│",
        top_left="┌", top_right="┐", bottom_left="└", bottom_right="┘",
    )


def rounded_border() -> Border:
    """Box-drawing border with rounded corners: ╭─╮ │ ╰─╯."""
    return Border(
        top="─", bottom="─", left="│", right="│",
        top_left="╭", top_right="╮", bottom_left="╰", bottom_right="╯",
    )


def thick_border() -> Border:
    """Heavy box-drawing border: ┏━┓ ┃ ┗━┛."""
    return Border(
        top="━", bottom="━", left="┃", right="┃",
        top_left="┏", top_right="┓", bottom_left="┗", bottom_right="┛",
    )


def double_border() -> Border:
    """Double-line box-drawing border: ╔═╗ ║ ╚═╝."""
    return Border(
        top="═", bottom="═", left="║", right="║",
        top_left="╔", top_right="╗", bottom_left="╚", bottom_right="╝",
    )


def block_border() -> Border:
    """Solid block border, every glyph a full block."""
    full = BLOCK["full"]
    return Border(
        top=full, bottom=full, left=full, right=full,
        top_left=full, top_right=full, bottom_left=full, bottom_right=full,
    )


def outer_half_block_border() -> Border:
    """Half-block border drawn on the outer half of each cell."""
    return Border(
        top=BLOCK["upper"],
        bottom=BLOCK["lower"],
        left=BLOCK["left"],
        right=BLOCK["right"],
        top_left=BLOCK["three_ul"],
        top_right=BLOCK["three_ur"],
        bottom_left=BLOCK["three_ll"],
        bottom_right=BLOCK["three_lr"],
    )


def inner_half_block_border() -> Border:
    """Half-block border drawn on the inner half of each cell."""
    return Border(
        top=BLOCK["lower"],
        bottom=BLOCK["upper"],
        left=BLOCK["right"],
        right=BLOCK["left"],
        top_left=BLOCK["quad_lr"],
        top_right=BLOCK["quad_ll"],
        bottom_left=BLOCK["quad_ur"],
        bottom_right=BLOCK["quad_ul"],
    )


def hidden_border() -> Border:
    """Invisible border that still takes up space."""
    return Border(
        top=" ", bottom=" ", left=" ", right=" ",
        top_left=" ", top_right=" ", bottom_left=" ", bottom_right=" ",
    )


BORDERS: dict[str, Callable[[], Border]] = {
    "normal": normal_border,
    "rounded": rounded_border,
    "thick": thick_border,
    "double": double_border,
    "block": block_border,
    "outer-half-block": outer_half_block_border,
    "inner-half-block": inner_half_block_border,
    "hidden": hidden_border,
}
