"""Compose rendered blocks into larger layouts."""

from tui_styles.layout.join import join_horizontal, join_vertical
from tui_styles.layout.place import place

__all__ = ["join_horizontal", "join_vertical", "place"]
