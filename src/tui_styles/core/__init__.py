"""Core value types: colors, borders, positions and styles."""

from tui_styles.core.border import Border
from tui_styles.core.color import AdaptiveColor, Color, ColorError, ColorMode
from tui_styles.core.position import Position
from tui_styles.core.style import Style

__all__ = [
    "AdaptiveColor",
    "Border",
    "Color",
    "ColorError",
    "ColorMode",
    "Position",
    "Style",
]
