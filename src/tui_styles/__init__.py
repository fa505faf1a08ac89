"""
tui-styles: declarative styling for terminal text

Describe how text should look, render it to ANSI escape sequences, and
compose the results into layouts.

Quick Start:
    >>> import tui_styles as ts
    >>> style = (ts.new_style()
    ...     .bold()
    ...     .foreground("#FAFAFA")
    ...     .background("#7D56F4")
    ...     .padding(1, 4)
    ...     .border(ts.rounded_border()))
    >>> print(style.render("Hello, World!"))

Features:
    - Text attributes: bold, faint, italic, underline, blink, reverse, strikethrough
    - Colors: hex (#RRGGBB / #RGB), ANSI names, 256-color codes
    - Adaptive colors picked by terminal background
    - Eight predefined borders with per-edge control and border colors
    - Padding and margin with CSS-style shorthand
    - Width/height with horizontal and vertical alignment
    - Unicode-aware width measurement (CJK, emoji)
    - Layout helpers: join_horizontal, join_vertical, place
    - Immutable styles, safe to share between threads
"""

__version__ = "0.1.0"

# Core types
from tui_styles.core.border import (
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
from tui_styles.core.position import BOTTOM, CENTER, LEFT, RIGHT, TOP, Position
from tui_styles.core.style import Style

# Rendering
from tui_styles.render.terminal import StyleRenderer

# Layout
from tui_styles.layout.join import join_horizontal, join_vertical
from tui_styles.layout.place import place

# Measurement
from tui_styles.text.ansi_text import strip_ansi, truncate, width


def new_style() -> Style:
    """Start a new, empty style."""
    return Style()


__all__ = [
    # Version
    "__version__",
    # Core types
    "Style",
    "new_style",
    "Color",
    "ColorMode",
    "ColorError",
    "AdaptiveColor",
    "Position",
    "LEFT",
    "CENTER",
    "RIGHT",
    "TOP",
    "BOTTOM",
    # Borders
    "Border",
    "normal_border",
    "rounded_border",
    "thick_border",
    "double_border",
    "block_border",
    "outer_half_block_border",
    "inner_half_block_border",
    "hidden_border",
    # Rendering
    "StyleRenderer",
    # Layout
    "join_horizontal",
    "join_vertical",
    "place",
    # Measurement
    "width",
    "strip_ansi",
    "truncate",
]
