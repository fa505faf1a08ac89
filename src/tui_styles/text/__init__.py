"""ANSI-aware text measurement."""

from tui_styles.text.ansi_text import (
    char_width,
    line_count,
    max_width,
    pad_to_width,
    strip_ansi,
    truncate,
    width,
    width_per_line,
)

__all__ = [
    "char_width",
    "line_count",
    "max_width",
    "pad_to_width",
    "strip_ansi",
    "truncate",
    "width",
    "width_per_line",
]
