"""Renderers for turning styled text into terminal output."""

from tui_styles.render.terminal import StyleRenderer

__all__ = ["StyleRenderer"]
