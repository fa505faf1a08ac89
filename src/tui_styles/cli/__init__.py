"""Command line interface for tui-styles."""
