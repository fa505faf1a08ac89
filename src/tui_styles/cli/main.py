"""Main CLI entry point with command routing."""

import sys


def main() -> None:
    """Main CLI entry point."""
    from tui_styles.cli.app import HAS_TYPER, create_app

    if not HAS_TYPER:
        _missing_extras()
    app = create_app()
    app()


def _missing_extras() -> None:
    """Explain how to get the CLI when typer is not installed."""
    print("tui-styles - terminal text styling")
    print()
    print("Install CLI extras for the command line tool:")
    print("  uv pip install tui-styles[cli]")
    print()
    print("Library usage:")
    print("  python -c \"import tui_styles as ts; print(ts.new_style().bold().render('hi'))\"")
    sys.exit(1)


if __name__ == "__main__":
    main()
