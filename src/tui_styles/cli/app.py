"""Typer CLI application for trying styles from the shell."""

import json
import logging
from typing import Annotated, NoReturn, Optional

try:
    import typer
    from rich.console import Console
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

logger = logging.getLogger(__name__)


def _unescape(text: str) -> str:
    """Let the shell pass multi-line text as a literal backslash-n."""
    return text.replace("\\n", "\n")


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: uv pip install tui-styles[cli]")

    import tui_styles as ts
    from tui_styles.core.border import BORDERS

    app = typer.Typer(
        name="tui-styles",
        help="Style terminal text and compose styled blocks.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    def fail(message: str) -> NoReturn:
        console.print(f"[red]{message}[/]")
        raise typer.Exit(1)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        """Style terminal text and compose styled blocks."""
        if verbose:
            logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    @app.command()
    def render(
        text: Annotated[str, typer.Argument(help="Text to render (\\n starts a new line)")],
        bold: Annotated[bool, typer.Option("--bold", "-b")] = False,
        italic: Annotated[bool, typer.Option("--italic", "-i")] = False,
        underline: Annotated[bool, typer.Option("--underline", "-u")] = False,
        faint: Annotated[bool, typer.Option("--faint")] = False,
        strikethrough: Annotated[bool, typer.Option("--strikethrough")] = False,
        fg: Annotated[Optional[str], typer.Option("--fg", help="Foreground color")] = None,
        bg: Annotated[Optional[str], typer.Option("--bg", help="Background color")] = None,
        border: Annotated[Optional[str], typer.Option("--border", help=f"One of: {', '.join(BORDERS)}")] = None,
        border_fg: Annotated[Optional[str], typer.Option("--border-fg", help="Border color")] = None,
        padding: Annotated[int, typer.Option("--padding", "-p", help="Padding on all sides")] = 0,
        width: Annotated[Optional[int], typer.Option("--width", "-w")] = None,
        height: Annotated[Optional[int], typer.Option("--height")] = None,
        align: Annotated[Optional[ts.Position], typer.Option("--align", help="left, center or right")] = None,
        valign: Annotated[Optional[ts.Position], typer.Option("--valign", help="top, center or bottom")] = None,
        max_width: Annotated[Optional[int], typer.Option("--max-width")] = None,
    ) -> None:
        """Render text with the given style."""
        style = ts.new_style()

        if bold:
            style = style.bold()
        if italic:
            style = style.italic()
        if underline:
            style = style.underline()
        if faint:
            style = style.faint()
        if strikethrough:
            style = style.strikethrough()

        try:
            if fg:
                style = style.foreground(fg)
            if bg:
                style = style.background(bg)
            if border_fg:
                style = style.border_foreground(border_fg)
        except ts.ColorError as e:
            logger.debug("rejected color option: %s", e)
            fail(str(e))

        if border:
            if border not in BORDERS:
                fail(f"Unknown border: {border} (choose from {', '.join(BORDERS)})")
            style = style.border(BORDERS[border]())
        if padding:
            style = style.padding(padding)
        if width is not None:
            style = style.width(width)
        if height is not None:
            style = style.height(height)
        if align is not None:
            style = style.align(align)
        if valign is not None:
            style = style.align_vertical(valign)
        if max_width is not None:
            style = style.max_width(max_width)

        print(style.render(_unescape(text)))

    @app.command()
    def borders(
        color: Annotated[Optional[str], typer.Option("--color", "-c", help="Border color")] = None,
    ) -> None:
        """Show every predefined border."""
        base = ts.new_style().padding(0, 1)
        if color:
            try:
                base = base.border_foreground(color)
            except ts.ColorError as e:
                fail(str(e))

        boxes = [base.border(make()).render(name) for name, make in BORDERS.items()]
        print(ts.join_horizontal(ts.TOP, *boxes))

    @app.command()
    def color(
        spec: Annotated[str, typer.Argument(help="Hex (#RRGGBB), ANSI name, or 0-255")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Validate a color and show its escape sequences."""
        try:
            parsed = ts.Color(spec)
        except ts.ColorError as e:
            logger.debug("rejected color %r: %s", spec, e)
            fail(str(e))

        if json_output:
            data = {
                "input": spec,
                "value": parsed.value,
                "mode": parsed.mode.value,
                "foreground": parsed.to_sgr_fg(),
                "background": parsed.to_sgr_bg(),
            }
            print(json.dumps(data, indent=2))
        else:
            console.print(f"[bold]Value:[/]      {parsed.value}")
            console.print(f"[bold]Mode:[/]       {parsed.mode.value}")
            console.print(f"[bold]Foreground:[/] {parsed.to_sgr_fg()}")
            console.print(f"[bold]Background:[/] {parsed.to_sgr_bg()}")
            print(ts.new_style().background(parsed).render("      "))

    @app.command()
    def place(
        width: Annotated[int, typer.Argument(help="Box width in cells")],
        height: Annotated[int, typer.Argument(help="Box height in lines")],
        text: Annotated[str, typer.Argument(help="Content (\\n starts a new line)")],
        h: Annotated[ts.Position, typer.Option("--h", help="left, center or right")] = ts.CENTER,
        v: Annotated[ts.Position, typer.Option("--v", help="top, center or bottom")] = ts.CENTER,
    ) -> None:
        """Place text inside a fixed-size box."""
        print(ts.place(width, height, h, v, _unescape(text)))

    return app
