"""Typer CLI application."""

import math
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from ascii_render.core.color import HEX_PATTERN, Color, hex_color, rainbow
from ascii_render.core.options import LineStyle
from ascii_render.demo.wireframe import Shape, draw_wireframe
from ascii_render.render.renderer import AsciiRenderer
from ascii_render.symbols.catalog import SymbolSet, dimensions_for, symbols_for
from ascii_render.cli.logging_setup import configure_logging

# Braille has 256 entries; show this many unless --all is given
SYMBOL_PREVIEW_ROWS = 16


def parse_dash(value: str) -> list[int]:
    """Parse a dash pattern such as "1,1,0" into flags."""
    parts = [p.strip() for p in value.split(",") if p.strip()]
    if not parts or any(p not in ("0", "1") for p in parts):
        raise ValueError(f"Dash pattern must be comma-separated 0/1 values, got {value!r}")
    return [int(p) for p in parts]


def parse_gradient(value: str) -> tuple[Color, Color]:
    """Parse a gradient such as "#f00:#00f" into start and end colors."""
    parts = value.split(":")
    if len(parts) != 2 or not all(HEX_PATTERN.fullmatch(p.strip().lstrip("#")) for p in parts):
        raise ValueError(f"Gradient must look like '#RGB:#RGB', got {value!r}")
    return hex_color(parts[0].strip()), hex_color(parts[1].strip())


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ascii-render",
        help="Draw into pixel buffers and render them as Unicode terminal art.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        configure_logging(verbose, console)

    @app.command()
    def line(
        x1: Annotated[float, typer.Argument(help="Start x")],
        y1: Annotated[float, typer.Argument(help="Start y")],
        x2: Annotated[float, typer.Argument(help="End x")],
        y2: Annotated[float, typer.Argument(help="End y")],
        width: Annotated[int, typer.Option("--width", "-w", help="Buffer width in pixels")] = 40,
        height: Annotated[int, typer.Option("--height", help="Buffer height in pixels")] = 20,
        color: Annotated[str, typer.Option("--color", "-c", help="Line color as #RGB or #RRGGBB")] = "#ffffff",
        symbols: Annotated[SymbolSet, typer.Option("--symbols", "-s", help="Symbol set")] = SymbolSet.HALF,
        threshold: Annotated[int, typer.Option("--threshold", "-t", help="Brightness threshold 0-255")] = 128,
        thickness: Annotated[int, typer.Option("--thickness", help="Line thickness in pixels")] = 1,
        dash: Annotated[Optional[str], typer.Option("--dash", help="Dash pattern, e.g. 1,1,0")] = None,
        gradient: Annotated[Optional[str], typer.Option("--gradient", help="Gradient, e.g. #f00:#00f")] = None,
        no_color: Annotated[bool, typer.Option("--no-color", help="Glyphs only, no escape codes")] = False,
    ) -> None:
        """Render a single line."""
        try:
            pattern = parse_dash(dash) if dash else None
            start, end = parse_gradient(gradient) if gradient else (None, None)
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        renderer = AsciiRenderer(
            symbol_set=symbols,
            color_mode="none" if no_color else "truecolor",
            threshold=threshold,
        )
        style = LineStyle(pattern=pattern, thickness=thickness, start_color=start, end_color=end)
        try:
            output = renderer.render_line(width, height, x1, y1, x2, y2, hex_color(color), style)
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        print(output)

    @app.command()
    def shapes(
        symbols: Annotated[SymbolSet, typer.Option("--symbols", "-s", help="Symbol set")] = SymbolSet.QUADRANT,
        no_color: Annotated[bool, typer.Option("--no-color", help="Glyphs only, no escape codes")] = False,
    ) -> None:
        """Render a sample scene of rectangles, circles and lines."""
        renderer = AsciiRenderer(symbol_set=symbols, color_mode="none" if no_color else "truecolor")
        buffer = renderer.create_buffer(64, 32, hex_color("#1a1a1a"))

        renderer.draw_rect(buffer, 1, 1, 62, 30, hex_color("#3a7bd5"))
        renderer.draw_circle(buffer, 16, 16, 10, hex_color("#ff8800"), fill=True)
        renderer.draw_circle(buffer, 44, 16, 10, hex_color("#50ff00"))
        renderer.draw_line(
            buffer, 4, 28, 60, 4, Color.WHITE,
            LineStyle(thickness=2, start_color=rainbow(0.0), end_color=rainbow(0.5)),
        )
        renderer.draw_line(buffer, 4, 4, 60, 28, Color.WHITE, LineStyle.dashed(on=4, off=2))
        print(renderer.render(buffer))

    @app.command("symbols")
    def list_symbols(
        name: Annotated[SymbolSet, typer.Argument(help="Symbol set to list")] = SymbolSet.HALF,
        show_all: Annotated[bool, typer.Option("--all", "-a", help="List every entry")] = False,
    ) -> None:
        """Show the glyphs of a symbol set and the patterns they stand for."""
        table_data = symbols_for(name)
        sub_width, sub_height = dimensions_for(name)
        bits = sub_width * sub_height

        table = Table(title=f"{name.value} ({sub_width}x{sub_height}, {len(table_data)} symbols)")
        table.add_column("Index", justify="right", style="dim")
        table.add_column("Glyph", justify="center")
        table.add_column("Pattern", style="cyan")
        table.add_column("Code point")

        rows = table_data if show_all else table_data[:SYMBOL_PREVIEW_ROWS]
        for index, symbol in enumerate(rows):
            table.add_row(
                str(index),
                symbol.char,
                format(symbol.pattern, f"0{bits}b"),
                f"U+{ord(symbol.char):04X}",
            )

        out = Console()
        out.print(table)
        if len(rows) < len(table_data):
            out.print(f"[dim]... {len(table_data) - len(rows)} more, use --all to list them[/]")

    @app.command()
    def wireframe(
        shape: Annotated[Shape, typer.Option("--shape", help="Shape to draw")] = Shape.CUBE,
        angle: Annotated[float, typer.Option("--angle", help="Rotation in degrees")] = 30.0,
        size: Annotated[int, typer.Option("--size", help="Buffer size in pixels (square)")] = 80,
        symbols: Annotated[SymbolSet, typer.Option("--symbols", "-s", help="Symbol set")] = SymbolSet.BRAILLE,
        no_color: Annotated[bool, typer.Option("--no-color", help="Glyphs only, no escape codes")] = False,
    ) -> None:
        """Render one frame of the wireframe demo."""
        renderer = AsciiRenderer(symbol_set=symbols, color_mode="none" if no_color else "truecolor")
        try:
            buffer = renderer.create_buffer(size, size)
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        draw_wireframe(buffer, shape, math.radians(angle))
        print(renderer.render(buffer))

    return app
