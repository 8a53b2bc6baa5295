"""Typer CLI application."""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from termipaint.config import PaintConfig
from termipaint.core.color import Color
from termipaint.core.grid import Grid
from termipaint.core.point import Point
from termipaint.edit.events import parse_script
from termipaint.edit.session import EditSession
from termipaint.edit.tools import Tool
from termipaint.errors import TermipaintError
from termipaint.io import reader, writer
from termipaint.render.terminal import TerminalRenderer
from termipaint.render.text import TextRenderer


def configure_logging(verbose: bool, console: Console) -> None:
    """Route termipaint's log records through rich when verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termipaint",
        help="Draw on character grids: shapes, fills and undoable edit scripts.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    def fail(message: str) -> typer.Exit:
        console.print(f"[red]{message}[/]")
        return typer.Exit(1)

    def load_grid(path: Path) -> Grid:
        try:
            return reader.load(path)
        except TermipaintError as exc:
            raise fail(str(exc)) from exc

    def save_grid(grid: Grid, path: Path) -> None:
        try:
            writer.save(grid, path)
        except TermipaintError as exc:
            raise fail(str(exc)) from exc

    @app.callback()
    def main_options(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
    ) -> None:
        """Draw on character grids from the command line."""
        configure_logging(verbose, console)

    @app.command()
    def new(
        path: Annotated[Path, typer.Argument(help="File to create (.json or plain text)")],
        width: Annotated[Optional[int], typer.Option("--width", "-w", help="Columns")] = None,
        height: Annotated[Optional[int], typer.Option("--height", "-h", help="Rows")] = None,
    ) -> None:
        """Create a blank canvas file."""
        try:
            config = PaintConfig.from_env()
        except TermipaintError as exc:
            raise fail(str(exc)) from exc
        grid = Grid(
            config.width if width is None else width,
            config.height if height is None else height,
        )
        save_grid(grid, path)
        console.print(f"[green]Created {path} ({grid.width}x{grid.height})[/]")

    @app.command()
    def view(
        path: Annotated[Path, typer.Argument(help="Canvas file to view")],
        plain: Annotated[bool, typer.Option("--plain", "-p", help="Plain text, no colors")] = False,
    ) -> None:
        """Print a canvas to the terminal."""
        grid = load_grid(path)
        if plain:
            print(TextRenderer().render(grid))
        else:
            print(TerminalRenderer().render(grid))

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="Canvas file to inspect")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show size and color usage of a canvas."""
        grid = load_grid(path)
        painted = [cell for _, _, cell in grid.cells() if not cell.is_blank()]
        colors = Counter(cell.fg.display_name for cell in painted)

        if json_output:
            data = {
                "width": grid.width,
                "height": grid.height,
                "painted": len(painted),
                "colors": dict(sorted(colors.items())),
            }
            print(json.dumps(data, indent=2))
            return

        console.print(f"[bold cyan]{path.name}[/]")
        console.print(f"  [bold]Size:[/]    {grid.width}x{grid.height}")
        console.print(f"  [bold]Painted:[/] {len(painted)} cells")
        for name, count in sorted(colors.items()):
            console.print(f"    {name}: {count}")

    @app.command()
    def draw(
        path: Annotated[Path, typer.Argument(help="Canvas file to draw on")],
        tool: Annotated[str, typer.Argument(help="pencil, eraser, line, rect, ellipse or fill")],
        x0: Annotated[int, typer.Argument(help="Start column")],
        y0: Annotated[int, typer.Argument(help="Start row")],
        x1: Annotated[Optional[int], typer.Argument(help="End column")] = None,
        y1: Annotated[Optional[int], typer.Argument(help="End row")] = None,
        char: Annotated[str, typer.Option("--char", "-c", help="Brush character")] = '#',
        color: Annotated[str, typer.Option("--color", help="Color name")] = "White",
        size: Annotated[int, typer.Option("--size", "-s", help="Brush size 1-3")] = 1,
        filled: Annotated[bool, typer.Option("--filled", "-f", help="Fill rectangles")] = False,
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output path")] = None,
    ) -> None:
        """Apply one tool gesture to a canvas file."""
        try:
            selected_tool = Tool.from_name(tool)
            selected_color = Color.from_name(color)
        except ValueError as exc:
            raise fail(str(exc)) from exc
        if len(char) != 1:
            raise fail(f"Brush must be a single character, got {char!r}")
        if (x1 is None) != (y1 is None):
            raise fail("Give both end coordinates or neither")

        session = EditSession(load_grid(path))
        session.select_tool(selected_tool)
        session.select_color(selected_color)
        session.select_brush_char(char)
        session.set_brush_size(size)
        session.toggle_filled(filled)

        start = Point(x0, y0)
        end = Point(x1, y1) if x1 is not None and y1 is not None else None
        session.begin_stroke(start)
        if end is not None:
            session.move_to(end)
        session.end_stroke(end)

        target = output or path
        save_grid(session.grid, target)
        changed = session.history.undo_depth
        console.print(f"[green]{selected_tool.display_name} drawn → {target}[/]"
                      if changed else f"[dim]Nothing changed in {path.name}[/]")

    @app.command()
    def play(
        path: Annotated[Path, typer.Argument(help="Canvas file to edit")],
        script: Annotated[Path, typer.Argument(help="Event script to replay")],
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output path")] = None,
        show: Annotated[bool, typer.Option("--show", help="Print the result")] = False,
    ) -> None:
        """Replay an event script (strokes, undo, redo, resize) on a canvas."""
        try:
            events = parse_script(script.read_text(encoding="utf-8"))
        except OSError as exc:
            raise fail(f"failed to read script {script}: {exc}") from exc
        except TermipaintError as exc:
            raise fail(f"{script}: {exc}") from exc

        try:
            session = EditSession(load_grid(path), PaintConfig.from_env())
        except TermipaintError as exc:
            raise fail(str(exc)) from exc
        session.play(events)

        target = output or path
        save_grid(session.grid, target)
        if show:
            print(TerminalRenderer().render(session.grid))
        console.print(
            f"[green]Played {len(events)} events → {target}[/] "
            f"[dim](undo {session.history.undo_depth}, redo {session.history.redo_depth})[/]"
        )

    @app.command()
    def convert(
        source: Annotated[Path, typer.Argument(help="Source canvas file")],
        dest: Annotated[Path, typer.Argument(help="Destination (.json or plain text)")],
    ) -> None:
        """Convert a canvas between JSON and plain text."""
        grid = load_grid(source)
        save_grid(grid, dest)
        console.print(f"[green]Converted {source} → {dest}[/]")

    return app
