"""Typer CLI application."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.markup import escape
    from rich.table import Table
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

from ansi_grid.core.bounds import AreaBound, LengthBound
from ansi_grid.core.canvas import ScreenBuffer
from ansi_grid.core.errors import TemplateError
from ansi_grid.core.geometry import Area
from ansi_grid.layout.grid import GridTemplate
from ansi_grid.layout.solver import LayoutSolver
from ansi_grid.render.cells import Cells
from ansi_grid.widget.base import BaseWidget

_LENGTH = r'(\d+)(?::(\d*))?'
_BOUND = re.compile(rf'([^=\s]+)=(?:{_LENGTH})?(?:x{_LENGTH})?')


def parse_bound(text: str) -> tuple[str, AreaBound]:
    """
    Parse a bound option: LABEL=COLS[xROWS].

    Each length is MIN (rigid), MIN: (unbounded) or MIN:MAX, e.g.
    "a=10", "b=4:x1", "c=2:8x1:3".
    """
    match = _BOUND.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"Invalid bound {text!r} (expected LABEL=MIN[:MAX]xMIN[:MAX])")
    label, col_min, col_max, row_min, row_max = match.groups()

    def length(minimum: Optional[str], maximum: Optional[str]) -> LengthBound:
        if minimum is None:
            return LengthBound()
        if maximum is None:
            return LengthBound(int(minimum), int(minimum))
        return LengthBound(int(minimum), int(maximum) if maximum else None)

    return label, AreaBound(length(col_min, col_max), length(row_min, row_max))


class Placeholder(BaseWidget):
    """Stand-in widget drawn as a block of its label's first character."""

    def __init__(self, label: str, bound: AreaBound) -> None:
        self.label = label
        self._bound = bound

    def bounds(self) -> AreaBound:
        return self._bound

    def render(self, cells: Cells) -> None:
        cells.fill(self.label[0])


def _configure_logging(verbose: bool, log_file: Optional[Path]) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    handler: logging.Handler
    if log_file is not None:
        # The terminal belongs to the UI; keep log output out of it
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(level=level, handlers=[handler], force=True)


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: uv pip install ansi-grid[cli]")

    app = typer.Typer(
        name="ansi-grid",
        help="Lay out and run grid-based terminal user interfaces.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Write logs to a file")] = None,
    ) -> None:
        """Grid layout toolkit for terminal UIs."""
        _configure_logging(verbose, log_file)

    @app.command()
    def layout(
        template: Annotated[Path, typer.Argument(help="Grid template file ('-' for stdin)")],
        width: Annotated[int, typer.Option("--width", "-W", help="Available columns")] = 80,
        height: Annotated[int, typer.Option("--height", "-H", help="Available rows")] = 24,
        bound: Annotated[Optional[list[str]], typer.Option("--bound", "-b", help="LABEL=MIN[:MAX]xMIN[:MAX]")] = None,
        preview: Annotated[bool, typer.Option("--preview/--no-preview", help="Draw the solved layout")] = True,
    ) -> None:
        """Solve a grid template and show where each label lands."""
        source = typer.get_text_stream("stdin").read() if str(template) == "-" else template.read_text()
        try:
            bounds = dict(parse_bound(b) for b in bound or [])
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--bound")

        try:
            grid_template = GridTemplate.parse(source)
        except TemplateError as e:
            console.print(f"[red]Invalid template:[/] {escape(str(e))}")
            raise typer.Exit(1)

        unknown = sorted(set(bounds) - set(grid_template.labels))
        if unknown:
            console.print(f"[yellow]Bounds for unknown labels ignored:[/] {', '.join(unknown)}")

        widgets = {
            label: Placeholder(label, bounds.get(label, AreaBound()))
            for label in grid_template.labels
        }
        try:
            bbox = Area(0, 0, width, height)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--width/--height")
        placements = LayoutSolver().solve(grid_template.bind(widgets), bbox)

        table = Table(title=f"{grid_template.columns}x{grid_template.rows} template in {width}x{height}")
        table.add_column("Label", style="bold cyan")
        for name in ("Col", "Row", "Width", "Height"):
            table.add_column(name, justify="right")
        for placement in placements:
            area = placement.area
            label = placement.widget.label  # type: ignore[attr-defined]
            table.add_row(label, str(area.col), str(area.row), str(area.width), str(area.height))
        console.print(table)

        if preview:
            buffer = ScreenBuffer(bbox.dim)
            for placement in placements:
                placement.widget.render(Cells(buffer, placement.area))
            for line in buffer.text():
                console.print(line, markup=False, highlight=False)

    @app.command()
    def demo(
        blocking: Annotated[bool, typer.Option("--blocking", help="Wait for input by blocking instead of asyncio")] = False,
        title: Annotated[Optional[str], typer.Option("--title", help="Terminal title")] = None,
    ) -> None:
        """Run an interactive grid demo (Esc or q to quit)."""
        from ansi_grid.cli.demo import run_demo
        from ansi_grid.config import ScreenConfig

        config = ScreenConfig.from_env()
        config.title = title or config.title or "ansi-grid demo"
        run_demo(config, blocking=blocking)

    return app
