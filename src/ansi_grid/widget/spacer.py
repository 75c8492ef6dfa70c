"""Spacer widget - fills space, optionally with a character."""

from __future__ import annotations

from ansi_grid.core.bounds import AreaBound
from ansi_grid.render.cells import Cells
from ansi_grid.widget.base import BaseWidget


class Spacer(BaseWidget):
    """Flexible filler."""

    def __init__(self, bounds: AreaBound | None = None) -> None:
        self._fill = ' '
        self._bounds = bounds or AreaBound()

    @property
    def fill(self) -> str:
        return self._fill

    def with_fill(self, fill: str) -> "Spacer":
        """Set the fill character."""
        if len(fill) != 1 or not fill.isprintable():
            raise ValueError(f"Fill must be one printable character, got {fill!r}")
        self._fill = fill
        return self

    def bounds(self) -> AreaBound:
        return self._bounds

    def render(self, cells: Cells) -> None:
        cells.fill(self._fill)
