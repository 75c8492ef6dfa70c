"""Text label widget."""

from __future__ import annotations

import textwrap
from typing import Optional

from ansi_grid.core.bounds import AreaBound
from ansi_grid.render.cells import Cells
from ansi_grid.text.outline import Border
from ansi_grid.widget.base import BaseWidget

# Preferred line length when picking a label's shape
LINE_TARGET = 24


class Label(BaseWidget):
    """Word-wrapped text."""

    def __init__(self, text: str, border: Optional[Border] = None) -> None:
        self._text = text
        self._border = border

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        """Change the text (bounds follow on the next frame)."""
        self._text = text

    def bounds(self) -> AreaBound:
        width = len(self._text)
        rows = width // LINE_TARGET + 1
        cols = width // rows + 1
        return AreaBound().with_columns(cols, cols + 2).with_rows(rows, rows)

    def border(self) -> Optional[Border]:
        return self._border

    def render(self, cells: Cells) -> None:
        if cells.width == 0:
            return
        lines = textwrap.wrap(self._text, cells.width)
        for row, line in enumerate(lines[:cells.height]):
            cells.move_to(0, row)
            cells.print_str(line)
