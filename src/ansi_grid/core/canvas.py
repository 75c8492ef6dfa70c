"""Screen buffer - the shared 2D grid of cells widgets render into."""

from __future__ import annotations

from typing import Iterator, Optional

from ansi_grid.core.cell import Cell
from ansi_grid.core.geometry import Area, Dim
from ansi_grid.text.style import TextStyle


class ScreenBuffer:
    """
    A fixed-size grid of Cells covering the whole screen.

    Widgets never touch the buffer directly; they write through a clipped
    Cells view. The screen flushes the buffer to an output sink once per
    frame.
    """

    def __init__(self, dim: Dim, style: Optional[TextStyle] = None) -> None:
        self._dim = dim
        self._buffer: list[list[Cell]] = []
        self.clear(style)

    @property
    def dim(self) -> Dim:
        return self._dim

    @property
    def width(self) -> int:
        return self._dim.width

    @property
    def height(self) -> int:
        return self._dim.height

    @property
    def area(self) -> Area:
        return Area.from_dim(self._dim)

    def clear(self, style: Optional[TextStyle] = None) -> None:
        """Fill the buffer with blank cells."""
        style = style or TextStyle()
        self._buffer = [
            [Cell(' ', style) for _ in range(self.width)]
            for _ in range(self.height)
        ]

    def resize(self, dim: Dim, style: Optional[TextStyle] = None) -> None:
        """Resize the buffer, discarding its contents."""
        self._dim = dim
        self.clear(style)

    def _check(self, col: int, row: int) -> None:
        if not 0 <= col < self.width:
            raise IndexError(f"col={col} out of bounds (width={self.width})")
        if not 0 <= row < self.height:
            raise IndexError(f"row={row} out of bounds (height={self.height})")

    def get(self, col: int, row: int) -> Cell:
        """Get the cell at a position."""
        self._check(col, row)
        return self._buffer[row][col]

    def set(self, col: int, row: int, cell: Cell) -> None:
        """Set the cell at a position."""
        self._check(col, row)
        self._buffer[row][col] = cell

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: buffer[col, row]."""
        col, row = pos
        return self.get(col, row)

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def row_text(self, row: int) -> str:
        """Get the characters of one row (without styles)."""
        return ''.join(cell.char for cell in self._buffer[row])

    def text(self) -> list[str]:
        """Get the characters of every row."""
        return [self.row_text(row) for row in range(self.height)]
