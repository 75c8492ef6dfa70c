"""Cells - a clipped view of the screen buffer for one widget."""

from __future__ import annotations

from typing import Optional

from ansi_grid.core.canvas import ScreenBuffer
from ansi_grid.core.cell import Cell
from ansi_grid.core.geometry import Area, Edge
from ansi_grid.text.outline import Border
from ansi_grid.text.style import TextStyle
from ansi_grid.text.theme import Theme


class Cells:
    """
    Drawable view of the cells in one area of the screen.

    Coordinates are relative to the view. The view is clipped to the
    buffer, and nothing written through it can land outside its area:
    moving the cursor outside raises IndexError, and text running past
    the right edge is cut off.
    """

    def __init__(
        self,
        buffer: ScreenBuffer,
        area: Area,
        theme: Optional[Theme] = None,
        style: Optional[TextStyle] = None,
    ) -> None:
        self._buffer = buffer
        self._area = buffer.area.clip(area)
        self._theme = theme or Theme()
        self._style = style or TextStyle()
        self._col = 0
        self._row = 0

    @property
    def area(self) -> Area:
        """Absolute screen area of the view."""
        return self._area

    @property
    def width(self) -> int:
        return self._area.width

    @property
    def height(self) -> int:
        return self._area.height

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def style(self) -> TextStyle:
        return self._style

    def set_style(self, style: TextStyle) -> None:
        """Set the style for following writes."""
        self._style = style

    def move_to(self, col: int, row: int) -> None:
        """Move the cursor to a cell of the view."""
        if not 0 <= col < self.width or not 0 <= row < self.height:
            raise IndexError(
                f"({col}, {row}) outside view ({self.width}x{self.height})"
            )
        self._col = col
        self._row = row

    def print_char(self, ch: str) -> None:
        """Print a character at the cursor, advancing it."""
        if self._row >= self.height or self._col >= self.width:
            return
        self._buffer.set(
            self._area.col + self._col,
            self._area.row + self._row,
            Cell(ch, self._style),
        )
        self._col += 1

    def print_str(self, text: str) -> None:
        """Print text at the cursor, cut off at the right edge."""
        for ch in text:
            if self._col >= self.width:
                break
            self.print_char(ch)

    def fill(self, ch: str = ' ') -> None:
        """Fill the whole view with a character."""
        if self.width == 0:
            return
        for row in range(self.height):
            self.move_to(0, row)
            self.print_str(ch * self.width)

    def draw_border(self, border: Border) -> None:
        """Draw a border around the edges of the view."""
        if self.width == 0 or self.height == 0:
            return
        edges = border.edges
        right = self.width - 1
        bottom = self.height - 1

        for edge, row in ((Edge.TOP, 0), (Edge.BOTTOM, bottom)):
            if edge in edges:
                self.move_to(0, row)
                self.print_str(border.style_for(edge).glyphs.horizontal * self.width)
        for edge, col in ((Edge.LEFT, 0), (Edge.RIGHT, right)):
            if edge in edges:
                glyph = border.style_for(edge).glyphs.vertical
                for row in range(self.height):
                    self.move_to(col, row)
                    self.print_char(glyph)

        corners = (
            (Edge.TOP_LEFT, 0, 0, "top_left"),
            (Edge.TOP_RIGHT, right, 0, "top_right"),
            (Edge.BOTTOM_LEFT, 0, bottom, "bottom_left"),
            (Edge.BOTTOM_RIGHT, right, bottom, "bottom_right"),
        )
        for corner, col, row, name in corners:
            if (edges & corner) == corner:
                self.move_to(col, row)
                self.print_char(getattr(border.style_for(corner).glyphs, name))

    def inset(self, border: Optional[Border]) -> Cells:
        """Get a view of the area inside a border."""
        return Cells(self._buffer, self._area.inset(border), self._theme, self._style)
