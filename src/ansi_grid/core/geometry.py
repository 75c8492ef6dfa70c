"""Geometry - cell dimensions, positions, edges and rectangular areas."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Flag
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ansi_grid.text.outline import Border

# Terminal coordinates are addressed with 16-bit values
CELL_MAX = 0xFFFF


def _check_cells(name: str, value: int) -> None:
    if not 0 <= value <= CELL_MAX:
        raise ValueError(f"{name}={value} out of range (0-{CELL_MAX})")


class Edge(Flag):
    """Area edges."""
    NONE = 0
    TOP = 0x01
    BOTTOM = 0x02
    LEFT = 0x04
    RIGHT = 0x08
    TOP_LEFT = TOP | LEFT
    TOP_RIGHT = TOP | RIGHT
    BOTTOM_LEFT = BOTTOM | LEFT
    BOTTOM_RIGHT = BOTTOM | RIGHT
    TOP_BOTTOM = TOP | BOTTOM
    LEFT_RIGHT = LEFT | RIGHT
    ALL = TOP | BOTTOM | LEFT | RIGHT

    def count(self, *edges: "Edge") -> int:
        """Count how many of the given edges are set."""
        return sum(1 for edge in edges if edge in self)

    @property
    def columns(self) -> int:
        """Cells consumed horizontally by one cell per edge."""
        return self.count(Edge.LEFT, Edge.RIGHT)

    @property
    def rows(self) -> int:
        """Cells consumed vertically by one cell per edge."""
        return self.count(Edge.TOP, Edge.BOTTOM)


@dataclass(frozen=True)
class Dim:
    """Dimensions in text cells."""
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        _check_cells("width", self.width)
        _check_cells("height", self.height)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0


@dataclass(frozen=True)
class Pos:
    """Cell position (column, row)."""
    col: int = 0
    row: int = 0


@dataclass(frozen=True)
class Area:
    """
    Rectangular area of text cells.

    Anchored at its top-left cell, in absolute screen coordinates.
    Zero-sized areas are valid and mean "nothing to draw".
    """
    col: int = 0
    row: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        _check_cells("col", self.col)
        _check_cells("row", self.row)
        _check_cells("width", self.width)
        _check_cells("height", self.height)
        _check_cells("right", self.col + self.width)
        _check_cells("bottom", self.row + self.height)

    @classmethod
    def from_dim(cls, dim: Dim) -> Area:
        return cls(0, 0, dim.width, dim.height)

    @property
    def dim(self) -> Dim:
        return Dim(self.width, self.height)

    @property
    def right(self) -> int:
        """Column just past the right edge."""
        return self.col + self.width

    @property
    def bottom(self) -> int:
        """Row just past the bottom edge."""
        return self.row + self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def split(self, edge: Edge, cells: int = 0) -> tuple[Area, Area]:
        """
        Split into two areas starting from a given edge.

        Returns (near, far), where near is the part on the requested edge.
        The near side is clamped to the available extent; LEFT_RIGHT and
        TOP_BOTTOM split in half and ignore `cells`.

        Raises:
            ValueError: for any other edge combination
        """
        if edge == Edge.LEFT:
            return self._split_left(cells)
        if edge == Edge.RIGHT:
            return self._split_right(cells)
        if edge == Edge.LEFT_RIGHT:
            return self._split_left(self.width // 2)
        if edge == Edge.TOP:
            return self._split_top(cells)
        if edge == Edge.BOTTOM:
            return self._split_bottom(cells)
        if edge == Edge.TOP_BOTTOM:
            return self._split_top(self.height // 2)
        raise ValueError(f"Invalid split edges: {edge}")

    def _split_left(self, width: int) -> tuple[Area, Area]:
        width = min(self.width, max(0, width))
        left = replace(self, width=width)
        right = replace(self, col=self.col + width, width=self.width - width)
        return left, right

    def _split_right(self, width: int) -> tuple[Area, Area]:
        width = min(self.width, max(0, width))
        right = replace(self, col=self.right - width, width=width)
        left = replace(self, width=self.width - width)
        return right, left

    def _split_top(self, height: int) -> tuple[Area, Area]:
        height = min(self.height, max(0, height))
        top = replace(self, height=height)
        bottom = replace(self, row=self.row + height, height=self.height - height)
        return top, bottom

    def _split_bottom(self, height: int) -> tuple[Area, Area]:
        height = min(self.height, max(0, height))
        bottom = replace(self, row=self.bottom - height, height=height)
        top = replace(self, height=self.height - height)
        return bottom, top

    def trim(self, edge: Edge, cells: int) -> Area:
        """Trim cells from the given edges, saturating at zero size."""
        col, row, width, height = self.col, self.row, self.width, self.height
        cells = max(0, cells)
        if Edge.LEFT in edge:
            n = min(width, cells)
            col += n
            width -= n
        if Edge.RIGHT in edge:
            width -= min(width, cells)
        if Edge.TOP in edge:
            n = min(height, cells)
            row += n
            height -= n
        if Edge.BOTTOM in edge:
            height -= min(height, cells)
        return Area(col, row, width, height)

    def inset(self, border: Optional[Border]) -> Area:
        """Get the area inside a border (one cell per border edge)."""
        if border is None:
            return self
        return self.trim(border.edges, 1)

    def clip(self, other: Area) -> Area:
        """Intersect with another area."""
        col = max(self.col, other.col)
        row = max(self.row, other.row)
        right = max(col, min(self.right, other.right))
        bottom = max(row, min(self.bottom, other.bottom))
        return Area(col, row, right - col, bottom - row)

    def contains(self, pos: Pos) -> bool:
        """Check whether a position lies inside the area."""
        return (
            self.col <= pos.col < self.right
            and self.row <= pos.row < self.bottom
        )

    def within(self, pos: Pos) -> Optional[Pos]:
        """Get a position relative to the area, if inside it."""
        if self.contains(pos):
            return Pos(pos.col - self.col, pos.row - self.row)
        return None
