"""
Grid templates - ASCII-art descriptions of widget placement.

A template is a matrix of labels, one row per line, labels separated by
whitespace. `.` marks an empty cell. A label repeated over a rectangle of
cells spans those rows and columns:

    a a .
    b c c
    b . .

Rows may optionally be wrapped in brackets (`[a a .]`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Sequence, Union

from ansi_grid.core.errors import (
    EmptyTemplateError,
    RaggedRowError,
    SpanError,
    UnmappedLabelError,
)

if TYPE_CHECKING:
    from ansi_grid.widget.base import Widget

FILLER = "."

TemplateSource = Union[str, Sequence[Union[str, Sequence[str]]]]


@dataclass(frozen=True)
class GridItem:
    """A label and the rectangle of template cells it covers."""
    label: str
    col: int
    row: int
    width: int
    height: int

    @property
    def columns(self) -> range:
        return range(self.col, self.col + self.width)

    @property
    def rows(self) -> range:
        return range(self.row, self.row + self.height)


def _split_row(line: Union[str, Sequence[str]]) -> tuple[str, ...]:
    if not isinstance(line, str):
        return tuple(str(label) for label in line)
    line = line.strip()
    if line.startswith("[") and line.endswith("]"):
        line = line[1:-1]
    return tuple(line.split())


class GridTemplate:
    """
    A validated grid template.

    Immutable once built; use GridTemplate.parse() to create one.
    """

    def __init__(self, cells: tuple[tuple[str, ...], ...], items: tuple[GridItem, ...]) -> None:
        self._cells = cells
        self._items = items

    @classmethod
    def parse(cls, source: TemplateSource) -> GridTemplate:
        """
        Parse and validate a template.

        Args:
            source: Template text (one row per line), or a sequence of rows
                where each row is a string or a sequence of labels

        Raises:
            EmptyTemplateError: no rows or no columns
            RaggedRowError: rows have different numbers of cells
            SpanError: a label's cells do not form a rectangle
        """
        lines = source.splitlines() if isinstance(source, str) else list(source)
        cells = tuple(row for row in map(_split_row, lines) if row)
        if not cells or not cells[0]:
            raise EmptyTemplateError()

        columns = len(cells[0])
        for r, row in enumerate(cells):
            if len(row) != columns:
                raise RaggedRowError(r, columns, len(row))

        # Bounding rectangle of each label, in first occurrence order
        extents: dict[str, list[int]] = {}
        for r, row in enumerate(cells):
            for c, label in enumerate(row):
                if label == FILLER:
                    continue
                ext = extents.get(label)
                if ext is None:
                    extents[label] = [c, r, c, r]
                else:
                    ext[0] = min(ext[0], c)
                    ext[2] = max(ext[2], c)
                    ext[3] = r

        items: list[GridItem] = []
        for label, (c0, r0, c1, r1) in extents.items():
            for r in range(r0, r1 + 1):
                for c in range(c0, c1 + 1):
                    if cells[r][c] != label:
                        raise SpanError(label, r, c)
            items.append(GridItem(label, c0, r0, c1 - c0 + 1, r1 - r0 + 1))

        return cls(cells, tuple(items))

    @property
    def rows(self) -> int:
        return len(self._cells)

    @property
    def columns(self) -> int:
        return len(self._cells[0])

    @property
    def cells(self) -> tuple[tuple[str, ...], ...]:
        return self._cells

    @property
    def items(self) -> tuple[GridItem, ...]:
        """Labels with their cell rectangles, in first occurrence order."""
        return self._items

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(item.label for item in self._items)

    def bind(self, widgets: Mapping[str, Widget]) -> GridArea:
        """
        Resolve each label to a widget.

        Raises:
            UnmappedLabelError: a label has no widget in the mapping
        """
        bound: list[tuple[Widget, GridItem]] = []
        for item in self._items:
            widget = widgets.get(item.label)
            if widget is None:
                raise UnmappedLabelError(item.label, item.row)
            bound.append((widget, item))
        return GridArea(self, tuple(bound))

    def __repr__(self) -> str:
        return f"GridTemplate({self.columns}x{self.rows}, labels={list(self.labels)})"


@dataclass(frozen=True)
class GridArea:
    """A template with every label bound to a widget."""
    template: GridTemplate
    widgets: tuple[tuple[Widget, GridItem], ...]

    @classmethod
    def parse(cls, source: TemplateSource, widgets: Mapping[str, Widget]) -> GridArea:
        """Parse a template and bind its labels in one step."""
        return GridTemplate.parse(source).bind(widgets)


def grid_area(source: TemplateSource, **widgets: Widget) -> GridArea:
    """
    Build a GridArea from a template and widgets passed by label.

    Example:
        grid = grid_area('''
            [a a .]
            [. b b]
        ''', a=title, b=Button("OK"))
    """
    return GridArea.parse(source, widgets)
