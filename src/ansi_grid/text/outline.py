"""Border outlines - line styles and the border request widgets make."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ansi_grid.core.geometry import Edge


@dataclass(frozen=True)
class Glyphs:
    """Box drawing characters for one line style."""
    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str


class LineStyle(Enum):
    """Border line styles."""
    EMPTY = Glyphs(" ", " ", " ", " ", " ", " ")
    SOLID = Glyphs("─", "│", "┌", "┐", "└", "┘")
    ROUNDED = Glyphs("─", "│", "╭", "╮", "╰", "╯")
    DASHED = Glyphs("╌", "╎", "┌", "┐", "└", "┘")
    HEAVY = Glyphs("━", "┃", "┏", "┓", "┗", "┛")
    DOUBLE = Glyphs("═", "║", "╔", "╗", "╚", "╝")
    BLOCK = Glyphs("█", "█", "█", "█", "█", "█")

    @property
    def glyphs(self) -> Glyphs:
        return self.value


@dataclass(frozen=True)
class Border:
    """
    Decorative border around a widget.

    The render loop draws the border and insets the widget's view by one
    cell on each edge in `edges`. Edges in `accents` are drawn with
    `accent_style` instead of `line_style`.
    """
    edges: Edge = Edge.ALL
    line_style: LineStyle = LineStyle.SOLID
    accents: Edge = Edge.NONE
    accent_style: LineStyle = LineStyle.DOUBLE

    def with_edges(self, edges: Edge) -> Border:
        return Border(edges, self.line_style, self.accents, self.accent_style)

    def with_line_style(self, line_style: LineStyle) -> Border:
        return Border(self.edges, line_style, self.accents, self.accent_style)

    def with_accents(self, accents: Edge, accent_style: LineStyle = LineStyle.DOUBLE) -> Border:
        return Border(self.edges, self.line_style, accents, accent_style)

    def style_for(self, edge: Edge) -> LineStyle:
        """Get the line style used for one edge (or a corner of two)."""
        if edge != Edge.NONE and (edge & self.accents) == edge:
            return self.accent_style
        return self.line_style
