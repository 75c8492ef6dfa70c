"""Core types - geometry, size bounds, screen buffer, and errors."""

from ansi_grid.core.bounds import AreaBound, LengthBound, spread
from ansi_grid.core.canvas import ScreenBuffer
from ansi_grid.core.cell import Cell
from ansi_grid.core.errors import (
    AnsiGridError,
    EmptyTemplateError,
    RaggedRowError,
    ScreenError,
    SpanError,
    TemplateError,
    UnmappedLabelError,
)
from ansi_grid.core.geometry import Area, Dim, Edge, Pos

__all__ = [
    "Area",
    "Dim",
    "Edge",
    "Pos",
    "AreaBound",
    "LengthBound",
    "spread",
    "Cell",
    "ScreenBuffer",
    "AnsiGridError",
    "TemplateError",
    "EmptyTemplateError",
    "RaggedRowError",
    "SpanError",
    "UnmappedLabelError",
    "ScreenError",
]
