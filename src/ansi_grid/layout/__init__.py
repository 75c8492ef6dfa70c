"""Grid templates and the layout solver."""

from ansi_grid.layout.grid import FILLER, GridArea, GridItem, GridTemplate, grid_area
from ansi_grid.layout.solver import LayoutSolver, Placement, TrackSpan, solve, solve_tracks

__all__ = [
    "FILLER",
    "GridArea",
    "GridItem",
    "GridTemplate",
    "grid_area",
    "LayoutSolver",
    "Placement",
    "TrackSpan",
    "solve",
    "solve_tracks",
]
