"""
ansi-grid: grid layout toolkit for terminal user interfaces

Place widgets on an ASCII-art grid, let the solver negotiate their sizes,
and run a render/dispatch loop that turns input into actions.

Quick Start:
    >>> from ansi_grid import Screen, grid_area
    >>> from ansi_grid.widget import Button, Label, Spacer
    >>> grid = grid_area('''
    ...     [t t t]
    ...     [. s .]
    ...     [. b .]
    ... ''', t=Label("Hello"), s=Spacer(), b=Button("OK"))
    >>> with Screen() as screen:
    ...     while not screen.step(grid).is_quit:
    ...         pass

Features:
    - Rectangle algebra: split, trim, clip, hit testing
    - Grid templates with multi-cell spans, validated up front
    - Size negotiation with min/max bounds, overflow scaling and
      water-filling of leftover space
    - Clipped drawing views over a shared screen buffer
    - Keyboard (key maps) and mouse (hit testing, focus) dispatch
    - Blocking and asyncio driving modes
"""

__version__ = "0.1.0"

from ansi_grid.config import ScreenConfig
from ansi_grid.core.bounds import AreaBound, LengthBound
from ansi_grid.core.errors import AnsiGridError, ScreenError, TemplateError
from ansi_grid.core.geometry import Area, Dim, Edge, Pos
from ansi_grid.input.events import Action, ActionKind, FocusEvent, Key, KeyEvent, ModKeys, MouseEvent
from ansi_grid.input.keymap import KeyMap
from ansi_grid.layout.grid import GridArea, GridTemplate, grid_area
from ansi_grid.layout.solver import LayoutSolver, Placement
from ansi_grid.screen import Screen
from ansi_grid.text.theme import Theme
from ansi_grid.widget.base import BaseWidget, Widget

__all__ = [
    # Version
    "__version__",
    # Geometry
    "Area",
    "Dim",
    "Edge",
    "Pos",
    "AreaBound",
    "LengthBound",
    # Layout
    "GridArea",
    "GridTemplate",
    "grid_area",
    "LayoutSolver",
    "Placement",
    # Widgets
    "Widget",
    "BaseWidget",
    # Input
    "Action",
    "ActionKind",
    "FocusEvent",
    "Key",
    "KeyEvent",
    "KeyMap",
    "ModKeys",
    "MouseEvent",
    # Screen
    "Screen",
    "ScreenConfig",
    "Theme",
    # Errors
    "AnsiGridError",
    "ScreenError",
    "TemplateError",
]
