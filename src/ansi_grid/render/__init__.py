"""Rendering - clipped cell views, output sinks and terminal modes."""

from ansi_grid.render.cells import Cells
from ansi_grid.render.terminal import OutputSink, Terminal, TerminalSink

__all__ = [
    "Cells",
    "OutputSink",
    "Terminal",
    "TerminalSink",
]
