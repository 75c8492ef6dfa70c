"""Command-line interface for ansi-grid."""

from ansi_grid.cli.main import main

__all__ = ["main"]
