"""
Exception classes for ansi-grid.

- TemplateError and subclasses: structural problems in a grid template,
  reported when the template is built. They point at an application bug
  and are never recovered from silently.
- ScreenError: an I/O failure from the output sink or input source,
  wrapping the underlying cause.

Contract violations (invalid split edges, drawing outside a view) raise
ValueError / IndexError instead.
"""

from __future__ import annotations

from typing import Optional


class AnsiGridError(Exception):
    """Base class for ansi-grid errors."""


class TemplateError(AnsiGridError):
    """
    Raised when a grid template is malformed.

    Attributes:
        label: The offending label, if any
        row: The offending template row (0-indexed), if any
    """

    def __init__(
        self,
        message: str,
        label: Optional[str] = None,
        row: Optional[int] = None,
    ) -> None:
        self.label = label
        self.row = row
        super().__init__(message)


class EmptyTemplateError(TemplateError):
    """Raised when a template has no rows or no columns."""

    def __init__(self) -> None:
        super().__init__("Grid template is empty")


class RaggedRowError(TemplateError):
    """Raised when template rows have different numbers of cells."""

    def __init__(self, row: int, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Row {row} has {found} cells, expected {expected}",
            row=row,
        )


class SpanError(TemplateError):
    """Raised when a label's cells do not form a rectangle."""

    def __init__(self, label: str, row: int, col: int) -> None:
        self.col = col
        super().__init__(
            f"Label {label!r} does not form a rectangle "
            f"(row {row}, column {col})",
            label=label,
            row=row,
        )


class UnmappedLabelError(TemplateError):
    """Raised when a template label has no widget."""

    def __init__(self, label: str, row: Optional[int] = None) -> None:
        super().__init__(f"No widget for label {label!r}", label=label, row=row)


class ScreenError(AnsiGridError):
    """
    Raised when terminal output or input fails.

    The underlying exception is kept in `cause` (and chained as __cause__).
    """

    def __init__(self, operation: str, cause: BaseException) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"Screen {operation} failed: {cause}")
