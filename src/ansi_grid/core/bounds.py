"""Size bounds - widget size preferences and negotiation arithmetic."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional


def spread(total: int, count: int) -> list[int]:
    """
    Distribute cells evenly into a number of slots.

    Any remainder goes one cell each to the first slots, so the result is
    deterministic and biased to the left/top.

    >>> spread(10, 3)
    [4, 3, 3]
    """
    if count <= 0:
        return []
    share, remainder = divmod(max(0, total), count)
    return [share + 1 if i < remainder else share for i in range(count)]


@dataclass(frozen=True)
class LengthBound:
    """
    Inclusive range of acceptable lengths along one axis.

    A maximum of None is unbounded: the length is flexible and will absorb
    leftover space.
    """
    minimum: int = 0
    maximum: Optional[int] = None

    def __post_init__(self) -> None:
        if self.minimum < 0:
            raise ValueError(f"Negative minimum length: {self.minimum}")
        if self.maximum is not None and self.maximum < self.minimum:
            raise ValueError(
                f"Maximum length {self.maximum} below minimum {self.minimum}"
            )

    @property
    def is_flexible(self) -> bool:
        return self.maximum is None

    @property
    def is_rigid(self) -> bool:
        return self.maximum == self.minimum

    def clamp(self, length: int) -> int:
        """Clamp a length into the bound."""
        length = max(self.minimum, length)
        if self.maximum is not None:
            length = min(self.maximum, length)
        return length

    def expand(self, cells: int) -> LengthBound:
        """Grow both ends of the bound (for decorations)."""
        maximum = None if self.maximum is None else self.maximum + cells
        return LengthBound(self.minimum + cells, maximum)


@dataclass(frozen=True)
class AreaBound:
    """Bounds for the columns and rows a widget will accept."""
    columns: LengthBound = field(default_factory=LengthBound)
    rows: LengthBound = field(default_factory=LengthBound)

    def with_columns(self, minimum: int, maximum: Optional[int] = None) -> AreaBound:
        """Set the column bounds."""
        return replace(self, columns=LengthBound(minimum, maximum))

    def with_rows(self, minimum: int, maximum: Optional[int] = None) -> AreaBound:
        """Set the row bounds."""
        return replace(self, rows=LengthBound(minimum, maximum))

    def expand(self, columns: int, rows: int) -> AreaBound:
        """Grow the bounds by a number of columns and rows."""
        return AreaBound(self.columns.expand(columns), self.rows.expand(rows))
