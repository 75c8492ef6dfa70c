"""Cell - atomic unit of the screen buffer."""

from dataclasses import dataclass, field

from ansi_grid.text.style import TextStyle


@dataclass(slots=True)
class Cell:
    """A single character cell with its text style."""
    char: str = ' '
    style: TextStyle = field(default_factory=TextStyle)

    def copy(self) -> "Cell":
        """Create a copy of this cell."""
        return Cell(char=self.char, style=self.style)
