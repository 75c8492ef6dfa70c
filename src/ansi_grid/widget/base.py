"""Widget protocol and common functionality."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Protocol, runtime_checkable

from ansi_grid.core.bounds import AreaBound
from ansi_grid.core.geometry import Dim, Pos
from ansi_grid.input.events import Action, FocusEvent, ModKeys, MouseEvent
from ansi_grid.render.cells import Cells
from ansi_grid.text.outline import Border
from ansi_grid.text.theme import StyleGroup


@runtime_checkable
class Widget(Protocol):
    """
    Protocol for widgets placed in a grid.

    The screen only talks to widgets through these methods. Widgets are
    borrowed for layout and drawing every frame; interactive state only
    changes inside focus() and mouse_event().
    """

    def bounds(self) -> AreaBound:
        """Get acceptable column and row counts (border excluded)."""
        ...

    def border(self) -> Optional[Border]:
        """Get the decorative border, if any."""
        ...

    def style_group(self) -> StyleGroup:
        """Get the theme style group to draw with."""
        ...

    def render(self, cells: Cells) -> None:
        """Draw into a view inside the widget's border."""
        ...

    def focus(self, event: FocusEvent) -> Optional[Action]:
        """Handle a focus notification."""
        ...

    def mouse_event(
        self, event: MouseEvent, mods: ModKeys, dim: Dim, pos: Pos,
    ) -> Optional[Action]:
        """Handle a mouse action at a position relative to the widget."""
        ...


class BaseWidget(ABC):
    """Base class with default widget behavior: no border, no interaction."""

    def bounds(self) -> AreaBound:
        return AreaBound()

    def border(self) -> Optional[Border]:
        return None

    def style_group(self) -> StyleGroup:
        return StyleGroup.ENABLED

    @abstractmethod
    def render(self, cells: Cells) -> None:
        """Subclasses must implement rendering."""
        pass

    def focus(self, event: FocusEvent) -> Optional[Action]:
        return None

    def mouse_event(
        self, event: MouseEvent, mods: ModKeys, dim: Dim, pos: Pos,
    ) -> Optional[Action]:
        return None
