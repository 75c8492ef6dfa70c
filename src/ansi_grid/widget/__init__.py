"""Widget contract and reusable widgets."""

from ansi_grid.text.outline import Border, LineStyle
from ansi_grid.widget.base import BaseWidget, Widget
from ansi_grid.widget.button import Button, ButtonState
from ansi_grid.widget.label import Label
from ansi_grid.widget.spacer import Spacer

__all__ = [
    "Widget",
    "BaseWidget",
    "Border",
    "LineStyle",
    "Button",
    "ButtonState",
    "Label",
    "Spacer",
]
