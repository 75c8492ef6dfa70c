"""Key map - application supplied key to action bindings.

Bindings are defined with keys, modifiers, labels and descriptions, so the
same table drives dispatch and any help or status-bar hints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ansi_grid.input.events import Action, Key, KeyEvent, ModKeys


@dataclass
class KeyBinding:
    """A key binding.

    Attributes:
        keys: Keys/chars that trigger this binding
        action: Action returned when the binding matches
        mods: Modifiers that must be held (exactly)
        label: Short label for hints (e.g., "Quit")
        description: Longer description for help text
        enabled: Whether the binding is currently active
    """
    keys: list[str | Key]
    action: Action
    mods: ModKeys = ModKeys.NONE
    label: str = ""
    description: str = ""
    enabled: bool = True

    def matches(self, event: KeyEvent) -> bool:
        """Check if a key event matches this binding."""
        if not self.enabled or event.mods != self.mods:
            return False
        for key in self.keys:
            if isinstance(key, Key):
                if event.key == key:
                    return True
            elif event.char == key:
                return True
        return False

    @property
    def key_display(self) -> str:
        """Get display string for the keys."""
        prefix = "".join(
            name for mod, name in _MOD_DISPLAY if mod in self.mods
        )
        displays = [
            _KEY_DISPLAY.get(key, key.name) if isinstance(key, Key) else key
            for key in self.keys
        ]
        return "/".join(prefix + display for display in displays)


_MOD_DISPLAY = (
    (ModKeys.CTRL, "^"),
    (ModKeys.ALT, "M-"),
    (ModKeys.SHIFT, "S-"),
)

_KEY_DISPLAY = {
    Key.UP: "↑",
    Key.DOWN: "↓",
    Key.LEFT: "←",
    Key.RIGHT: "→",
    Key.ENTER: "Enter",
    Key.ESCAPE: "Esc",
    Key.TAB: "Tab",
    Key.BACK_TAB: "S-Tab",
    Key.BACKSPACE: "Bksp",
    Key.PAGE_UP: "PgUp",
    Key.PAGE_DOWN: "PgDn",
    Key.DELETE: "Del",
    Key.INSERT: "Ins",
}


@dataclass
class KeyMap:
    """
    Ordered key bindings; the first match wins.

    Example:
        keymap = KeyMap()
        keymap.bind("s", Action.custom("save"), mods=ModKeys.CTRL, label="Save")
        action = keymap.lookup(event)
    """
    bindings: list[KeyBinding] = field(default_factory=list)

    @classmethod
    def default(cls) -> KeyMap:
        """Key map binding Escape to quit."""
        keymap = cls()
        keymap.bind(Key.ESCAPE, Action.quit(), label="Quit", description="Exit the application")
        return keymap

    def register(self, binding: KeyBinding) -> None:
        """Add a binding."""
        self.bindings.append(binding)

    def bind(
        self,
        keys: str | Key | list[str | Key],
        action: Action,
        mods: ModKeys = ModKeys.NONE,
        label: str = "",
        description: str = "",
    ) -> KeyBinding:
        """Create and add a binding."""
        if not isinstance(keys, list):
            keys = [keys]
        binding = KeyBinding(keys, action, mods, label, description)
        self.register(binding)
        return binding

    def lookup(self, event: KeyEvent) -> Optional[Action]:
        """Find the action bound to a key event (None if unmapped)."""
        for binding in self.bindings:
            if binding.matches(event):
                return binding.action
        return None

    def hints(self, max_hints: int = 6) -> list[tuple[str, str]]:
        """Get (key display, label) pairs of labelled bindings."""
        return [
            (binding.key_display, binding.label)
            for binding in self.bindings
            if binding.enabled and binding.label
        ][:max_hints]
