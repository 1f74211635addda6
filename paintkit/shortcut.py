"""Model of an editor that captures a single key combination as text."""

from __future__ import annotations

import enum
from typing import Optional

__all__ = ["Modifier", "ShortcutEdit", "is_modifier"]

_MODIFIER_KEYS = frozenset({"Control", "Meta", "Alt", "AltGr", "Shift"})


class Modifier(enum.Flag):
    """Keyboard modifiers held during a key press."""

    NONE = 0
    META = enum.auto()
    CTRL = enum.auto()
    ALT = enum.auto()
    SHIFT = enum.auto()


_MODIFIER_NAMES = (
    (Modifier.META, "Meta"),
    (Modifier.CTRL, "Ctrl"),
    (Modifier.ALT, "Alt"),
    (Modifier.SHIFT, "Shift"),
)


def is_modifier(key: str) -> bool:
    """Return True if ``key`` names a modifier key on its own."""
    return key in _MODIFIER_KEYS


def _key_name(key: str) -> str:
    return key.upper() if len(key) == 1 else key


class ShortcutEdit:
    """Read-only text holding the last key combination pressed."""

    def __init__(self, text: str = "") -> None:
        self.text = text

    @property
    def clear_button_visible(self) -> bool:
        """The clear button is shown whenever there is text."""
        return bool(self.text)

    def key_press(
        self,
        key: str,
        modifiers: Modifier = Modifier.NONE,
        auto_repeat: bool = False,
    ) -> Optional[str]:
        """Record a key press; modifier-only and repeated presses are ignored.

        Returns the new text, or None if the press was ignored.
        """
        if not key:
            raise ValueError("key must not be empty")
        if auto_repeat or is_modifier(key):
            return None
        parts = [name for flag, name in _MODIFIER_NAMES if flag in modifiers]
        parts.append(_key_name(key))
        self.text = "+".join(parts)
        return self.text

    def clear(self) -> None:
        """Remove the recorded shortcut."""
        self.text = ""