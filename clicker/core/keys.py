"""Target name tables — script key/button names → abstract targets.

Resolution is case-insensitive and happens only when a PRESS / RELEASE /
CLICK line actually executes, so an unknown name inside a block that
never runs is harmless.  The tables here are platform-neutral; the
injector translates ``Key`` / ``Button`` into its backend's codes.
"""
from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Union


class TargetNotFound(ValueError):
    """Raised when a key/button name is not in the symbol table."""


@dataclass(frozen=True)
class Key:
    """A keyboard key; ``name`` is a single character or a named key."""
    name: str


@dataclass(frozen=True)
class Button:
    """A mouse button: ``left``, ``right`` or ``middle``."""
    name: str


Target = Union[Key, Button]

# ---------------------------------------------------------------------------
# Name tables
# ---------------------------------------------------------------------------

BUTTON_NAMES: dict[str, Button] = {
    "LEFT":   Button("left"),
    "RIGHT":  Button("right"),
    "MIDDLE": Button("middle"),
}

# LEFT / RIGHT are taken by the mouse buttons, hence the *_ARROW names.
SPECIAL_KEYS: dict[str, Key] = {
    "CTRL":           Key("ctrl"),
    "CONTROL":        Key("ctrl"),
    "SHIFT":          Key("shift"),
    "ALT":            Key("alt"),
    "WIN":            Key("cmd"),
    "WINDOWS":        Key("cmd"),
    "META":           Key("cmd"),
    "ENTER":          Key("enter"),
    "RETURN":         Key("enter"),
    "SPACE":          Key("space"),
    "BACKSPACE":      Key("backspace"),
    "BACK_SPACE":     Key("backspace"),
    "TAB":            Key("tab"),
    "ESC":            Key("esc"),
    "ESCAPE":         Key("esc"),
    "DELETE":         Key("delete"),
    "DEL":            Key("delete"),
    "HOME":           Key("home"),
    "END":            Key("end"),
    "PAGEUP":         Key("page_up"),
    "PAGE_UP":        Key("page_up"),
    "PAGEDOWN":       Key("page_down"),
    "PAGE_DOWN":      Key("page_down"),
    "UP":             Key("up"),
    "DOWN":           Key("down"),
    "LEFT_ARROW":     Key("left"),
    "RIGHT_ARROW":    Key("right"),
    "INSERT":         Key("insert"),
    "CAPSLOCK":       Key("caps_lock"),
    "CAPS_LOCK":      Key("caps_lock"),
    "NUMLOCK":        Key("num_lock"),
    "NUM_LOCK":       Key("num_lock"),
    "SCROLLLOCK":     Key("scroll_lock"),
    "SCROLL_LOCK":    Key("scroll_lock"),
    "PRINTSCREEN":    Key("print_screen"),
    "PRINT_SCREEN":   Key("print_screen"),
    "PAUSE":          Key("pause"),
    "CONTEXT_MENU":   Key("menu"),
    "COMMA":          Key(","),
    "PERIOD":         Key("."),
    "MINUS":          Key("-"),
    "EQUALS":         Key("="),
    "SLASH":          Key("/"),
    "BACK_SLASH":     Key("\\"),
    "SEMICOLON":      Key(";"),
    "QUOTE":          Key("'"),
    "BACK_QUOTE":     Key("`"),
    "OPEN_BRACKET":   Key("["),
    "CLOSE_BRACKET":  Key("]"),
    # Keypad keys type the same characters as the main block
    "MULTIPLY":       Key("*"),
    "ADD":            Key("+"),
    "SUBTRACT":       Key("-"),
    "DIVIDE":         Key("/"),
    "DECIMAL":        Key("."),
    **{f"NUMPAD{d}": Key(d) for d in string.digits},
    **{f"F{n}": Key(f"f{n}") for n in range(1, 25)},
    **{ch: Key(ch.lower()) for ch in string.ascii_uppercase},
    **{d: Key(d) for d in string.digits},
}

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def resolve_target(name: str) -> Target:
    """Convert a script target name to a ``Button`` or ``Key``.

    Raises TargetNotFound for names outside the tables.
    """
    upper = name.strip().upper()
    if upper in BUTTON_NAMES:
        return BUTTON_NAMES[upper]
    if upper in SPECIAL_KEYS:
        return SPECIAL_KEYS[upper]
    raise TargetNotFound(f"Invalid key/button: {name.strip()!r}")


def combo_script(combo_str: str) -> str:
    """Expand 'CTRL+ALT+DELETE' into press/click/release script lines.

    Modifiers are pressed in order, the last key is clicked, then the
    modifiers are released in reverse order.
    """
    keys = [k.strip() for k in combo_str.split("+") if k.strip()]
    if not keys:
        return ""
    *mods, last = keys
    lines  = [f"PRESS {k}" for k in mods]
    lines += [f"CLICK {last}"]
    lines += [f"RELEASE {k}" for k in reversed(mods)]
    return "\n".join(lines) + "\n"
