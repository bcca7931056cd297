"""Input injection — press/release keys and buttons, move and read the pointer.

``InputInjector`` is the capability the interpreter and the position
tracker depend on; ``PynputInjector`` backs it with pynput controllers.
Pointer reads return a whole ``Point`` in one call, so concurrent readers
(interpreter and tracker) never observe a torn coordinate.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, NamedTuple

from clicker.core.keys import Button, Target, TargetNotFound


class InjectorUnavailable(RuntimeError):
    """Raised when the OS input backend cannot be initialised."""


class Point(NamedTuple):
    x: int
    y: int


class InputInjector(ABC):
    """Abstract OS input capability."""

    @abstractmethod
    def press(self, target: Target) -> None: ...

    @abstractmethod
    def release(self, target: Target) -> None: ...

    @abstractmethod
    def move_to(self, x: int, y: int) -> None: ...

    @abstractmethod
    def position(self) -> Point: ...

    def click(self, target: Target) -> None:
        """Press immediately followed by release of the same target."""
        self.press(target)
        self.release(target)


class PynputInjector(InputInjector):
    """InputInjector using pynput's mouse and keyboard controllers."""

    def __init__(self) -> None:
        try:
            # pynput selects its backend at import time and fails without a display
            from pynput import mouse, keyboard
            self._mc = mouse.Controller()
            self._kc = keyboard.Controller()
        except Exception as exc:
            raise InjectorUnavailable(f"Cannot initialise input backend: {exc}") from exc
        self._mouse    = mouse
        self._keyboard = keyboard

    # ------------------------------------------------------------------
    # Target translation
    # ------------------------------------------------------------------

    def _to_native(self, target: Target) -> Any:
        if isinstance(target, Button):
            return getattr(self._mouse.Button, target.name)
        if len(target.name) == 1:
            return self._keyboard.KeyCode.from_char(target.name)
        native = getattr(self._keyboard.Key, target.name, None)
        if native is None:
            # e.g. insert / num_lock are missing from the macOS backend
            raise TargetNotFound(f"Key {target.name!r} is not available on this platform")
        return native

    # ------------------------------------------------------------------
    # InputInjector
    # ------------------------------------------------------------------

    def press(self, target: Target) -> None:
        native = self._to_native(target)
        if isinstance(target, Button):
            self._mc.press(native)
        else:
            self._kc.press(native)

    def release(self, target: Target) -> None:
        native = self._to_native(target)
        if isinstance(target, Button):
            self._mc.release(native)
        else:
            self._kc.release(native)

    def move_to(self, x: int, y: int) -> None:
        self._mc.position = (x, y)

    def position(self) -> Point:
        x, y = self._mc.position
        return Point(int(x), int(y))
