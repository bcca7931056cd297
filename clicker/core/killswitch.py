"""Killswitch — detects the user taking over the pointer.

The interpreter records where the script itself last put the pointer.
Before every line it asks ``has_diverged``; any drift beyond the tolerance
on either axis means someone else moved the mouse and the run must stop.
"""
from __future__ import annotations

from typing import Optional

from clicker.core.constants import KILLSWITCH_TOLERANCE_PX
from clicker.core.injector import InputInjector, Point


class Killswitch:
    def __init__(self, injector: InputInjector,
                 tolerance: int = KILLSWITCH_TOLERANCE_PX) -> None:
        self._injector  = injector
        self._tolerance = tolerance
        self.last_seen: Optional[Point] = None

    @property
    def tolerance(self) -> int:
        return self._tolerance

    def has_diverged(self, last: Optional[Point]) -> bool:
        """True if the live pointer is more than ``tolerance`` away from ``last``."""
        if last is None:
            return False
        current = self._injector.position()
        self.last_seen = current
        return (abs(current.x - last.x) > self._tolerance
                or abs(current.y - last.y) > self._tolerance)
