"""Shared test fixtures."""
import sys
import threading
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `clicker.*` imports work
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from clicker.core.injector import InputInjector, Point  # noqa: E402


class FakeInjector(InputInjector):
    """Records effect calls; the pointer lands on MOVE targets when ``settle`` is set.

    ``on_effect(injector, call)`` runs after every press/release, which lets a
    test simulate the user grabbing the mouse mid-run.
    """

    def __init__(self, start=(0, 0), settle=True, on_effect=None) -> None:
        self.calls: list[tuple[str, object]] = []
        self.moves: list[tuple[int, int]] = []
        self.settle = settle
        self.on_effect = on_effect
        self._pos = Point(*start)
        self._lock = threading.Lock()

    def press(self, target) -> None:
        self._record(("press", target))

    def release(self, target) -> None:
        self._record(("release", target))

    def move_to(self, x: int, y: int) -> None:
        self.moves.append((x, y))
        if self.settle:
            self.nudge(x, y)

    def position(self) -> Point:
        with self._lock:
            return self._pos

    def nudge(self, x: int, y: int) -> None:
        """Put the pointer somewhere, as the user (or the OS) would."""
        with self._lock:
            self._pos = Point(x, y)

    def _record(self, call) -> None:
        self.calls.append(call)
        if self.on_effect:
            self.on_effect(self, call)


@pytest.fixture
def injector():
    return FakeInjector()


class LogSink(list):
    """Callable log_fn that keeps (level, message) pairs."""

    def __call__(self, level: str, msg: str) -> None:
        self.append((level, msg))

    def __bool__(self) -> bool:
        # A sink is a callable first; keep it truthy so `log_fn or default`
        # does not discard it while it is still empty.
        return True

    def messages(self, level: str | None = None) -> list[str]:
        return [m for lvl, m in self if level is None or lvl == level]


@pytest.fixture
def logs():
    return LogSink()


@pytest.fixture
def settings(tmp_path):
    from clicker.core.settings_manager import SettingsManager
    return SettingsManager(tmp_path / "settings.ini")
