"""Position tracker — reports the live pointer position for display.

Runs in a daemon thread, independent of any interpreter run, and never
feeds the killswitch.  ``stop`` is safe before ``start`` and guarantees no
callback fires after it returns; the tracker can be started again later.
"""
from __future__ import annotations

import threading
from typing import Callable, Optional

from clicker.core.constants import TRACKER_INTERVAL_MS
from clicker.core.injector import InputInjector

PositionFn = Callable[[int, int], None]     # (x, y)
LogFn      = Callable[[str, str], None]     # (level, message)


class PositionTracker:
    def __init__(self, injector: InputInjector,
                 interval_ms: int = TRACKER_INTERVAL_MS,
                 log_fn: LogFn | None = None) -> None:
        self._injector = injector
        self._interval = interval_ms / 1000.0
        self._log      = log_fn or (lambda level, msg: None)
        self._lock     = threading.RLock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def is_tracking(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, callback: PositionFn) -> None:
        """Begin sampling; ignored if already tracking."""
        with self._lock:
            if self._thread is not None and self._thread.is_alive():
                return
            # A loop that died on a failed read leaves its thread behind
            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._loop, args=(callback, self._stop_event),
                name="clicker-tracker", daemon=True,
            )
            self._thread.start()

    def stop(self) -> None:
        """Stop sampling and wait for the thread to exit."""
        with self._lock:
            thread, self._thread = self._thread, None
            self._stop_event.set()
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    # ------------------------------------------------------------------

    def _loop(self, callback: PositionFn, stop_event: threading.Event) -> None:
        while not stop_event.is_set():
            try:
                pos = self._injector.position()
            except Exception as exc:      # noqa: BLE001
                self._log("ERROR", f"Tracker: cannot read pointer: {exc!r}")
                return
            # Holding the lock keeps stop() from returning mid-report
            with self._lock:
                if stop_event.is_set():
                    return
                try:
                    callback(pos.x, pos.y)
                except Exception as exc:  # noqa: BLE001
                    self._log("WARNING", f"Tracker callback failed: {exc!r}")
            stop_event.wait(self._interval)
