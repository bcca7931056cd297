"""Script playback front-end for Qt applications.

Architecture
------------
ScriptPlayer (QObject, main thread)
  ├─ interpreter.ScriptInterpreter — runs the script on its own thread
  ├─ tracker.PositionTracker       — live pointer readout, own thread
  └─ QTimer                        — polls is_running for the status light

Signals forwarded to the UI
---------------------------
log_message(level, msg)      → log view
status_changed("playing" | "stopped")
position_changed(x, y)       → pointer coordinate labels
"""
from __future__ import annotations

from PySide6.QtCore import QObject, QTimer, Signal

from clicker.core.injector    import InputInjector
from clicker.core.interpreter import ScriptInterpreter
from clicker.core.keys        import combo_script
from clicker.core.tracker     import PositionTracker


class ScriptPlayer(QObject):
    """Plays script text and reports status and pointer position.

    Parameters
    ----------
    settings : SettingsManager
    injector : InputInjector, optional
        Defaults to the pynput backend (InjectorUnavailable if it cannot start).
    """

    log_message      = Signal(str, str)
    status_changed   = Signal(str)
    position_changed = Signal(int, int)

    def __init__(self, settings, injector: InputInjector | None = None) -> None:
        super().__init__()
        self._settings    = settings
        self._interpreter = ScriptInterpreter(injector, settings, log_fn=self._emit_log)
        self._tracker     = PositionTracker(
            self._interpreter.injector,
            settings.tracker_interval_ms,
            log_fn=self._emit_log,
        )
        self._playing = False
        self._status_timer = QTimer(self)
        self._status_timer.setInterval(settings.status_poll_ms)
        self._status_timer.timeout.connect(self._poll_status)

    # ------------------------------------------------------------------

    @property
    def interpreter(self) -> ScriptInterpreter:
        return self._interpreter

    @property
    def is_playing(self) -> bool:
        return self._interpreter.is_running

    def play(self, text: str) -> None:
        if self.is_playing:
            return
        if not text.strip():
            self.log_message.emit("WARNING", "Script is empty")
            return
        if self._settings.uppercase_script:
            text = text.upper()

        self._interpreter.start(text)
        self._playing = True
        self.status_changed.emit("playing")
        self._status_timer.start()

    def stop(self) -> None:
        self._interpreter.halt()
        self._interpreter.wait(3.0)
        self._poll_status()

    @staticmethod
    def insert_combo(text: str, caret: int, combo: str) -> tuple[str, int]:
        """Insert the script lines for a key combo such as "CTRL+C" at ``caret``.

        Returns the new text and the caret position after the inserted lines.
        """
        snippet = combo_script(combo)
        caret = max(0, min(caret, len(text)))
        return text[:caret] + snippet + text[caret:], caret + len(snippet)

    def start_tracking(self) -> None:
        self._tracker.start(self.position_changed.emit)

    def shutdown(self) -> None:
        """Halt any run and stop the tracker and status timer."""
        self._interpreter.halt()
        self._tracker.stop()
        self._status_timer.stop()

    # ------------------------------------------------------------------

    def _emit_log(self, level: str, msg: str) -> None:
        self.log_message.emit(level, msg)

    def _poll_status(self) -> None:
        if self._playing and not self._interpreter.is_running:
            self._playing = False
            self._status_timer.stop()
            self.status_changed.emit("stopped")
