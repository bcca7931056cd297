"""Script interpreter — walks parsed lines and drives the input injector.

Execution model
---------------
- The script is parsed once per run into a flat command list; line index
  = list index.  REPEAT blocks are re-walked in place, their END located
  lazily through blocks.BlockIndex.
- Before every line the killswitch compares the live pointer with the
  last position the script itself commanded.  Drift → halt.
- HALT, a killswitch trip and an external ``halt()`` all raise ``_Halt``,
  which unwinds every nesting level up to the run boundary.
- Per-line problems (unknown target, bad arguments, unknown word) are
  logged and skipped.  A REPEAT without END aborts the run.

Status
------
idle → running → completed | halted | aborted
Only one run per interpreter is active at a time; ``start`` while running
is silently ignored.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional

from clicker.core.blocks import BlockIndex, MalformedScript
from clicker.core.constants import (
    KILLSWITCH_TOLERANCE_PX,
    SETTLE_INTERVAL_MS,
    SETTLE_ATTEMPTS,
    SETTLE_TOLERANCE_PX,
)
from clicker.core.injector import InputInjector, Point, PynputInjector
from clicker.core.keys import TargetNotFound, resolve_target
from clicker.core.killswitch import Killswitch
from clicker.core.parser import parse_lines
from clicker.core.script_nodes import (
    Command, Press, Release, Click, Move, Wait,
    RepeatStart, BlockEnd, Halt, Invalid,
)

LogFn = Callable[[str, str], None]       # (level, message)

IDLE      = "idle"
RUNNING   = "running"
COMPLETED = "completed"
HALTED    = "halted"
ABORTED   = "aborted"


class _Halt(Exception):
    """Unwinds the whole run; message says why."""


@dataclass
class RunState:
    status:        str             = IDLE
    last_position: Optional[Point] = None

    @property
    def running(self) -> bool:
        return self.status == RUNNING


class ScriptInterpreter:
    """Executes clicker scripts against an InputInjector.

    Parameters
    ----------
    injector : InputInjector, optional
        Defaults to a PynputInjector; raises InjectorUnavailable if the OS
        backend cannot be initialised.
    settings : SettingsManager, optional
        Source of killswitch / settle tunables; constants are used if omitted.
    log_fn : callable(level, message), optional
        Diagnostics sink.
    """

    def __init__(self, injector: InputInjector | None = None, settings=None,
                 log_fn: LogFn | None = None) -> None:
        self._injector = injector if injector is not None else PynputInjector()
        self._log      = log_fn or (lambda level, msg: None)

        if settings is not None:
            tolerance             = settings.killswitch_tolerance
            self._settle_interval = settings.settle_interval_ms
            self._settle_attempts = settings.settle_attempts
            self._settle_tol      = settings.settle_tolerance
        else:
            tolerance             = KILLSWITCH_TOLERANCE_PX
            self._settle_interval = SETTLE_INTERVAL_MS
            self._settle_attempts = SETTLE_ATTEMPTS
            self._settle_tol      = SETTLE_TOLERANCE_PX
        self._killswitch = Killswitch(self._injector, tolerance)

        self._state      = RunState()
        self._lock       = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._cmd_count  = 0

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    @property
    def injector(self) -> InputInjector:
        return self._injector

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._state.running

    @property
    def status(self) -> str:
        with self._lock:
            return self._state.status

    @property
    def last_position(self) -> Optional[Point]:
        with self._lock:
            return self._state.last_position

    def start(self, text: str) -> None:
        """Begin a run on a background thread; no-op if one is active."""
        if not self._begin():
            return
        self._thread = threading.Thread(
            target=self._worker, args=(text,), name="clicker-run", daemon=True,
        )
        self._thread.start()

    def run(self, text: str) -> str:
        """Run synchronously on the calling thread and return the final status.

        If another run is active nothing happens and "running" is returned.
        """
        if not self._begin():
            return RUNNING
        self._worker(text)
        return self.status

    def halt(self) -> None:
        """Request the active run to stop before its next line; safe when idle."""
        self._stop_event.set()

    def wait(self, timeout: float | None = None) -> bool:
        """Join the background run; True if it has finished."""
        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    # ------------------------------------------------------------------
    # Run lifecycle
    # ------------------------------------------------------------------

    def _begin(self) -> bool:
        with self._lock:
            if self._state.running:
                return False
            self._state.status        = RUNNING
            self._state.last_position = None
            self._stop_event.clear()
            return True

    def _worker(self, text: str) -> None:
        commands = parse_lines(text)
        blocks   = BlockIndex(commands)
        self._cmd_count = 0
        status = ABORTED
        try:
            start_pos = self._injector.position()
            with self._lock:
                self._state.last_position = start_pos
            self._log("INFO", f"Run started: {len(commands)} lines")
            self._run_range(commands, blocks, 0, len(commands))
            status = COMPLETED
            self._log("SUCCESS", f"Run completed ({self._cmd_count} commands executed)")
        except _Halt as exc:
            status = HALTED
            self._log("INFO", f"Run halted: {exc} ({self._cmd_count} commands executed)")
        except MalformedScript as exc:
            self._log("ERROR", f"Script structure error: {exc}")
        except Exception as exc:          # noqa: BLE001
            self._log("ERROR", f"Run error: {exc!r}")
        finally:
            with self._lock:
                self._state.status = status

    # ------------------------------------------------------------------
    # Walking
    # ------------------------------------------------------------------

    def _run_range(self, commands: list[Command], blocks: BlockIndex,
                   start: int, end: int) -> None:
        """Execute ``commands[start:end]`` in order."""
        i = start
        while i < end:
            self._check_stop()
            self._check_killswitch()
            cmd = commands[i]
            if isinstance(cmd, RepeatStart):
                i = self._run_repeat(commands, blocks, cmd, i + 1, end)
            elif isinstance(cmd, BlockEnd):
                self._warn_extra(cmd)
                return                      # END closes whatever scope reached it
            elif isinstance(cmd, Halt):
                self._warn_extra(cmd)
                raise _Halt(f"HALT at line {cmd.line_num + 1}")
            else:
                self._run_cmd(cmd)
            i += 1

    def _run_repeat(self, commands: list[Command], blocks: BlockIndex,
                    cmd: RepeatStart, start: int, end: int) -> int:
        """Run the block body ``count`` times; return the index of its END."""
        count = cmd.count
        if count is None or count < 0:
            self._log("WARNING",
                      f"Line {cmd.line_num + 1}: invalid repeat count {cmd.raw!r}, treating as 0")
            count = 0

        block_end = blocks.block_end(start, end)
        for _ in range(count):
            self._check_stop()
            self._run_range(commands, blocks, start, block_end)
        return block_end

    def _warn_extra(self, cmd: BlockEnd | Halt) -> None:
        if cmd.extra:
            self._log("WARNING",
                      f"Line {cmd.line_num + 1}: ignoring unexpected argument {cmd.extra!r}")

    def _check_stop(self) -> None:
        if self._stop_event.is_set():
            raise _Halt("stop requested")

    def _check_killswitch(self) -> None:
        last = self._state.last_position
        if self._killswitch.has_diverged(last):
            seen = self._killswitch.last_seen
            self._log("WARNING",
                      f"Killswitch: pointer at ({seen.x}, {seen.y}), "
                      f"expected ({last.x}, {last.y})")
            raise _Halt("pointer moved by user")

    def _sleep(self, ms: float) -> None:
        """Sleep ``ms`` milliseconds; a halt request during the sleep halts the run."""
        if self._stop_event.wait(max(0.0, ms) / 1000.0):
            raise _Halt("stop requested")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _run_cmd(self, cmd: Command) -> None:
        handler = _DISPATCH.get(type(cmd))
        if handler is None:
            return                          # Skip
        try:
            handler(self, cmd)
            if not isinstance(cmd, Invalid):
                self._cmd_count += 1
        except _Halt:
            raise
        except TargetNotFound as exc:
            self._log("WARNING", f"Line {cmd.line_num + 1}: {exc}, skipping")
        except Exception as exc:          # noqa: BLE001
            self._log("ERROR", f"Line {cmd.line_num + 1}: {exc!r}")

    def _cmd_press(self, cmd: Press) -> None:
        self._injector.press(resolve_target(cmd.target))

    def _cmd_release(self, cmd: Release) -> None:
        self._injector.release(resolve_target(cmd.target))

    def _cmd_click(self, cmd: Click) -> None:
        self._injector.click(resolve_target(cmd.target))

    def _cmd_move(self, cmd: Move) -> None:
        """Move, then poll until the pointer settles or the attempt budget runs out.

        The observed position becomes the new killswitch baseline either way.
        """
        self._injector.move_to(cmd.x, cmd.y)
        current = self._injector.position()
        for _ in range(self._settle_attempts):
            self._sleep(self._settle_interval)
            current = self._injector.position()
            if (abs(current.x - cmd.x) <= self._settle_tol
                    and abs(current.y - cmd.y) <= self._settle_tol):
                break
        else:
            self._log("WARNING",
                      f"Line {cmd.line_num + 1}: MOVE {cmd.x},{cmd.y} did not settle, "
                      f"pointer at ({current.x}, {current.y})")
        with self._lock:
            self._state.last_position = current

    def _cmd_wait(self, cmd: Wait) -> None:
        self._sleep(cmd.ms)

    def _cmd_invalid(self, cmd: Invalid) -> None:
        self._log("WARNING", f"Line {cmd.line_num + 1}: {cmd.reason}: {cmd.text!r}")


# ---------------------------------------------------------------------------
# Dispatch table — maps command type → unbound method
# ---------------------------------------------------------------------------

_DISPATCH: dict[type, Any] = {
    Press:   ScriptInterpreter._cmd_press,
    Release: ScriptInterpreter._cmd_release,
    Click:   ScriptInterpreter._cmd_click,
    Move:    ScriptInterpreter._cmd_move,
    Wait:    ScriptInterpreter._cmd_wait,
    Invalid: ScriptInterpreter._cmd_invalid,
}
