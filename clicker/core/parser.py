"""Clicker script parser — one source line → one Command.

Responsibilities
----------------
- Strip comments (# …) and surrounding whitespace
- Split a line into command word + a single argument string
- Match the command word (case-sensitive) and parse its arguments

Key/button names are *not* resolved here; see keys.resolve_target(), which
the interpreter calls when a PRESS / RELEASE / CLICK line actually runs.
"""
from __future__ import annotations

import threading
from typing import Callable

from clicker.core.constants import COMMENT_PREFIX
from clicker.core.script_nodes import (
    Command, Press, Release, Click, Move, Wait,
    RepeatStart, BlockEnd, Halt, Invalid, Skip,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def strip_comment(line: str) -> str:
    """Return line with trailing comment (# …) removed."""
    return line.split(COMMENT_PREFIX, 1)[0]


def split_command(line: str) -> tuple[str, str]:
    """Split a line on the first whitespace run → (word, argument).

    Returns ("", "") for blank/comment-only lines.
    """
    stripped = strip_comment(line).strip()
    if not stripped:
        return "", ""
    parts = stripped.split(None, 1)
    return parts[0], parts[1] if len(parts) > 1 else ""


# Longest wait a threading.Event can block for
MAX_WAIT_MS = int(threading.TIMEOUT_MAX) * 1000


def _parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Per-command argument handlers
# ---------------------------------------------------------------------------

def _target(cls):
    def build(arg: str, text: str, lnum: int) -> Command:
        if not arg:
            return Invalid(text, "missing key/button name", lnum)
        return cls(arg, lnum)
    return build


def _move(arg: str, text: str, lnum: int) -> Command:
    parts = arg.split(",")
    if len(parts) != 2:
        return Invalid(text, "invalid MOVE format, use: MOVE x,y", lnum)
    x, y = _parse_int(parts[0]), _parse_int(parts[1])
    if x is None or y is None:
        return Invalid(text, f"invalid MOVE coordinates: {arg!r}", lnum)
    return Move(x, y, lnum)


def _wait(arg: str, text: str, lnum: int) -> Command:
    ms = _parse_int(arg)
    if ms is None or ms < 0:
        return Invalid(text, f"invalid wait time: {arg!r}", lnum)
    if ms > MAX_WAIT_MS:
        return Invalid(text, f"wait time too long: {arg!r}", lnum)
    return Wait(ms, lnum)


def _repeat(arg: str, text: str, lnum: int) -> Command:
    # Always structural, even with a bad count, so block matching stays intact
    return RepeatStart(_parse_int(arg) if arg else None, arg, lnum)


def _bare(cls):
    # Trailing text is kept for a warning; the word alone decides the effect
    def build(arg: str, text: str, lnum: int) -> Command:
        return cls(lnum, arg)
    return build


_HANDLERS: dict[str, Callable[[str, str, int], Command]] = {
    "PRESS":   _target(Press),
    "RELEASE": _target(Release),
    "CLICK":   _target(Click),
    "MOVE":    _move,
    "WAIT":    _wait,
    "REPEAT":  _repeat,
    "END":     _bare(BlockEnd),
    "HALT":    _bare(Halt),
}


def is_command(word: str) -> bool:
    return word in _HANDLERS


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse(line: str, line_num: int = 0) -> Command:
    """Decode one script line.

    Blank and comment-only lines yield ``Skip``; unknown command words and
    malformed arguments yield ``Invalid`` carrying the original text.
    """
    word, arg = split_command(line)
    if not word:
        return Skip(line_num)
    handler = _HANDLERS.get(word)
    if handler is None:
        return Invalid(line.strip(), f"unknown command {word!r}", line_num)
    return handler(arg, line.strip(), line_num)


def parse_lines(text: str) -> list[Command]:
    """Parse every line of ``text``; index i of the result is source line i."""
    return [parse(raw, i) for i, raw in enumerate(text.splitlines())]
