"""Command dataclasses for the clicker script language.

One node per source line.  Line indices are the addressing scheme used by
the block resolver and the interpreter, so ``parse_lines`` keeps blank
lines as ``Skip`` instead of dropping them.

Effect commands
---------------
Press / Release / Click — target name, resolved lazily at execution
Move                    — absolute pointer coordinate
Wait                    — milliseconds

Structural markers
------------------
RepeatStart — REPEAT count  (opens a block)
BlockEnd    — END           (closes the innermost open block)

Other
-----
Halt    — stop the run immediately
Invalid — unknown word or malformed arguments (no-op + diagnostic)
Skip    — blank or comment line
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass
class Press:
    target:   str
    line_num: int = 0       # 0-based source line for diagnostics


@dataclass
class Release:
    target:   str
    line_num: int = 0


@dataclass
class Click:
    target:   str
    line_num: int = 0


@dataclass
class Move:
    x:        int
    y:        int
    line_num: int = 0


@dataclass
class Wait:
    ms:       int
    line_num: int = 0


@dataclass
class RepeatStart:
    """REPEAT count.

    ``count`` is None when the argument is not an integer; ``raw`` keeps the
    original argument text for the diagnostic.
    """
    count:    Optional[int]
    raw:      str = ""
    line_num: int = 0


@dataclass
class BlockEnd:
    """END.  ``extra`` holds trailing text; such an END is not a block terminator."""
    line_num: int = 0
    extra:    str = ""


@dataclass
class Halt:
    line_num: int = 0
    extra:    str = ""


@dataclass
class Invalid:
    text:     str
    reason:   str = ""
    line_num: int = 0


@dataclass
class Skip:
    line_num: int = 0


# Convenience union type (for type hints only; use isinstance() at runtime)
Command = Union[Press, Release, Click, Move, Wait, RepeatStart, BlockEnd, Halt, Invalid, Skip]
