"""Block resolver — matches REPEAT openers to their END terminators.

There is no parse tree: the interpreter walks the flat command list and,
when it enters a REPEAT, asks where the block ends.  ``BlockIndex`` memoises
the answer per opener so nested loops do not re-scan on every iteration,
while a missing END is still only detected when the block is entered.
"""
from __future__ import annotations

from clicker.core.script_nodes import Command, RepeatStart, BlockEnd


class MalformedScript(Exception):
    """Raised when a REPEAT block has no matching END in scope."""


def find_block_end(commands: list[Command], start: int, end: int) -> int:
    """Return the index of the END closing the block opened just before ``start``.

    Scans ``commands[start:end]``; nested REPEATs increase the depth and each
    END either closes the current block (depth 0) or one nested block.
    Raises MalformedScript if no terminator is found before ``end``.
    """
    depth = 0
    for i in range(start, end):
        cmd = commands[i]
        if isinstance(cmd, RepeatStart):
            depth += 1
        elif isinstance(cmd, BlockEnd) and not cmd.extra:
            if depth == 0:
                return i
            depth -= 1
    raise MalformedScript(
        f"No matching END found for REPEAT at source line {start}"
    )


class BlockIndex:
    """Per-run cache of block ends, keyed by the first body line."""

    def __init__(self, commands: list[Command]) -> None:
        self._commands = commands
        self._ends: dict[int, int] = {}

    def block_end(self, start: int, end: int) -> int:
        found = self._ends.get(start)
        if found is None:
            found = find_block_end(self._commands, start, end)
            self._ends[start] = found
        elif found >= end:
            # Same opener reached from a narrower scope
            raise MalformedScript(
                f"No matching END found for REPEAT at source line {start}"
            )
        return found
