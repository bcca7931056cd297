"""Tests for clicker.core.blocks — REPEAT/END matching."""
import pytest

from clicker.core.blocks import BlockIndex, MalformedScript, find_block_end
from clicker.core.parser import parse_lines


class TestFindBlockEnd:
    def test_simple(self):
        cmds = parse_lines("REPEAT 2\nCLICK A\nEND\nHALT")
        assert find_block_end(cmds, 1, len(cmds)) == 2

    def test_nested_end_skipped(self):
        cmds = parse_lines("REPEAT 2\nREPEAT 3\nCLICK A\nEND\nCLICK B\nEND")
        assert find_block_end(cmds, 1, len(cmds)) == 5
        assert find_block_end(cmds, 2, len(cmds)) == 3

    def test_blank_lines_ignored(self):
        cmds = parse_lines("REPEAT 2\n\nCLICK A\n\nEND")
        assert find_block_end(cmds, 1, len(cmds)) == 4

    def test_end_with_argument_is_not_terminator(self):
        cmds = parse_lines("REPEAT 2\nEND x\nEND")
        assert find_block_end(cmds, 1, len(cmds)) == 2

    def test_missing_end(self):
        cmds = parse_lines("REPEAT 4\nCLICK A")
        with pytest.raises(MalformedScript):
            find_block_end(cmds, 1, len(cmds))

    def test_end_outside_range_not_found(self):
        cmds = parse_lines("REPEAT 1\nREPEAT 2\nEND\nEND")
        # Inner search bounded by the outer block's END at index 2
        with pytest.raises(MalformedScript):
            find_block_end(cmds, 2, 2)


class TestBlockIndex:
    def test_caches(self):
        cmds = parse_lines("REPEAT 2\nCLICK A\nEND")
        index = BlockIndex(cmds)
        assert index.block_end(1, 3) == 2
        cmds.clear()                        # cached answer needs no rescan
        assert index.block_end(1, 3) == 2

    def test_cached_end_beyond_scope(self):
        cmds = parse_lines("REPEAT 2\nCLICK A\nEND")
        index = BlockIndex(cmds)
        index.block_end(1, 3)
        with pytest.raises(MalformedScript):
            index.block_end(1, 2)
