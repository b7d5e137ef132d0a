"""
Tests for core.blocks — injected block height sources.
"""

import pytest

from core.blocks.height import FixedBlockHeight, SequentialBlockHeight


class TestFixedBlockHeight:
    def test_returns_fixed_height(self):
        blocks = FixedBlockHeight(1000)
        assert blocks.current_height() == 1000
        assert blocks.current_height() == 1000  # Same every time

    def test_advance(self):
        blocks = FixedBlockHeight(1000)
        blocks.advance()
        blocks.advance(9)
        assert blocks.current_height() == 1010

    def test_rejects_negative_height(self):
        with pytest.raises(ValueError, match=">= 0"):
            FixedBlockHeight(-1)

    def test_rejects_non_int_height(self):
        with pytest.raises(TypeError, match="height must be int"):
            FixedBlockHeight("1000")

    def test_rejects_non_positive_advance(self):
        blocks = FixedBlockHeight(1)
        with pytest.raises(ValueError, match="positive"):
            blocks.advance(0)


class TestSequentialBlockHeight:
    def test_each_read_mines_a_block(self):
        blocks = SequentialBlockHeight(start=5)
        assert [blocks.current_height() for _ in range(3)] == [5, 6, 7]

    def test_defaults_to_genesis(self):
        assert SequentialBlockHeight().current_height() == 0

    def test_rejects_bool_start(self):
        with pytest.raises(TypeError):
            SequentialBlockHeight(start=True)
