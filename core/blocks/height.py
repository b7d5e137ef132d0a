"""
CVR Core Blocks — Block Height Source
=======================================
Doctrine: the registry never guesses the chain position.
The current block height is injected through the
BlockHeightSource protocol by whatever hosts the registry
(a transaction processor, the HTTP adapter, a test).

The registry treats the value as an opaque monotonic marker.
"""

from __future__ import annotations

from typing import Protocol


# ══════════════════════════════════════════════════════════════
# BLOCK HEIGHT PROTOCOL
# ══════════════════════════════════════════════════════════════

class BlockHeightSource(Protocol):
    """Injectable block height context."""

    def current_height(self) -> int:
        """Return the height of the block currently being processed."""
        ...  # pragma: no cover


def _validate_height(height: int, field_name: str) -> None:
    if isinstance(height, bool) or not isinstance(height, int):
        raise TypeError(f"{field_name} must be int, got {type(height).__name__}.")
    if height < 0:
        raise ValueError(f"{field_name} must be >= 0, got {height}.")


# ══════════════════════════════════════════════════════════════
# IMPLEMENTATIONS
# ══════════════════════════════════════════════════════════════

class FixedBlockHeight:
    """
    Test source — returns the same height until advanced.

    Usage:
        blocks = FixedBlockHeight(1000)
        assert blocks.current_height() == 1000
    """

    def __init__(self, height: int) -> None:
        _validate_height(height, "height")
        self._height = height

    def current_height(self) -> int:
        return self._height

    def advance(self, blocks: int = 1) -> None:
        """Move the fixed height forward (multi-step test scenarios)."""
        if isinstance(blocks, bool) or not isinstance(blocks, int) or blocks <= 0:
            raise ValueError("blocks must be a positive int.")
        self._height += blocks


class SequentialBlockHeight:
    """
    Emulated chain — every read mines one block.

    Used by the dev HTTP adapter where no real chain is attached,
    so consecutive writes land in strictly increasing blocks.
    """

    def __init__(self, start: int = 0) -> None:
        _validate_height(start, "start")
        self._next = start

    def current_height(self) -> int:
        height = self._next
        self._next += 1
        return height
