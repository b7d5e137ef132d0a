"""
CVR Core Blocks — Public API
==============================
Injected block height context for registry writes.
"""

from core.blocks.height import (
    BlockHeightSource,
    FixedBlockHeight,
    SequentialBlockHeight,
)

__all__ = [
    "BlockHeightSource",
    "FixedBlockHeight",
    "SequentialBlockHeight",
]
