"""
CVR Core Config — Public API
===============================
Deployment-configurable registry parameters.
Doctrine: No hardcoded authority in registry logic.
"""

from core.config.registry import (
    DEFAULT_GENESIS_BLOCK_HEIGHT,
    RegistryConfig,
)

__all__ = [
    "RegistryConfig",
    "DEFAULT_GENESIS_BLOCK_HEIGHT",
]
