"""
CVR Core Config — Registry Configuration
===========================================
Doctrine: the authority is deployment data, not source code.
The hosting layer (Django settings, env) supplies a plain mapping;
this module validates it into a frozen RegistryConfig.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_GENESIS_BLOCK_HEIGHT = 0


@dataclass(frozen=True)
class RegistryConfig:
    """
    Deployment parameters for one registry instance.

    Fields:
        authority:             Identity allowed to verify businesses.
        genesis_block_height:  Height the emulated chain starts from
                               when no real chain is attached.
    """

    authority: str
    genesis_block_height: int = DEFAULT_GENESIS_BLOCK_HEIGHT

    def __post_init__(self) -> None:
        if not self.authority or not isinstance(self.authority, str):
            raise ValueError("authority must be a non-empty string.")
        if (
            isinstance(self.genesis_block_height, bool)
            or not isinstance(self.genesis_block_height, int)
            or self.genesis_block_height < 0
        ):
            raise ValueError(
                "genesis_block_height must be a non-negative int, "
                f"got {self.genesis_block_height!r}."
            )

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> RegistryConfig:
        """
        Build from a settings mapping such as ``settings.CVR_REGISTRY``.

        Keys: AUTHORITY (required), GENESIS_BLOCK_HEIGHT (int or digit string).
        """
        if "AUTHORITY" not in raw:
            raise ValueError("AUTHORITY is required in registry config.")

        authority = raw["AUTHORITY"]
        if isinstance(authority, str):
            authority = authority.strip()

        height = raw.get("GENESIS_BLOCK_HEIGHT", DEFAULT_GENESIS_BLOCK_HEIGHT)
        if isinstance(height, str):
            try:
                height = int(height.strip())
            except ValueError as exc:
                raise ValueError(
                    f"GENESIS_BLOCK_HEIGHT must be an integer, got {height!r}."
                ) from exc

        return cls(authority=authority, genesis_block_height=height)

    def to_dict(self) -> dict:
        return {
            "authority": self.authority,
            "genesis_block_height": self.genesis_block_height,
        }
