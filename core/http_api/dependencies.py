"""
CVR HTTP API - Dependencies
===========================
Injected collaborators for handler wiring.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.registry.service import BusinessRegistry


@dataclass(frozen=True)
class HttpApiDependencies:
    registry: BusinessRegistry

    def __post_init__(self):
        if not isinstance(self.registry, BusinessRegistry):
            raise ValueError("registry must be BusinessRegistry.")
