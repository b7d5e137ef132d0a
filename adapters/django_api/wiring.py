"""
CVR Django Adapter Wiring
=========================
Constructs HttpApiDependencies for local/staging live runs.

This module is adapter-only glue:
- no core contract changes
- registry parameters come from settings.CVR_REGISTRY
- in-memory registry over an emulated block height
"""

from __future__ import annotations

import logging
import threading

from django.conf import settings

from core.blocks.height import SequentialBlockHeight
from core.config.registry import RegistryConfig
from core.http_api.dependencies import HttpApiDependencies
from core.registry.service import BusinessRegistry

logger = logging.getLogger("cvr.http")

_DEPENDENCIES_LOCK = threading.Lock()
_DEPENDENCIES: HttpApiDependencies | None = None
_EVENT_LOG: _InMemoryEventLog | None = None


class _InMemoryEventLog:
    """Adapter-level event log standing in for a persistence collaborator."""

    def __init__(self):
        self._events: list[dict] = []
        self._lock = threading.Lock()

    def __call__(self, event: dict) -> None:
        with self._lock:
            self._events.append(dict(event))

    def all_events(self) -> tuple[dict, ...]:
        with self._lock:
            return tuple(self._events)


def load_registry_config() -> RegistryConfig:
    return RegistryConfig.from_mapping(getattr(settings, "CVR_REGISTRY", {}))


def build_registry(config: RegistryConfig, event_sink=None) -> BusinessRegistry:
    return BusinessRegistry(
        authority=config.authority,
        block_height=SequentialBlockHeight(start=config.genesis_block_height),
        event_sink=event_sink,
    )


def build_dependencies() -> HttpApiDependencies:
    global _DEPENDENCIES, _EVENT_LOG
    with _DEPENDENCIES_LOCK:
        if _DEPENDENCIES is None:
            config = load_registry_config()
            _EVENT_LOG = _InMemoryEventLog()
            _DEPENDENCIES = HttpApiDependencies(
                registry=build_registry(config, event_sink=_EVENT_LOG),
            )
            logger.info(
                f"Registry wired (authority: {config.authority!r}, "
                f"genesis block: {config.genesis_block_height})"
            )
        return _DEPENDENCIES


def reset_dependencies() -> None:
    """Drop the process registry (tests and dev reloads only)."""
    global _DEPENDENCIES, _EVENT_LOG
    with _DEPENDENCIES_LOCK:
        _DEPENDENCIES = None
        _EVENT_LOG = None


def recorded_events() -> tuple[dict, ...]:
    """Events committed by the process registry, oldest first."""
    with _DEPENDENCIES_LOCK:
        event_log = _EVENT_LOG
    if event_log is None:
        return ()
    return event_log.all_events()
