"""
CVR Django HTTP adapter.
Thin framework glue over core/http_api handlers.
"""

from adapters.django_api.wiring import (
    build_dependencies,
    build_registry,
    load_registry_config,
    recorded_events,
    reset_dependencies,
)

__all__ = [
    "build_dependencies",
    "build_registry",
    "load_registry_config",
    "recorded_events",
    "reset_dependencies",
]
