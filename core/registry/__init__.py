"""
CVR Core Registry — Public API
=================================
Business registration, authority-gated verification, queries.
"""

from core.registry.errors import RegistryInvariantError
from core.registry.events import (
    ALL_EVENT_TYPES,
    BUSINESS_REGISTERED_V1,
    BUSINESS_VERIFIED_V1,
)
from core.registry.invariants import assert_registry_invariants
from core.registry.models import (
    Business,
    BusinessId,
    Identity,
    RegistrySnapshot,
    VerificationStatus,
)
from core.registry.rejection import RegistryReasonCode, RejectionReason
from core.registry.result import RegistryResult
from core.registry.service import BusinessRegistry

__all__ = [
    "Business",
    "BusinessId",
    "Identity",
    "VerificationStatus",
    "RegistrySnapshot",
    "BusinessRegistry",
    "RegistryResult",
    "RejectionReason",
    "RegistryReasonCode",
    "RegistryInvariantError",
    "assert_registry_invariants",
    "BUSINESS_REGISTERED_V1",
    "BUSINESS_VERIFIED_V1",
    "ALL_EVENT_TYPES",
]
