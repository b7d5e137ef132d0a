"""
CVR Core Registry — Policies
===============================
Pure validation functions over registry state.
Return RejectionReason on failure, None on success.
"""

from __future__ import annotations

from typing import Mapping, Optional

from core.registry.models import Business, BusinessId, Identity, is_hashable
from core.registry.rejection import RegistryReasonCode, RejectionReason


# ══════════════════════════════════════════════════════════════
# REGISTRATION POLICIES
# ══════════════════════════════════════════════════════════════

def validate_owner_unregistered(
    business_owners: Mapping[Identity, BusinessId],
    caller: Identity,
) -> Optional[RejectionReason]:
    """One business per owner."""
    existing = business_owners.get(caller)
    if existing is not None:
        return RejectionReason(
            code=RegistryReasonCode.ALREADY_REGISTERED,
            message=f"Caller {caller!r} already owns business {existing}.",
            policy_name="validate_owner_unregistered",
        )
    return None


# ══════════════════════════════════════════════════════════════
# VERIFICATION POLICIES
# ══════════════════════════════════════════════════════════════

def validate_caller_is_authority(
    authority: Identity,
    caller: Identity,
) -> Optional[RejectionReason]:
    """Only the registry authority may verify."""
    if caller != authority:
        return RejectionReason(
            code=RegistryReasonCode.UNAUTHORIZED,
            message=f"Caller {caller!r} is not the registry authority.",
            policy_name="validate_caller_is_authority",
        )
    return None


def validate_business_exists(
    businesses: Mapping[BusinessId, Business],
    business_id: BusinessId,
) -> Optional[RejectionReason]:
    if not is_hashable(business_id) or business_id not in businesses:
        return RejectionReason(
            code=RegistryReasonCode.NOT_FOUND,
            message=f"Business {business_id!r} does not exist.",
            policy_name="validate_business_exists",
        )
    return None
