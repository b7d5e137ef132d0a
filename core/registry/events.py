"""
CVR Core Registry — Event Types
==================================
Events emitted after each ACCEPTED write.
Rejected operations emit nothing.
"""

from core.registry.models import Business, BusinessId, Identity, VerificationStatus

# ── Event Types ───────────────────────────────────────────────

BUSINESS_REGISTERED_V1 = "registry.business.registered.v1"
BUSINESS_VERIFIED_V1 = "registry.business.verified.v1"

ALL_EVENT_TYPES = (
    BUSINESS_REGISTERED_V1,
    BUSINESS_VERIFIED_V1,
)


# ── Payload Builders ──────────────────────────────────────────

def business_registered_event(business_id: BusinessId, business: Business) -> dict:
    return {
        "event_type": BUSINESS_REGISTERED_V1,
        "payload": {
            "business_id": business_id,
            "owner": business.owner,
            "name": business.name,
            "registration_block": business.registration_block,
        },
    }


def business_verified_event(
    business_id: BusinessId,
    verifier: Identity,
    business: Business,
    previous_status: VerificationStatus,
) -> dict:
    return {
        "event_type": BUSINESS_VERIFIED_V1,
        "payload": {
            "business_id": business_id,
            "verifier": verifier,
            "circular_score": business.circular_score,
            "previous_status": previous_status.value,
        },
    }
