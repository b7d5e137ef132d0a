"""
CVR Core Registry — Business Record Models
=============================================
Canonical business record and registry snapshot.

Records are frozen. Verification produces a NEW record;
the registry swaps it in under its lock.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Hashable, Tuple

# Registry-assigned, starts at 1, never reused.
BusinessId = int

# Opaque caller / owner / authority token. Only equality and hashing are used.
Identity = Hashable


def is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def require_identity(value: Any, field_name: str) -> None:
    """Identities must be usable as mapping keys."""
    if value is None:
        raise ValueError(f"{field_name} must not be None.")
    try:
        hash(value)
    except TypeError as exc:
        raise TypeError(f"{field_name} must be hashable.") from exc


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ══════════════════════════════════════════════════════════════
# VERIFICATION STATUS
# ══════════════════════════════════════════════════════════════

class VerificationStatus(Enum):
    """PENDING → VERIFIED. There is no way back."""
    PENDING = "PENDING"
    VERIFIED = "VERIFIED"


# ══════════════════════════════════════════════════════════════
# BUSINESS RECORD
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Business:
    """
    One registered entity.

    Fields:
        owner:               Registrant identity. Immutable.
        name:                Free-form text, not validated. Immutable.
        registration_block:  Block height at registration. Immutable.
        verification_status: PENDING until the authority verifies.
        circular_score:      0 until verified; last score the authority set.
    """

    owner: Identity
    name: str
    registration_block: int
    verification_status: VerificationStatus = VerificationStatus.PENDING
    circular_score: int = 0

    def __post_init__(self):
        require_identity(self.owner, "owner")
        if not isinstance(self.name, str):
            raise ValueError("name must be a string.")
        if not _is_int(self.registration_block) or self.registration_block < 0:
            raise ValueError("registration_block must be a non-negative int.")
        if not isinstance(self.verification_status, VerificationStatus):
            raise ValueError(
                "verification_status must be VerificationStatus, "
                f"got {type(self.verification_status).__name__}."
            )
        if not _is_int(self.circular_score):
            raise ValueError("circular_score must be int.")

    @property
    def is_verified(self) -> bool:
        return self.verification_status == VerificationStatus.VERIFIED

    def verified(self, score: int) -> Business:
        """
        Return a new record marked VERIFIED with the given score.
        Owner, name and registration block carry over unchanged.
        """
        return Business(
            owner=self.owner,
            name=self.name,
            registration_block=self.registration_block,
            verification_status=VerificationStatus.VERIFIED,
            circular_score=score,
        )

    def to_dict(self) -> dict:
        return {
            "owner": self.owner,
            "name": self.name,
            "verification_status": self.verification_status.value,
            "circular_score": self.circular_score,
            "registration_block": self.registration_block,
        }


# ══════════════════════════════════════════════════════════════
# REGISTRY SNAPSHOT (read-only export)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class RegistrySnapshot:
    """
    Point-in-time copy of the whole registry state.

    Handed to persistence collaborators and to the invariant
    checks. Holding a snapshot never blocks the live registry.
    """

    authority: Identity
    next_business_id: BusinessId
    businesses: Tuple[Tuple[BusinessId, Business], ...] = ()
    business_owners: Dict[Identity, BusinessId] = field(default_factory=dict)

    def business_map(self) -> Dict[BusinessId, Business]:
        return dict(self.businesses)

    def to_dict(self) -> dict:
        return {
            "authority": self.authority,
            "next_business_id": self.next_business_id,
            "businesses": {
                str(business_id): business.to_dict()
                for business_id, business in self.businesses
            },
            "business_owners": {
                str(owner): business_id
                for owner, business_id in self.business_owners.items()
            },
        }
