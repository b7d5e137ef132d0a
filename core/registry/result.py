"""
CVR Core Registry — Operation Result
=======================================
Every registry write produces exactly one result. No exceptions.

ACCEPTED → the state change was applied; value holds the return.
REJECTED → nothing changed; reason is mandatory.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from core.registry.rejection import RejectionReason

T = TypeVar("T")


@dataclass(frozen=True)
class RegistryResult(Generic[T]):
    """
    Invariants:
        - rejected + reason is None → ValueError
        - accepted + reason is not None → ValueError
        - rejected + value is not None → ValueError
    """

    accepted: bool
    value: Optional[T] = None
    reason: Optional[RejectionReason] = None

    def __post_init__(self):
        if not isinstance(self.accepted, bool):
            raise ValueError("accepted must be a bool.")

        if not self.accepted and self.reason is None:
            raise ValueError(
                "Rejected result must include a RejectionReason. "
                "No silent rejections allowed."
            )

        if self.accepted and self.reason is not None:
            raise ValueError("Accepted result must NOT include a RejectionReason.")

        if not self.accepted and self.value is not None:
            raise ValueError("Rejected result must NOT carry a value.")

        if self.reason is not None and not isinstance(self.reason, RejectionReason):
            raise ValueError("reason must be RejectionReason.")

    @classmethod
    def ok(cls, value: Optional[T] = None) -> RegistryResult[T]:
        return cls(accepted=True, value=value)

    @classmethod
    def rejected(cls, reason: RejectionReason) -> RegistryResult[T]:
        return cls(accepted=False, reason=reason)

    @property
    def is_rejected(self) -> bool:
        return not self.accepted

    @property
    def code(self) -> Optional[str]:
        """Rejection code, or None when accepted."""
        return self.reason.code if self.reason is not None else None

    def to_dict(self) -> dict:
        if self.accepted:
            return {"accepted": True, "value": self.value}
        return {"accepted": False, "reason": self.reason.to_dict()}
