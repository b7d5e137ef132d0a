"""
CVR Core Registry — Rejection Model
======================================
Structured reasons for denied registry operations.

A rejection is a RESULT, not an exception. Every rejection is:
- Deterministic (same state + same input → same rejection)
- Auditable (code + message + policy)
- Machine-readable (code)
- Human-readable (message)
"""

from __future__ import annotations

from dataclasses import dataclass


# ══════════════════════════════════════════════════════════════
# REJECTION REASON (frozen explanation structure)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class RejectionReason:
    """
    Structured reason for a rejected registry operation.

    Fields:
        code:        Machine-readable code (see RegistryReasonCode).
        message:     Human-readable explanation.
        policy_name: Name of the policy that caused rejection.
    """

    code: str
    message: str
    policy_name: str

    def __post_init__(self):
        if not self.code or not isinstance(self.code, str):
            raise ValueError("code must be a non-empty string.")

        if not self.message or not isinstance(self.message, str):
            raise ValueError("message must be a non-empty string.")

        if not self.policy_name or not isinstance(self.policy_name, str):
            raise ValueError("policy_name must be a non-empty string.")

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "policy_name": self.policy_name,
        }


# ══════════════════════════════════════════════════════════════
# REGISTRY REJECTION CODES
# ══════════════════════════════════════════════════════════════

class RegistryReasonCode:
    """
    The complete registry error taxonomy.

    None of these are retryable as-is; the caller decides
    whether to resubmit with corrected arguments.
    """

    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"

    ALL = frozenset({ALREADY_REGISTERED, UNAUTHORIZED, NOT_FOUND})
