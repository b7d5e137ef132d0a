"""
CVR HTTP API - Contracts
========================
Framework-agnostic request/response DTOs for registry endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


def _require_int(value: Any, field_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer.")


def _require_caller(value: Any, field_name: str = "caller") -> None:
    if not value or not isinstance(value, str):
        raise ValueError(f"{field_name} must be a non-empty string.")


@dataclass(frozen=True)
class RegisterBusinessHttpRequest:
    caller: str
    name: str

    def __post_init__(self):
        _require_caller(self.caller)
        if not isinstance(self.name, str):
            raise ValueError("name must be a string.")


@dataclass(frozen=True)
class VerifyBusinessHttpRequest:
    caller: str
    business_id: int
    score: int

    def __post_init__(self):
        _require_caller(self.caller)
        _require_int(self.business_id, "business_id")
        _require_int(self.score, "score")


@dataclass(frozen=True)
class BusinessLookupRequest:
    business_id: int

    def __post_init__(self):
        _require_int(self.business_id, "business_id")


@dataclass(frozen=True)
class OwnerLookupRequest:
    owner: str

    def __post_init__(self):
        _require_caller(self.owner, "owner")


@dataclass(frozen=True)
class HttpApiErrorBody:
    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details),
        }


@dataclass(frozen=True)
class HttpApiResponse:
    ok: bool
    data: Any = None
    error: Optional[HttpApiErrorBody] = None

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            return {"ok": True, "data": self.data}
        if self.error is None:
            raise ValueError("error must be set when ok is False.")
        return {"ok": False, "error": self.error.to_dict()}
