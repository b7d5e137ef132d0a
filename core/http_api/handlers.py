"""
CVR HTTP API - Framework-Agnostic Handlers
==========================================
Pure handler functions over contracts and injected dependencies.
Every handler returns an ok/error envelope dict; none raise on
registry rejections.
"""

from __future__ import annotations

from typing import Any

from core.http_api.contracts import (
    BusinessLookupRequest,
    OwnerLookupRequest,
    RegisterBusinessHttpRequest,
    VerifyBusinessHttpRequest,
)
from core.http_api.dependencies import HttpApiDependencies
from core.http_api.errors import error_response, rejection_response, success_response
from core.registry.models import Business, BusinessId
from core.registry.rejection import RegistryReasonCode


def _serialize_business(business_id: BusinessId, business: Business) -> dict[str, Any]:
    data = business.to_dict()
    data["business_id"] = business_id
    return data


# ── Writes ────────────────────────────────────────────────────

def post_business_register(
    request: RegisterBusinessHttpRequest,
    dependencies: HttpApiDependencies,
) -> dict[str, Any]:
    result = dependencies.registry.register(request.caller, request.name)
    if result.is_rejected:
        return rejection_response(result.reason)
    return success_response({"business_id": result.value})


def post_business_verify(
    request: VerifyBusinessHttpRequest,
    dependencies: HttpApiDependencies,
) -> dict[str, Any]:
    registry = dependencies.registry
    result = registry.verify(request.caller, request.business_id, request.score)
    if result.is_rejected:
        return rejection_response(
            result.reason,
            extra_details={"business_id": request.business_id},
        )
    business = registry.get_business(request.business_id)
    return success_response(_serialize_business(request.business_id, business))


# ── Reads ─────────────────────────────────────────────────────

def get_business(
    request: BusinessLookupRequest,
    dependencies: HttpApiDependencies,
) -> dict[str, Any]:
    business = dependencies.registry.get_business(request.business_id)
    if business is None:
        return error_response(
            code=RegistryReasonCode.NOT_FOUND,
            message=f"Business {request.business_id} does not exist.",
            details={"business_id": request.business_id},
        )
    return success_response(_serialize_business(request.business_id, business))


def get_business_verified(
    request: BusinessLookupRequest,
    dependencies: HttpApiDependencies,
) -> dict[str, Any]:
    return success_response(
        {
            "business_id": request.business_id,
            "verified": dependencies.registry.is_verified(request.business_id),
        }
    )


def get_owner_business(
    request: OwnerLookupRequest,
    dependencies: HttpApiDependencies,
) -> dict[str, Any]:
    return success_response(
        {
            "owner": request.owner,
            "business_id": dependencies.registry.get_business_id_by_owner(
                request.owner
            ),
        }
    )


def get_registry_snapshot(dependencies: HttpApiDependencies) -> dict[str, Any]:
    return success_response(dependencies.registry.snapshot().to_dict())
