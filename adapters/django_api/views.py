"""
CVR Django Adapter Views
========================
Pass-through HTTP views over core/http_api handlers.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt

from adapters.django_api.wiring import build_dependencies
from core.http_api.contracts import (
    BusinessLookupRequest,
    OwnerLookupRequest,
    RegisterBusinessHttpRequest,
    VerifyBusinessHttpRequest,
)
from core.http_api.errors import (
    INVALID_REQUEST,
    METHOD_NOT_ALLOWED,
    error_response,
    http_status_for,
)
from core.http_api.handlers import (
    get_business,
    get_business_verified,
    get_owner_business,
    get_registry_snapshot,
    post_business_register,
    post_business_verify,
)

logger = logging.getLogger("cvr.http")

CALLER_HEADER = "X-Caller-Id"


def _json_error(code: str, message: str) -> JsonResponse:
    payload = error_response(code=code, message=message, details={})
    return JsonResponse(payload, status=http_status_for(payload))


def _json_payload(payload: dict[str, Any]) -> JsonResponse:
    return JsonResponse(payload, status=http_status_for(payload))


def _invalid_request(request: HttpRequest, exc: Exception) -> JsonResponse:
    logger.warning(f"Invalid request to {request.path}: {exc}")
    return _json_error(INVALID_REQUEST, str(exc))


def _method_not_allowed() -> JsonResponse:
    return _json_error(
        METHOD_NOT_ALLOWED,
        "Method not allowed for this endpoint.",
    )


def _parse_json_body(request: HttpRequest) -> dict[str, Any]:
    if not request.body:
        return {}
    try:
        parsed = json.loads(request.body.decode("utf-8"))
    except Exception as exc:
        raise ValueError("Request body must be valid JSON.") from exc
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object.")
    return parsed


def _caller_from_request(request: HttpRequest) -> str:
    caller = request.headers.get(CALLER_HEADER, "").strip()
    if not caller:
        raise ValueError(f"{CALLER_HEADER} header is required.")
    return caller


# ── Writes ────────────────────────────────────────────────────

@csrf_exempt
def register_business_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    try:
        body = _parse_json_body(request)
        contract = RegisterBusinessHttpRequest(
            caller=_caller_from_request(request),
            name=body["name"],
        )
    except (ValueError, KeyError) as exc:
        return _invalid_request(request, exc)
    return _json_payload(post_business_register(contract, build_dependencies()))


@csrf_exempt
def verify_business_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    try:
        body = _parse_json_body(request)
        contract = VerifyBusinessHttpRequest(
            caller=_caller_from_request(request),
            business_id=body["business_id"],
            score=body["score"],
        )
    except (ValueError, KeyError) as exc:
        return _invalid_request(request, exc)
    return _json_payload(post_business_verify(contract, build_dependencies()))


# ── Reads ─────────────────────────────────────────────────────

def business_detail_view(request: HttpRequest, business_id: int) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    contract = BusinessLookupRequest(business_id=business_id)
    return _json_payload(get_business(contract, build_dependencies()))


def business_verified_view(request: HttpRequest, business_id: int) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    contract = BusinessLookupRequest(business_id=business_id)
    return _json_payload(get_business_verified(contract, build_dependencies()))


def owner_business_view(request: HttpRequest, owner: str) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    try:
        contract = OwnerLookupRequest(owner=owner)
    except ValueError as exc:
        return _invalid_request(request, exc)
    return _json_payload(get_owner_business(contract, build_dependencies()))


def registry_snapshot_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    return _json_payload(get_registry_snapshot(build_dependencies()))
