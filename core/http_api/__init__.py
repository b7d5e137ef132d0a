"""
CVR HTTP API - Public API
=========================
"""

from core.http_api.contracts import (
    BusinessLookupRequest,
    HttpApiErrorBody,
    HttpApiResponse,
    OwnerLookupRequest,
    RegisterBusinessHttpRequest,
    VerifyBusinessHttpRequest,
)
from core.http_api.dependencies import HttpApiDependencies
from core.http_api.errors import (
    error_response,
    http_status_for,
    map_rejection_reason,
    rejection_response,
    success_response,
)
from core.http_api.handlers import (
    get_business,
    get_business_verified,
    get_owner_business,
    get_registry_snapshot,
    post_business_register,
    post_business_verify,
)

__all__ = [
    "RegisterBusinessHttpRequest",
    "VerifyBusinessHttpRequest",
    "BusinessLookupRequest",
    "OwnerLookupRequest",
    "HttpApiErrorBody",
    "HttpApiResponse",
    "HttpApiDependencies",
    "error_response",
    "success_response",
    "map_rejection_reason",
    "rejection_response",
    "http_status_for",
    "post_business_register",
    "post_business_verify",
    "get_business",
    "get_business_verified",
    "get_owner_business",
    "get_registry_snapshot",
]
