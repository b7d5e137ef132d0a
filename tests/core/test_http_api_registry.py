"""
Tests for core.http_api — framework-agnostic registry handlers.
"""

import pytest

from core.blocks.height import FixedBlockHeight
from core.http_api import (
    BusinessLookupRequest,
    HttpApiDependencies,
    OwnerLookupRequest,
    RegisterBusinessHttpRequest,
    VerifyBusinessHttpRequest,
    get_business,
    get_business_verified,
    get_owner_business,
    get_registry_snapshot,
    http_status_for,
    post_business_register,
    post_business_verify,
)
from core.registry.service import BusinessRegistry


AUTHORITY = "authority"
OWNER_A = "owner-a"


@pytest.fixture
def deps():
    return HttpApiDependencies(
        registry=BusinessRegistry(AUTHORITY, FixedBlockHeight(1000)),
    )


def _register(deps, caller=OWNER_A, name="EcoRetail Store"):
    return post_business_register(
        RegisterBusinessHttpRequest(caller=caller, name=name), deps
    )


class TestContracts:
    def test_register_requires_caller(self):
        with pytest.raises(ValueError, match="caller"):
            RegisterBusinessHttpRequest(caller="", name="X")

    def test_verify_rejects_bool_score(self):
        with pytest.raises(ValueError, match="score"):
            VerifyBusinessHttpRequest(caller=AUTHORITY, business_id=1, score=True)

    def test_lookup_requires_int(self):
        with pytest.raises(ValueError, match="business_id"):
            BusinessLookupRequest(business_id="1")

    def test_dependencies_require_registry(self):
        with pytest.raises(ValueError, match="registry"):
            HttpApiDependencies(registry=object())


class TestWriteHandlers:
    def test_register(self, deps):
        payload = _register(deps)
        assert payload == {"ok": True, "data": {"business_id": 1}}
        assert http_status_for(payload) == 200

    def test_register_twice(self, deps):
        _register(deps)
        payload = _register(deps, name="Other")

        assert payload["ok"] is False
        assert payload["error"]["code"] == "ALREADY_REGISTERED"
        assert payload["error"]["details"]["policy_name"] == "validate_owner_unregistered"
        assert http_status_for(payload) == 409

    def test_verify(self, deps):
        _register(deps)
        payload = post_business_verify(
            VerifyBusinessHttpRequest(caller=AUTHORITY, business_id=1, score=85), deps
        )

        assert payload["ok"] is True
        assert payload["data"]["verification_status"] == "VERIFIED"
        assert payload["data"]["circular_score"] == 85
        assert payload["data"]["business_id"] == 1

    def test_verify_unauthorized(self, deps):
        _register(deps)
        payload = post_business_verify(
            VerifyBusinessHttpRequest(caller=OWNER_A, business_id=1, score=85), deps
        )
        assert payload["error"]["code"] == "UNAUTHORIZED"
        assert payload["error"]["details"]["business_id"] == 1
        assert http_status_for(payload) == 403

    def test_verify_missing(self, deps):
        payload = post_business_verify(
            VerifyBusinessHttpRequest(caller=AUTHORITY, business_id=99, score=10), deps
        )
        assert payload["error"]["code"] == "NOT_FOUND"
        assert http_status_for(payload) == 404


class TestReadHandlers:
    def test_get_business(self, deps):
        _register(deps)
        payload = get_business(BusinessLookupRequest(business_id=1), deps)
        assert payload["data"] == {
            "business_id": 1,
            "owner": OWNER_A,
            "name": "EcoRetail Store",
            "verification_status": "PENDING",
            "circular_score": 0,
            "registration_block": 1000,
        }

    def test_get_missing_business(self, deps):
        payload = get_business(BusinessLookupRequest(business_id=999), deps)
        assert payload["error"]["code"] == "NOT_FOUND"

    def test_verified_flag(self, deps):
        _register(deps)
        payload = get_business_verified(BusinessLookupRequest(business_id=1), deps)
        assert payload["data"] == {"business_id": 1, "verified": False}

    def test_verified_flag_unknown_business(self, deps):
        payload = get_business_verified(BusinessLookupRequest(business_id=999), deps)
        assert payload == {"ok": True, "data": {"business_id": 999, "verified": False}}

    def test_owner_business(self, deps):
        _register(deps)
        payload = get_owner_business(OwnerLookupRequest(owner=OWNER_A), deps)
        assert payload["data"] == {"owner": OWNER_A, "business_id": 1}

    def test_owner_without_business(self, deps):
        payload = get_owner_business(OwnerLookupRequest(owner="nobody"), deps)
        assert payload["data"]["business_id"] is None

    def test_snapshot(self, deps):
        _register(deps)
        payload = get_registry_snapshot(deps)
        assert payload["data"]["next_business_id"] == 2
        assert payload["data"]["business_owners"] == {OWNER_A: 1}


class TestStatusMapping:
    def test_unknown_error_code_is_bad_request(self):
        assert http_status_for({"ok": False, "error": {"code": "WHAT"}}) == 400
