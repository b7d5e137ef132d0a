"""
Tests for core.registry.invariants — snapshot self-checks.
"""

import pytest

from core.registry.errors import RegistryInvariantError
from core.registry.invariants import (
    assert_registry_invariants,
    check_id_counter,
    check_owner_index,
    check_single_business_per_owner,
)
from core.registry.models import Business, RegistrySnapshot


def _biz(owner):
    return Business(owner=owner, name=f"{owner} co", registration_block=10)


class TestInvariantChecks:
    def test_consistent_snapshot_passes(self):
        snapshot = RegistrySnapshot(
            authority="auth",
            next_business_id=3,
            businesses=((1, _biz("a")), (2, _biz("b"))),
            business_owners={"a": 1, "b": 2},
        )
        assert_registry_invariants(snapshot)

    def test_empty_snapshot_passes(self):
        assert_registry_invariants(RegistrySnapshot(authority="auth", next_business_id=1))

    def test_owner_pointing_at_missing_business(self):
        snapshot = RegistrySnapshot(
            authority="auth",
            next_business_id=2,
            business_owners={"a": 1},
        )
        with pytest.raises(RegistryInvariantError, match="OWNER_INDEX"):
            check_owner_index(snapshot)

    def test_owner_pointing_at_foreign_business(self):
        snapshot = RegistrySnapshot(
            authority="auth",
            next_business_id=2,
            businesses=((1, _biz("b")),),
            business_owners={"a": 1},
        )
        with pytest.raises(RegistryInvariantError, match="owned by"):
            check_owner_index(snapshot)

    def test_unindexed_business(self):
        snapshot = RegistrySnapshot(
            authority="auth",
            next_business_id=2,
            businesses=((1, _biz("a")),),
        )
        with pytest.raises(RegistryInvariantError, match="not indexed"):
            check_owner_index(snapshot)

    def test_counter_behind_ids(self):
        snapshot = RegistrySnapshot(
            authority="auth",
            next_business_id=2,
            businesses=((2, _biz("a")),),
            business_owners={"a": 2},
        )
        with pytest.raises(RegistryInvariantError, match="ID_COUNTER"):
            check_id_counter(snapshot)

    def test_gap_in_ids(self):
        snapshot = RegistrySnapshot(
            authority="auth",
            next_business_id=4,
            businesses=((1, _biz("a")), (3, _biz("c"))),
            business_owners={"a": 1, "c": 3},
        )
        with pytest.raises(RegistryInvariantError, match=r"gaps; missing \[2\]"):
            check_id_counter(snapshot)

    def test_counter_ahead_of_missing_ids(self):
        snapshot = RegistrySnapshot(authority="auth", next_business_id=2)
        with pytest.raises(RegistryInvariantError, match="ID_COUNTER"):
            check_id_counter(snapshot)

    def test_owner_with_two_businesses(self):
        snapshot = RegistrySnapshot(
            authority="auth",
            next_business_id=3,
            businesses=((1, _biz("a")), (2, _biz("a"))),
            business_owners={"a": 2},
        )
        with pytest.raises(RegistryInvariantError, match="SINGLE_BUSINESS_PER_OWNER"):
            check_single_business_per_owner(snapshot)

    def test_error_carries_invariant(self):
        error = RegistryInvariantError(invariant="ID_COUNTER", detail="broken")
        assert error.invariant == "ID_COUNTER"
        assert error.detail == "broken"
        assert "CVR REGISTRY INVARIANT VIOLATED" in str(error)
