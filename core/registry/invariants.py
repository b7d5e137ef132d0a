"""
CVR Core Registry — Invariant Checks
=======================================
Each function verifies one data-model law against a snapshot.
If any check fails → RegistryInvariantError is raised.

These checks do NOT:
- Repair anything
- Touch the live registry (they read a snapshot)
- Silence failures
"""

import logging

from core.registry.errors import RegistryInvariantError
from core.registry.models import RegistrySnapshot

logger = logging.getLogger("cvr.bootstrap")


# ══════════════════════════════════════════════════════════════
# CHECK 1: Owner Index Consistency
# ══════════════════════════════════════════════════════════════

def check_owner_index(snapshot: RegistrySnapshot) -> None:
    """
    Every owner entry points at an existing business owned by that key,
    and every business is reachable from its owner.
    """
    businesses = snapshot.business_map()

    for owner, business_id in snapshot.business_owners.items():
        business = businesses.get(business_id)
        if business is None:
            raise RegistryInvariantError(
                invariant="OWNER_INDEX",
                detail=f"Owner {owner!r} maps to missing business {business_id}.",
            )
        if business.owner != owner:
            raise RegistryInvariantError(
                invariant="OWNER_INDEX",
                detail=(
                    f"Owner {owner!r} maps to business {business_id}, "
                    f"which is owned by {business.owner!r}."
                ),
            )

    for business_id, business in businesses.items():
        if snapshot.business_owners.get(business.owner) != business_id:
            raise RegistryInvariantError(
                invariant="OWNER_INDEX",
                detail=f"Business {business_id} is not indexed under its owner.",
            )

    logger.info("✓ Owner index consistent.")


# ══════════════════════════════════════════════════════════════
# CHECK 2: Id Counter Ahead Of All Ids
# ══════════════════════════════════════════════════════════════

def check_id_counter(snapshot: RegistrySnapshot) -> None:
    for business_id, _ in snapshot.businesses:
        if business_id < 1:
            raise RegistryInvariantError(
                invariant="ID_COUNTER",
                detail=f"Business id {business_id} is below 1.",
            )
        if business_id >= snapshot.next_business_id:
            raise RegistryInvariantError(
                invariant="ID_COUNTER",
                detail=(
                    f"Business id {business_id} is not below "
                    f"next_business_id {snapshot.next_business_id}."
                ),
            )

    # Ids are allocated densely and nothing is ever deleted.
    assigned = sorted(business_id for business_id, _ in snapshot.businesses)
    expected = list(range(1, snapshot.next_business_id))
    if assigned != expected:
        missing = sorted(set(expected) - set(assigned))
        raise RegistryInvariantError(
            invariant="ID_COUNTER",
            detail=f"Business ids have gaps; missing {missing}.",
        )

    logger.info("✓ Business ids dense and below the id counter.")


# ══════════════════════════════════════════════════════════════
# CHECK 3: One Business Per Owner
# ══════════════════════════════════════════════════════════════

def check_single_business_per_owner(snapshot: RegistrySnapshot) -> None:
    seen = {}
    for business_id, business in snapshot.businesses:
        if business.owner in seen:
            raise RegistryInvariantError(
                invariant="SINGLE_BUSINESS_PER_OWNER",
                detail=(
                    f"Owner {business.owner!r} owns businesses "
                    f"{seen[business.owner]} and {business_id}."
                ),
            )
        seen[business.owner] = business_id

    logger.info("✓ One business per owner.")


# ══════════════════════════════════════════════════════════════
# RUN ALL
# ══════════════════════════════════════════════════════════════

ALL_CHECKS = (
    check_single_business_per_owner,
    check_owner_index,
    check_id_counter,
)


def assert_registry_invariants(snapshot: RegistrySnapshot) -> None:
    for check in ALL_CHECKS:
        check(snapshot)
