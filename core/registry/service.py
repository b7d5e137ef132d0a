"""
CVR Core Registry — Business Registry
========================================
The registry state machine: registration, authority-gated
verification and read-only queries.

Rules:
- One business per owner
- Ids start at 1, +1 per accepted registration, never reused
- Only the fixed authority verifies; re-verification overwrites the score
- Records are never deleted
- Every write either applies completely or not at all
- Rejections are returned, never raised

Thread-safe: one lock guards both maps and the id counter.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable, Dict, Optional

from core.blocks.height import BlockHeightSource
from core.registry.events import business_registered_event, business_verified_event
from core.registry.models import (
    Business,
    BusinessId,
    Identity,
    RegistrySnapshot,
    is_hashable,
    require_identity,
)
from core.registry.policies import (
    validate_business_exists,
    validate_caller_is_authority,
    validate_owner_unregistered,
)
from core.registry.result import RegistryResult

logger = logging.getLogger("cvr.registry")

EventSink = Callable[[dict], None]

FIRST_BUSINESS_ID: BusinessId = 1


class BusinessRegistry:
    """
    In-memory registry of businesses.

    Args:
        authority:    The only identity allowed to verify. Fixed for life.
        block_height: Source of the current block height for registrations.
        event_sink:   Optional callable receiving one event dict per
                      accepted write. Called under the registry lock, so
                      it must not call back into the registry.
    """

    def __init__(
        self,
        authority: Identity,
        block_height: BlockHeightSource,
        event_sink: Optional[EventSink] = None,
    ):
        require_identity(authority, "authority")
        if not callable(getattr(block_height, "current_height", None)):
            raise TypeError("block_height must provide current_height().")
        if event_sink is not None and not callable(event_sink):
            raise TypeError("event_sink must be callable.")

        self._authority = authority
        self._block_height = block_height
        self._event_sink = event_sink
        self._next_business_id: BusinessId = FIRST_BUSINESS_ID
        self._businesses: Dict[BusinessId, Business] = {}
        self._business_owners: Dict[Identity, BusinessId] = {}
        self._lock = Lock()

    @property
    def authority(self) -> Identity:
        return self._authority

    @property
    def business_count(self) -> int:
        with self._lock:
            return len(self._businesses)

    # ── Writes ────────────────────────────────────────────────

    def register(self, caller: Identity, name: str) -> RegistryResult[BusinessId]:
        """Register a business owned by ``caller``. Returns the new id."""
        require_identity(caller, "caller")
        if not isinstance(name, str):
            raise ValueError("name must be a string.")

        with self._lock:
            reason = validate_owner_unregistered(self._business_owners, caller)
            if reason is not None:
                logger.warning(f"Registration rejected: {reason.code} (caller: {caller!r})")
                return RegistryResult.rejected(reason)

            # Record is built before any state changes.
            business = Business(
                owner=caller,
                name=name,
                registration_block=self._block_height.current_height(),
            )
            business_id = self._next_business_id

            self._businesses[business_id] = business
            self._business_owners[caller] = business_id
            self._next_business_id = business_id + 1

            logger.info(
                f"Business registered: {business_id} (owner: {caller!r}, "
                f"block: {business.registration_block})"
            )
            self._emit(business_registered_event(business_id, business))

        return RegistryResult.ok(business_id)

    def verify(
        self,
        caller: Identity,
        business_id: BusinessId,
        score: int,
    ) -> RegistryResult[None]:
        """Mark a business VERIFIED with ``score``. Authority only."""
        if isinstance(score, bool) or not isinstance(score, int):
            raise TypeError(f"score must be int, got {type(score).__name__}.")

        with self._lock:
            reason = validate_caller_is_authority(self._authority, caller)
            if reason is None:
                reason = validate_business_exists(self._businesses, business_id)
            if reason is not None:
                logger.warning(
                    f"Verification rejected: {reason.code} "
                    f"(caller: {caller!r}, business: {business_id!r})"
                )
                return RegistryResult.rejected(reason)

            current = self._businesses[business_id]
            updated = current.verified(score)
            self._businesses[business_id] = updated

            logger.info(f"Business verified: {business_id} (score: {score})")
            self._emit(
                business_verified_event(
                    business_id, caller, updated, current.verification_status
                )
            )

        return RegistryResult.ok()

    # ── Queries ───────────────────────────────────────────────

    def get_business(self, business_id: BusinessId) -> Optional[Business]:
        if not is_hashable(business_id):
            return None
        with self._lock:
            return self._businesses.get(business_id)

    def is_verified(self, business_id: BusinessId) -> bool:
        """False for unknown ids."""
        business = self.get_business(business_id)
        return business is not None and business.is_verified

    def get_business_id_by_owner(self, owner: Identity) -> Optional[BusinessId]:
        if not is_hashable(owner):
            return None
        with self._lock:
            return self._business_owners.get(owner)

    def snapshot(self) -> RegistrySnapshot:
        """Consistent copy of the whole state."""
        with self._lock:
            return RegistrySnapshot(
                authority=self._authority,
                next_business_id=self._next_business_id,
                businesses=tuple(sorted(self._businesses.items())),
                business_owners=dict(self._business_owners),
            )

    # ── Internals ─────────────────────────────────────────────

    def _emit(self, event: dict) -> None:
        if self._event_sink is None:
            return
        try:
            self._event_sink(event)
        except Exception as exc:
            # State is already committed; a failing listener cannot undo it.
            logger.error(
                f"Event sink failed for {event['event_type']}: {exc}",
                exc_info=True,
            )
