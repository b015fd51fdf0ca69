"""Orchestration layer: the five public registry operations.

Every operation takes the caller's principal explicitly where authorization
matters. Authorization is checked here, never inside the registry, and it is
checked before existence: a non-admin asking to verify a missing store gets
``NotAuthorized``, not ``StoreNotFound``.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from storeverify.auth.authority import AdminAuthority
from storeverify.auth.permissions import require_admin
from storeverify.config import DEFAULT_GENESIS_ADMIN, Settings
from storeverify.errors import NotAuthorized
from storeverify.identity import Principal
from storeverify.registry.models import Store
from storeverify.registry.store_registry import Registry
from storeverify.storage import StateFile, StateFileError

logger = logging.getLogger(__name__)


class StoreVerificationService:
    """Composes a :class:`Registry` and an :class:`AdminAuthority`.

    All operations are serialized through one lock, so each one runs to
    completion in isolation. When a :class:`StateFile` is attached, state is
    saved after every successful mutation; if saving fails the mutation is
    rolled back and the ``OSError`` propagates.
    """

    def __init__(
        self,
        registry: Optional[Registry] = None,
        authority: Optional[AdminAuthority] = None,
        state_file: Optional[StateFile] = None,
    ) -> None:
        self.registry = registry if registry is not None else Registry()
        self.authority = (
            authority if authority is not None else AdminAuthority(DEFAULT_GENESIS_ADMIN)
        )
        self.state_file = state_file
        self._lock = threading.RLock()

    @classmethod
    def from_settings(cls, settings: Settings) -> StoreVerificationService:
        """Build a service, resuming from the configured state file if it exists."""
        state_file = StateFile(settings.state_file) if settings.state_file else None
        snapshot = state_file.load() if state_file else None

        if snapshot is None:
            return cls(
                authority=AdminAuthority(settings.genesis_admin),
                state_file=state_file,
            )

        logger.debug("resuming from %s", state_file.path)
        try:
            registry = Registry.from_snapshot(snapshot)
        except ValueError as e:
            raise StateFileError(f"Inconsistent state file {state_file.path}: {e}") from e
        return cls(
            registry=registry,
            authority=AdminAuthority(snapshot["admin"]),
            state_file=state_file,
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def register_store(self, name: str, address: str, caller: Principal) -> int:
        """Register a store owned by ``caller`` and return its id."""
        with self._lock:
            before = self._snapshot()
            store_id = self.registry.register(name, address, caller)
            self._commit(before)
            return store_id

    def verify_store(self, store_id: int, caller: Principal) -> None:
        """Mark a store verified. Only the current admin may do this."""
        with self._lock, self.authority.lock:
            try:
                require_admin(self.authority, caller)
            except NotAuthorized:
                logger.warning("verify of store %s by non-admin %s rejected", store_id, caller)
                raise
            before = self._snapshot()
            self.registry.mark_verified(store_id)
            self._commit(before)

    def get_store(self, store_id: int) -> Optional[Store]:
        """Return the store, or None if it does not exist."""
        return self.registry.get(store_id)

    def is_store_verified(self, store_id: int) -> bool:
        """Return the verified flag; raises ``StoreNotFound`` for missing stores."""
        return self.registry.is_verified(store_id)

    def set_admin(self, new_admin: Principal, caller: Principal) -> None:
        """Transfer admin authority; only the current admin may call this."""
        with self._lock:
            before = self._snapshot()
            self.authority.transfer(new_admin, caller)
            self._commit(before)

    def current_admin(self) -> Principal:
        return self.authority.current_admin()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _snapshot(self) -> dict:
        data = self.registry.snapshot()
        data["admin"] = self.authority.current_admin()
        return data

    def _commit(self, before: dict) -> None:
        if self.state_file is None:
            return
        try:
            self.state_file.save(self._snapshot())
        except OSError:
            logger.error("could not write %s, rolling back", self.state_file.path)
            self.registry.restore(before)
            self.authority.restore(before["admin"])
            raise
