"""In-memory store registry.

Owns the mapping from store id to :class:`Store` and the id counter. The
registry does no authorization of its own; callers that need admin gating
go through :class:`storeverify.service.StoreVerificationService`.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from typing import Optional

from storeverify.errors import StoreAlreadyExists, StoreNotFound
from storeverify.identity import Principal
from storeverify.registry.models import Store

logger = logging.getLogger(__name__)


class Registry:
    """Authoritative mapping of store ids to store records."""

    def __init__(
        self,
        stores: Optional[dict[int, Store]] = None,
        next_id: int = 0,
    ) -> None:
        self._lock = threading.RLock()
        self._stores: dict[int, Store] = {}
        self._next_id = 0
        self._load(stores or {}, next_id)

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._stores)

    def __contains__(self, store_id: object) -> bool:
        return store_id in self._stores

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def register(self, name: str, address: str, owner: Principal) -> int:
        """Create a new unverified store owned by ``owner`` and return its id.

        Raises ``StoreAlreadyExists`` if the next id is somehow taken; the
        counter and the mapping are left untouched in that case.
        """
        with self._lock:
            store_id = self._next_id
            if store_id in self._stores:
                raise StoreAlreadyExists(store_id)

            self._stores[store_id] = Store(
                id=store_id,
                name=name,
                address=address,
                owner=owner,
            )
            self._next_id += 1

        logger.info("registered store %d for owner %s", store_id, owner)
        return store_id

    def get(self, store_id: int) -> Optional[Store]:
        """Return the store at ``store_id``, or None if it was never registered."""
        return self._stores.get(store_id)

    def is_verified(self, store_id: int) -> bool:
        """Return the verified flag of a store.

        Unlike :meth:`get`, a missing store is an error here.
        """
        store = self._stores.get(store_id)
        if store is None:
            raise StoreNotFound(store_id)
        return store.verified

    def mark_verified(self, store_id: int) -> None:
        """Set the verified flag. Already-verified stores are left as they are."""
        with self._lock:
            store = self._stores.get(store_id)
            if store is None:
                raise StoreNotFound(store_id)
            if store.verified:
                return
            self._stores[store_id] = dataclasses.replace(store, verified=True)

        logger.info("store %d marked verified", store_id)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def snapshot(self) -> dict:
        """Return a JSON-ready copy of the registry state."""
        with self._lock:
            return {
                "next_id": self._next_id,
                "stores": {
                    str(store_id): store.to_dict()
                    for store_id, store in self._stores.items()
                },
            }

    def restore(self, data: dict) -> None:
        """Replace the registry state with a snapshot from :meth:`snapshot`."""
        stores = {
            int(key): Store.from_dict(value)
            for key, value in data.get("stores", {}).items()
        }
        with self._lock:
            self._load(stores, int(data.get("next_id", 0)))

    @classmethod
    def from_snapshot(cls, data: dict) -> Registry:
        registry = cls()
        registry.restore(data)
        return registry

    def _load(self, stores: dict[int, Store], next_id: int) -> None:
        if next_id < 0:
            raise ValueError(f"next_id must be non-negative, got {next_id}")
        for store_id, store in stores.items():
            if store.id != store_id:
                raise ValueError(f"Store keyed {store_id} carries id {store.id}")
            if store_id < 0 or store_id >= next_id:
                raise ValueError(
                    f"Store id {store_id} is outside the allocated range [0, {next_id})"
                )
        self._stores = dict(stores)
        self._next_id = next_id
