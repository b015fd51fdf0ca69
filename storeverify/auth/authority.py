"""Holder of the current admin identity.

Exactly one principal holds admin authority at any time. It starts as the
genesis admin and changes only through :meth:`AdminAuthority.transfer`,
called by the admin currently in office. No history of prior admins is kept.
"""

from __future__ import annotations

import logging
import threading

from storeverify.errors import NotAuthorized
from storeverify.identity import Principal

logger = logging.getLogger(__name__)


class AdminAuthority:
    """Single-admin authorization."""

    def __init__(self, admin: Principal) -> None:
        self.lock = threading.RLock()
        self._admin = admin

    def current_admin(self) -> Principal:
        return self._admin

    def authorize(self, caller: Principal) -> bool:
        """Return True iff ``caller`` is the current admin."""
        return caller == self._admin

    def transfer(self, new_admin: Principal, caller: Principal) -> None:
        """Hand admin authority to ``new_admin``.

        Only the current admin may transfer. ``new_admin`` is not validated and
        may equal ``caller``.
        """
        with self.lock:
            if not self.authorize(caller):
                logger.warning("admin transfer by non-admin %s rejected", caller)
                raise NotAuthorized(caller)
            self._admin = new_admin

        logger.info("admin transferred from %s to %s", caller, new_admin)

    def restore(self, admin: Principal) -> None:
        """Reset the admin without an authorization check.

        Only for rolling back a transfer whose persistence failed.
        """
        with self.lock:
            self._admin = admin
