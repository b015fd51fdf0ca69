"""Authorization checks used by the orchestration layer."""

from __future__ import annotations

from storeverify.auth.authority import AdminAuthority
from storeverify.errors import NotAuthorized
from storeverify.identity import Principal


def is_admin(authority: AdminAuthority, caller: Principal) -> bool:
    """Check whether ``caller`` currently holds admin authority.

    Parameters
    ----------
    authority:
        The authority whose admin is compared against.
    caller:
        Principal of the caller, as supplied by the environment.

    Returns
    -------
    bool
        True if ``caller`` equals the current admin.
    """
    return authority.authorize(caller)


def require_admin(authority: AdminAuthority, caller: Principal) -> None:
    """Validate that ``caller`` is the current admin.

    Raises ``NotAuthorized`` otherwise.

    Usage in an operation::

        with authority.lock:
            require_admin(authority, caller)
            registry.mark_verified(store_id)
    """
    if not is_admin(authority, caller):
        raise NotAuthorized(caller)
