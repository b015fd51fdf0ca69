"""Admin authority: the single identity allowed to run privileged operations."""

from storeverify.auth.authority import AdminAuthority
from storeverify.auth.permissions import is_admin, require_admin

__all__ = ["AdminAuthority", "is_admin", "require_admin"]
