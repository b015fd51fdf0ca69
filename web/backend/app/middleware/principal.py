"""Request dependencies: the shared service and the calling principal.

The caller's identity is taken from the ``X-Principal`` header. In a real
deployment a gateway in front of this app authenticates the caller and sets
that header.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Header, HTTPException, status

from storeverify.config import load_settings
from storeverify.errors import ErrorCode, StoreVerificationError
from storeverify.service import StoreVerificationService

# Shared service instance
_service: Optional[StoreVerificationService] = None

ERROR_STATUS = {
    ErrorCode.NOT_AUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorCode.STORE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.STORE_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
}


def get_service() -> StoreVerificationService:
    """Return the singleton service, built from settings on first use."""
    global _service
    if _service is None:
        _service = StoreVerificationService.from_settings(load_settings())
    return _service


async def get_caller(
    x_principal: Optional[str] = Header(None, alias="X-Principal"),
) -> str:
    """FastAPI dependency returning the calling principal.

    Raises ``401 Unauthorized`` if the header is missing or blank.
    """
    if not x_principal or not x_principal.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-Principal header",
        )
    return x_principal.strip()


def to_http_exception(err: StoreVerificationError) -> HTTPException:
    """Translate a registry error into an HTTP error carrying its code."""
    return HTTPException(status_code=ERROR_STATUS[err.code], detail=err.to_dict())
