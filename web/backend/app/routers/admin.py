"""Admin router -- read and transfer admin authority."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from storeverify.errors import StoreVerificationError
from storeverify.service import StoreVerificationService

from web.backend.app.middleware.principal import get_caller, get_service, to_http_exception
from web.backend.app.models.api import AdminResponse, OperationResponse, SetAdminRequest

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("", response_model=AdminResponse, summary="Get the current admin")
async def get_admin(service: StoreVerificationService = Depends(get_service)):
    return AdminResponse(admin=service.current_admin())


@router.put("", response_model=OperationResponse, summary="Transfer admin rights")
async def set_admin(
    body: SetAdminRequest,
    caller: str = Depends(get_caller),
    service: StoreVerificationService = Depends(get_service),
):
    """Hand admin authority to ``new_admin``. Only the current admin may call this."""
    try:
        service.set_admin(body.new_admin, caller)
    except StoreVerificationError as e:
        raise to_http_exception(e)
    return OperationResponse()
