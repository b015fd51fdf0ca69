"""Stores router -- register, look up and verify stores."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from storeverify.errors import StoreVerificationError
from storeverify.service import StoreVerificationService

from web.backend.app.middleware.principal import get_caller, get_service, to_http_exception
from web.backend.app.models.api import (
    OperationResponse,
    RegisterStoreRequest,
    RegisterStoreResponse,
    StoreResponse,
    VerificationStatusResponse,
)

router = APIRouter(prefix="/api/stores", tags=["stores"])


@router.post(
    "",
    response_model=RegisterStoreResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a store",
)
async def register_store(
    body: RegisterStoreRequest,
    caller: str = Depends(get_caller),
    service: StoreVerificationService = Depends(get_service),
):
    """Register a new store. The caller becomes its owner."""
    try:
        store_id = service.register_store(body.name, body.address, caller)
    except StoreVerificationError as e:
        raise to_http_exception(e)
    return RegisterStoreResponse(id=store_id)


@router.get(
    "/{store_id}",
    response_model=StoreResponse,
    summary="Get a store",
)
async def get_store(
    store_id: int,
    service: StoreVerificationService = Depends(get_service),
):
    """Return the store record."""
    store = service.get_store(store_id)
    if store is None:
        raise HTTPException(status_code=404, detail=f"Store {store_id} not found")
    return StoreResponse(**store.to_dict())


@router.get(
    "/{store_id}/verified",
    response_model=VerificationStatusResponse,
    summary="Check whether a store is verified",
)
async def is_store_verified(
    store_id: int,
    service: StoreVerificationService = Depends(get_service),
):
    """Return the verified flag. Unknown stores yield ``STORE_NOT_FOUND``."""
    try:
        verified = service.is_store_verified(store_id)
    except StoreVerificationError as e:
        raise to_http_exception(e)
    return VerificationStatusResponse(id=store_id, verified=verified)


@router.post(
    "/{store_id}/verify",
    response_model=OperationResponse,
    summary="Verify a store (admin only)",
)
async def verify_store(
    store_id: int,
    caller: str = Depends(get_caller),
    service: StoreVerificationService = Depends(get_service),
):
    """Mark a store verified. Non-admin callers get ``NOT_AUTHORIZED`` even for unknown ids."""
    try:
        service.verify_store(store_id, caller)
    except StoreVerificationError as e:
        raise to_http_exception(e)
    return OperationResponse()
