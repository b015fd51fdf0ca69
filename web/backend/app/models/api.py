"""Pydantic models for API request/response serialization.

These models mirror the storeverify dataclasses and provide proper JSON
serialization for the FastAPI endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Store models
# ---------------------------------------------------------------------------


class RegisterStoreRequest(BaseModel):
    name: str
    address: str


class RegisterStoreResponse(BaseModel):
    id: int


class StoreResponse(BaseModel):
    """Mirrors storeverify.registry.models.Store."""

    id: int
    name: str
    address: str
    verified: bool = False
    owner: str


class VerificationStatusResponse(BaseModel):
    id: int
    verified: bool


# ---------------------------------------------------------------------------
# Admin models
# ---------------------------------------------------------------------------


class SetAdminRequest(BaseModel):
    new_admin: str = Field(..., description="Principal that becomes the admin")


class AdminResponse(BaseModel):
    admin: str


class OperationResponse(BaseModel):
    success: bool = True
