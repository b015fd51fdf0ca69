"""Error codes and exceptions raised by registry operations.

The numeric values are stable and shared by every surface (Python API, CLI
and HTTP), so callers can match on either the name or the number.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(int, Enum):
    """Fixed enumeration of failure kinds."""

    NOT_AUTHORIZED = 100
    STORE_NOT_FOUND = 101
    STORE_ALREADY_EXISTS = 102


class StoreVerificationError(Exception):
    """Base class for every failure reported by the registry core."""

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {
            "code": self.code.name,
            "value": self.code.value,
            "message": self.message,
        }


class NotAuthorized(StoreVerificationError):
    code = ErrorCode.NOT_AUTHORIZED

    def __init__(self, caller: str) -> None:
        super().__init__(f"'{caller}' is not the current admin")
        self.caller = caller


class StoreNotFound(StoreVerificationError):
    code = ErrorCode.STORE_NOT_FOUND

    def __init__(self, store_id: int) -> None:
        super().__init__(f"Store {store_id} not found")
        self.store_id = store_id


class StoreAlreadyExists(StoreVerificationError):
    code = ErrorCode.STORE_ALREADY_EXISTS

    def __init__(self, store_id: int) -> None:
        super().__init__(f"Store {store_id} already exists")
        self.store_id = store_id
