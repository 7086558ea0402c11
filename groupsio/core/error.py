"""
Error taxonomy for the Groups.io API.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator


class ErrorType(str, Enum):
    BAD_REQUEST = "bad_request"
    EXPIRED_TOKEN = "expired_token"
    FORBIDDEN = "forbidden"
    INADEQUATE_PERMISSIONS = "inadequate_permissions"
    INVALID_COOKIE = "invalid_cookie"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_CSRF = "invalid_csrf"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    TWO_FACTOR_REQUIRED = "2fa_required"
    UNAUTHORIZED = "unauthorized"
    UNKNOWN = "unknown"


class Error(BaseModel):
    """
    An error, either reported by the server or raised by a failed local
    precondition.
    """

    object: str = "error"
    type: ErrorType = ErrorType.UNKNOWN
    extra: Any = None

    @field_validator("type", mode="before")
    @classmethod
    def unknown_types(cls, value: Any) -> Any:
        # The server may grow new error types; don't fail to parse them.
        if isinstance(value, str):
            try:
                return ErrorType(value.lower())
            except ValueError:
                return ErrorType.UNKNOWN
        return value

    @classmethod
    def create(cls, error_type: ErrorType, extra: Any = None) -> "Error":
        return cls(type=error_type, extra=extra)
