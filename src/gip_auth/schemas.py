"""
Result schemas returned by GIPAuth operations.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from gip_auth.constants import ErrorCode


class BaseResult(BaseModel):
    """Common status fields shared by every result."""
    success: bool = Field(default=True, description="Whether the operation succeeded")
    error_code: ErrorCode = Field(default=ErrorCode.SUCCESS, description="Error code")
    error_message: Optional[str] = Field(None, description="Error message")

    @classmethod
    def error(cls, error_code: ErrorCode, message: Optional[str] = None):
        """
        Create a failed result.

        Args:
            error_code: Error code describing the failure
            message: Optional message; defaults to the code's description
        """
        error_code = ErrorCode(error_code)
        return cls(
            success=False,
            error_code=error_code,
            error_message=message or error_code.message,
        )


class CodeResult(BaseResult):
    """Result of generating an authentication code."""
    code: Optional[str] = Field(None, description="Authentication code")
    expire_date: Optional[datetime] = Field(None, description="Code expiration time (UTC)")

    @classmethod
    def ok(cls, code: str, expire_date: datetime) -> "CodeResult":
        return cls(code=code, expire_date=expire_date)


class SSTokenResult(BaseResult):
    """Result of generating a server-to-server token."""
    token: Optional[str] = Field(None, description="Server-to-server token")
    expire_date: Optional[datetime] = Field(None, description="Token expiration time (UTC)")

    @classmethod
    def ok(cls, token: str, expire_date: datetime) -> "SSTokenResult":
        return cls(token=token, expire_date=expire_date)


class UidResult(BaseResult):
    """Result of resolving a user ID from a code or SSToken."""
    uid: Optional[str] = Field(None, description="User ID")

    @classmethod
    def ok(cls, uid: str) -> "UidResult":
        return cls(uid=uid)
