"""
Numeric error codes reported by GIPAuth results.
"""
from enum import IntEnum


class ErrorCode(IntEnum):
    """Stable error codes returned to callers."""
    SUCCESS = 0
    TOKEN_CREATION_FAILED = 1001
    TOKEN_VERIFICATION_FAILED = 1002
    TOKEN_DECODING_FAILED = 1003
    TOKEN_INVALID = 1004
    TOKEN_EXPIRED = 1005
    INVALID_ARGUMENT = 1101
    CONFIGURATION_ERROR = 1102
    UNKNOWN_ERROR = 9999

    @property
    def message(self) -> str:
        """Human-readable description of this code."""
        return _ERROR_MESSAGES[self]

    @classmethod
    def describe(cls, code: int) -> str:
        """Describe any integer code, including ones outside the table."""
        try:
            return cls(code).message
        except ValueError:
            return f"Unknown error code: {code}"

    @staticmethod
    def is_success(code: int) -> bool:
        return code == ErrorCode.SUCCESS


_ERROR_MESSAGES = {
    ErrorCode.SUCCESS: "Success",
    ErrorCode.TOKEN_CREATION_FAILED: "Token creation failed",
    ErrorCode.TOKEN_VERIFICATION_FAILED: "Token verification failed",
    ErrorCode.TOKEN_DECODING_FAILED: "Token decoding failed",
    ErrorCode.TOKEN_INVALID: "Token is invalid",
    ErrorCode.TOKEN_EXPIRED: "Token has expired",
    ErrorCode.INVALID_ARGUMENT: "Invalid argument",
    ErrorCode.CONFIGURATION_ERROR: "App configuration is invalid",
    ErrorCode.UNKNOWN_ERROR: "Unknown error",
}
