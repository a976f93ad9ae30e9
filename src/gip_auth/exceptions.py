"""
Exceptions raised across the GIPAuth boundary.
"""
from gip_auth.constants import ErrorCode


class GIPAuthError(Exception):
    """Base exception for GIPAuth errors."""
    def __init__(self, message: str, error_code: ErrorCode):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ConfigurationError(GIPAuthError):
    """Exception raised when the app ID, secret or lifetimes are invalid."""
    def __init__(self, message: str = "App configuration is invalid."):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR)
