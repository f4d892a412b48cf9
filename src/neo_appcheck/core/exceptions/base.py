"""Base exceptions for neo-appcheck.

All exceptions inherit from NeoAppCheckError and carry an error code and
structured details alongside the human-readable message.
"""

from typing import Any, Dict, Optional


class NeoAppCheckError(Exception):
    """Base exception for all neo-appcheck errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: NeoAppCheckError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The neo-appcheck exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
