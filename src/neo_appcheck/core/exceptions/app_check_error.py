"""Caller-facing App Check exception."""

from typing import Any, Dict, Optional

from ...config.constants import ErrorPrefixes
from .base import NeoAppCheckError, create_error_response


class AppCheckErrorCode:
    """Codes surfaced to callers, without the ``app-check/`` namespace."""

    INVALID_ARGUMENT = "invalid-argument"
    INVALID_CREDENTIAL = "invalid-credential"
    INTERNAL_ERROR = "internal-error"
    UNKNOWN_ERROR = "unknown-error"


class AppCheckError(NeoAppCheckError):
    """Exception raised by the token generator.

    ``code`` is namespaced, e.g. ``app-check/invalid-argument``. Signer
    failures are always translated into this type before they reach callers.
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message,
            error_code=f"{ErrorPrefixes.APP_CHECK.value}/{code}",
            details=details,
        )

    @property
    def code(self) -> str:
        return self.error_code

    def to_dict(self) -> Dict[str, Any]:
        return create_error_response(self)

    def __repr__(self) -> str:
        return f"AppCheckError(code={self.code!r}, message={self.message!r})"
