"""Signer-level exceptions raised by CryptoSigner implementations."""

from enum import Enum
from typing import Any, Optional

from .base import NeoAppCheckError


class CryptoSignerErrorCode(str, Enum):
    """Classification of signer failures."""
    INVALID_ARGUMENT = "invalid-argument"
    INVALID_CREDENTIAL = "invalid-credential"
    INTERNAL_ERROR = "internal-error"
    SERVER_ERROR = "server-error"


class CryptoSignerError(NeoAppCheckError):
    """Exception raised when a signer cannot produce a signature.

    Handles ONLY signer failure representation. Translation into caller-facing
    errors is done by the error mapper.
    """

    def __init__(
        self,
        code: CryptoSignerErrorCode,
        message: str,
        *,
        cause: Optional[Any] = None,
    ) -> None:
        """Initialize signer failure.

        Args:
            code: Failure classification
            message: Human-readable error message
            cause: Underlying failure, usually an HttpError for remote signers
        """
        super().__init__(message, error_code=CryptoSignerErrorCode(code).value)
        self.code = CryptoSignerErrorCode(code)
        self.cause = cause

    @classmethod
    def missing_service_account(cls) -> "CryptoSignerError":
        return cls(
            CryptoSignerErrorCode.INVALID_CREDENTIAL,
            "INTERNAL ASSERT: Must provide a service account credential to initialize "
            "ServiceAccountSigner.",
        )

    @classmethod
    def service_account_lookup_failed(cls, error: Any) -> "CryptoSignerError":
        return cls(
            CryptoSignerErrorCode.INVALID_CREDENTIAL,
            "Failed to determine service account. Make sure to initialize the SDK with "
            "a service account credential. Alternatively specify a service account with "
            f"iam.serviceAccounts.signBlob permission. Original error: {error}",
            cause=error,
        )
