"""App Check exceptions.

NeoAppCheckError is the base; AppCheckError is what callers see,
CryptoSignerError is what signers raise, and HttpError is the transport
failure a remote signer attaches as a cause.
"""

from .base import NeoAppCheckError, create_error_response
from .app_check_error import AppCheckError, AppCheckErrorCode
from .crypto_signer_error import CryptoSignerError, CryptoSignerErrorCode
from .http_error import HttpError

__all__ = [
    "NeoAppCheckError",
    "create_error_response",
    "AppCheckError",
    "AppCheckErrorCode",
    "CryptoSignerError",
    "CryptoSignerErrorCode",
    "HttpError",
]
