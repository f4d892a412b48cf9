"""Core App Check domain objects.

Contains only value objects, exceptions and protocols with no I/O.

Components:
- value_objects: Immutable token header/claims and HTTP response snapshots
- exceptions: AppCheckError, CryptoSignerError and HttpError
- protocols: CryptoSigner and Clock contracts
"""

from .value_objects import HttpResponse, TokenHeader, TokenClaims
from .exceptions import (
    NeoAppCheckError,
    AppCheckError,
    AppCheckErrorCode,
    CryptoSignerError,
    CryptoSignerErrorCode,
    HttpError,
)
from .protocols import CryptoSigner, Clock

__all__ = [
    # Value Objects
    "HttpResponse",
    "TokenHeader",
    "TokenClaims",

    # Exceptions
    "NeoAppCheckError",
    "AppCheckError",
    "AppCheckErrorCode",
    "CryptoSignerError",
    "CryptoSignerErrorCode",
    "HttpError",

    # Protocols
    "CryptoSigner",
    "Clock",
]
