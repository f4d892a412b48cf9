"""Infrastructure for App Check: signers, credentials and system adapters."""

from .adapters import SystemClock
from .credentials import ServiceAccountCredential
from .signers import ServiceAccountSigner, IAMSigner
from .factories import create_crypto_signer

__all__ = [
    "SystemClock",
    "ServiceAccountCredential",
    "ServiceAccountSigner",
    "IAMSigner",
    "create_crypto_signer",
]
