"""CryptoSigner implementations."""

from .service_account_signer import ServiceAccountSigner
from .iam_signer import IAMSigner

__all__ = [
    "ServiceAccountSigner",
    "IAMSigner",
]
