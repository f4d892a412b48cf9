"""Contracts for external collaborators of the token generator."""

from .crypto_signer import CryptoSigner
from .clock import Clock

__all__ = [
    "CryptoSigner",
    "Clock",
]
