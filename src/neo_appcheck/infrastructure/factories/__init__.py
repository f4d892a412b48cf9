"""Factories for infrastructure components."""

from .crypto_signer_factory import create_crypto_signer

__all__ = ["create_crypto_signer"]
