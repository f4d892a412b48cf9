"""Credentials consumed by local signers."""

from .service_account_credential import ServiceAccountCredential

__all__ = ["ServiceAccountCredential"]
