"""Immutable value objects for custom tokens and transport failures."""

from .http_response import HttpResponse
from .token_header import TokenHeader
from .token_claims import TokenClaims

__all__ = [
    "HttpResponse",
    "TokenHeader",
    "TokenClaims",
]
