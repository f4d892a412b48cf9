"""Utility helpers for neo-appcheck."""

from .encoding import base64url_encode, base64url_decode, compact_json, encode_segment
from .validators import is_non_empty_string

__all__ = [
    "base64url_encode",
    "base64url_decode",
    "compact_json",
    "encode_segment",
    "is_non_empty_string",
]
