"""Base64url and JSON helpers for the compact JWS serialization."""

import base64
import json
from typing import Any, Mapping


def base64url_encode(data: bytes) -> str:
    """Encode bytes as unpadded base64url text."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def base64url_decode(data: str) -> bytes:
    """Decode unpadded base64url text."""
    padded = data + "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii"))


def compact_json(value: Any) -> str:
    """Serialize ``value`` as compact JSON, preserving mapping key order."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def encode_segment(value: Mapping[str, Any]) -> str:
    """Encode a JSON object as a base64url token segment."""
    return base64url_encode(compact_json(dict(value)).encode("utf-8"))
