"""Custom token claims value object."""

from dataclasses import dataclass
from typing import Any, Dict

from ...config.constants import TokenConstants


@dataclass(frozen=True)
class TokenClaims:
    """Claim set of an App Check custom token.

    Handles ONLY claim representation. ``iss`` and ``sub`` are both the
    signer's account ID and the token lives exactly one hour.
    """

    app_id: str
    iat: int
    exp: int
    aud: str
    iss: str
    sub: str

    def __post_init__(self) -> None:
        """Validate claim types and the lifetime invariant."""
        if not isinstance(self.app_id, str) or not self.app_id:
            raise ValueError("'app_id' claim must be a non-empty string")
        for name in ("iat", "exp"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"'{name}' claim must be an integer timestamp")
        if self.exp != self.iat + TokenConstants.ONE_HOUR_IN_SECONDS:
            raise ValueError("'exp' claim must be exactly one hour after 'iat'")
        if self.iss != self.sub:
            raise ValueError("'iss' and 'sub' claims must both be the signer account")

    @classmethod
    def create(cls, app_id: str, account_id: str, issued_at: int) -> "TokenClaims":
        """Build claims for ``app_id`` issued at ``issued_at`` seconds."""
        return cls(
            app_id=app_id,
            iat=issued_at,
            exp=issued_at + TokenConstants.ONE_HOUR_IN_SECONDS,
            aud=TokenConstants.AUDIENCE,
            iss=account_id,
            sub=account_id,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Claims in wire order: app_id, iat, exp, aud, iss, sub."""
        return {
            "app_id": self.app_id,
            "iat": self.iat,
            "exp": self.exp,
            "aud": self.aud,
            "iss": self.iss,
            "sub": self.sub,
        }
