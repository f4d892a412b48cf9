"""Custom token header value object."""

from dataclasses import dataclass
from typing import Dict

from ...config.constants import TokenConstants


@dataclass(frozen=True)
class TokenHeader:
    """JOSE header of a custom token. Fixed to RS256/JWT."""

    alg: str = TokenConstants.ALGORITHM
    typ: str = TokenConstants.TOKEN_TYPE

    def __post_init__(self) -> None:
        if self.alg != TokenConstants.ALGORITHM:
            raise ValueError(f"Unsupported token algorithm: {self.alg}")
        if self.typ != TokenConstants.TOKEN_TYPE:
            raise ValueError(f"Unsupported token type: {self.typ}")

    def to_dict(self) -> Dict[str, str]:
        return {"alg": self.alg, "typ": self.typ}
