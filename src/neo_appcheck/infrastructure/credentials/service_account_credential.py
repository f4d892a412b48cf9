"""Service account credential parsed from a Google service account JSON document."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from ...core.exceptions import CryptoSignerError, CryptoSignerErrorCode

logger = logging.getLogger(__name__)


class ServiceAccountCredential(BaseModel):
    """Service account key material.

    The PEM private key is parsed once when the credential is built; a key
    that is not an unencrypted RSA private key is rejected up front.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str = Field(default="service_account")
    project_id: Optional[str] = None
    private_key_id: Optional[str] = None
    private_key: str = Field(min_length=1, repr=False)
    client_email: str = Field(min_length=1)
    client_id: Optional[str] = None

    _signing_key: rsa.RSAPrivateKey = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        try:
            key = serialization.load_pem_private_key(
                self.private_key.encode("utf-8"), password=None
            )
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise CryptoSignerError(
                CryptoSignerErrorCode.INVALID_CREDENTIAL,
                f"Failed to parse private key: {e}",
                cause=e,
            ) from e
        if not isinstance(key, rsa.RSAPrivateKey):
            raise CryptoSignerError(
                CryptoSignerErrorCode.INVALID_CREDENTIAL,
                "Service account private key must be an RSA key.",
            )
        self._signing_key = key

    @property
    def signing_key(self) -> rsa.RSAPrivateKey:
        return self._signing_key

    @classmethod
    def from_dict(cls, document: Dict[str, Any]) -> "ServiceAccountCredential":
        """Build a credential from a parsed service account document.

        Raises:
            CryptoSignerError: INVALID_CREDENTIAL if required fields are missing
        """
        if not isinstance(document, dict):
            raise CryptoSignerError(
                CryptoSignerErrorCode.INVALID_CREDENTIAL,
                "Service account must be an object.",
            )
        try:
            return cls.model_validate(document)
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            raise CryptoSignerError(
                CryptoSignerErrorCode.INVALID_CREDENTIAL,
                f"Service account object is invalid: {fields}",
                cause=e,
            ) from e

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ServiceAccountCredential":
        """Load a credential from a service account JSON file."""
        try:
            document = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise CryptoSignerError(
                CryptoSignerErrorCode.INVALID_CREDENTIAL,
                f"Failed to parse service account json file: {e}",
                cause=e,
            ) from e
        logger.debug(f"Loaded service account credential from {path}")
        return cls.from_dict(document)
