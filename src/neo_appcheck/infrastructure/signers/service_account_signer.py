"""Local-key signer backed by a service account credential."""

import logging

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from ...config.constants import TokenConstants
from ...core.exceptions import CryptoSignerError, CryptoSignerErrorCode
from ..credentials import ServiceAccountCredential

logger = logging.getLogger(__name__)


class ServiceAccountSigner:
    """CryptoSigner that signs with the credential's RSA private key.

    Signatures are RSASSA-PKCS1-v1_5 over SHA-256 (RS256).
    """

    algorithm = TokenConstants.ALGORITHM

    def __init__(self, credential: ServiceAccountCredential):
        """Initialize signer.

        Args:
            credential: Service account credential holding the private key

        Raises:
            CryptoSignerError: INVALID_CREDENTIAL if no credential is given
        """
        if not isinstance(credential, ServiceAccountCredential):
            raise CryptoSignerError.missing_service_account()
        self._credential = credential

    async def sign(self, buffer: bytes) -> bytes:
        if not isinstance(buffer, (bytes, bytearray)):
            raise CryptoSignerError(
                CryptoSignerErrorCode.INVALID_ARGUMENT,
                "Data to sign must be bytes.",
            )
        logger.debug(f"Signing {len(buffer)} bytes as {self._credential.client_email}")
        return self._credential.signing_key.sign(
            bytes(buffer), padding.PKCS1v15(), hashes.SHA256()
        )

    async def get_account_id(self) -> str:
        return self._credential.client_email
