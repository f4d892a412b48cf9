"""CryptoSigner factory."""

import logging
from typing import Optional

import httpx

from ...config.settings import AppCheckSettings, get_settings
from ...core.exceptions import CryptoSignerError, CryptoSignerErrorCode
from ...core.protocols import CryptoSigner
from ..credentials import ServiceAccountCredential
from ..signers import IAMSigner, ServiceAccountSigner

logger = logging.getLogger(__name__)


def create_crypto_signer(
    credential: Optional[ServiceAccountCredential] = None,
    http_client: Optional[httpx.AsyncClient] = None,
    settings: Optional[AppCheckSettings] = None,
) -> CryptoSigner:
    """Pick a signer for the available credentials.

    A service account credential signs locally. Otherwise signing is
    delegated to IAM through ``http_client``, as the configured
    ``service_account_id`` or the metadata server's default account.

    Raises:
        CryptoSignerError: INVALID_CREDENTIAL if neither is available
    """
    if credential is not None:
        logger.debug("Creating service account signer")
        return ServiceAccountSigner(credential)

    if http_client is not None:
        settings = settings or get_settings()
        logger.debug("Creating IAM signer")
        return IAMSigner(
            http_client,
            service_account_id=settings.service_account_id,
            settings=settings,
        )

    raise CryptoSignerError(
        CryptoSignerErrorCode.INVALID_CREDENTIAL,
        "Must provide a service account credential or an HTTP client to create a CryptoSigner.",
    )
