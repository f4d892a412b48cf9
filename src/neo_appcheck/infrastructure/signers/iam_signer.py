"""Remote signer backed by the IAM Credentials ``signBlob`` API."""

import base64
import binascii
import logging
from typing import Optional

import httpx

from ...config.constants import Headers, TokenConstants
from ...config.settings import AppCheckSettings, get_settings
from ...core.exceptions import CryptoSignerError, CryptoSignerErrorCode, HttpError
from ...core.value_objects import HttpResponse
from ...utils.validators import is_non_empty_string

logger = logging.getLogger(__name__)


class IAMSigner:
    """CryptoSigner that delegates signing to a remote service account.

    The HTTP client must already carry credentials allowed to call
    ``iam.serviceAccounts.signBlob``. When no service account ID is given it
    is discovered once from the metadata server and remembered.
    """

    algorithm = TokenConstants.ALGORITHM

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        service_account_id: Optional[str] = None,
        settings: Optional[AppCheckSettings] = None,
    ):
        """Initialize signer.

        Args:
            http_client: Authorized async HTTP client
            service_account_id: Service account email to sign as
            settings: Endpoint and timeout settings

        Raises:
            CryptoSignerError: INVALID_ARGUMENT on a missing client or a
                malformed service account ID
        """
        if not isinstance(http_client, httpx.AsyncClient):
            raise CryptoSignerError(
                CryptoSignerErrorCode.INVALID_ARGUMENT,
                "INTERNAL ASSERT: Must provide a HTTP client to initialize IAMSigner.",
            )
        if service_account_id is not None and not is_non_empty_string(service_account_id):
            raise CryptoSignerError(
                CryptoSignerErrorCode.INVALID_ARGUMENT,
                "INTERNAL ASSERT: Service account ID must be undefined or a non-empty string.",
            )
        self._http_client = http_client
        self._service_account_id = service_account_id
        self._settings = settings or get_settings()

    async def sign(self, buffer: bytes) -> bytes:
        service_account = await self.get_account_id()
        url = self._settings.sign_blob_url(service_account)
        payload = {"payload": base64.b64encode(bytes(buffer)).decode("ascii")}

        try:
            response = await self._http_client.post(
                url, json=payload, timeout=self._settings.request_timeout
            )
        except httpx.RequestError as e:
            logger.error(f"Failed to reach IAM signing service: {e}")
            raise CryptoSignerError(
                CryptoSignerErrorCode.INTERNAL_ERROR,
                f"Failed to reach IAM signing service: {e}",
                cause=e,
            ) from e

        if response.is_error:
            http_error = HttpError(
                HttpResponse(
                    status=response.status_code,
                    headers=dict(response.headers),
                    text=response.text,
                )
            )
            logger.error(f"IAM signBlob failed for {service_account}: status {response.status_code}")
            raise CryptoSignerError(
                CryptoSignerErrorCode.SERVER_ERROR,
                http_error.message,
                cause=http_error,
            ) from http_error

        try:
            return base64.b64decode(response.json()["signedBlob"], validate=True)
        except (ValueError, KeyError, TypeError, binascii.Error) as e:
            raise CryptoSignerError(
                CryptoSignerErrorCode.INTERNAL_ERROR,
                f"Unexpected signBlob response: {e}",
                cause=e,
            ) from e

    async def get_account_id(self) -> str:
        if is_non_empty_string(self._service_account_id):
            return self._service_account_id

        try:
            response = await self._http_client.get(
                self._settings.metadata_url,
                headers={Headers.METADATA_FLAVOR: Headers.METADATA_FLAVOR_VALUE},
                timeout=self._settings.request_timeout,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to determine service account from metadata server: {e}")
            raise CryptoSignerError.service_account_lookup_failed(e) from e

        account_id = response.text.strip()
        if not account_id:
            raise CryptoSignerError.service_account_lookup_failed(
                "metadata server returned an empty service account"
            )
        self._service_account_id = account_id
        logger.debug(f"Discovered service account {account_id}")
        return account_id
