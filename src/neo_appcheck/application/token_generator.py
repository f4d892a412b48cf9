"""App Check custom token generation."""

import logging
from typing import Awaitable, Optional

from ..config.constants import ErrorMessages
from ..core.exceptions import AppCheckError, AppCheckErrorCode, CryptoSignerError
from ..core.protocols import Clock, CryptoSigner
from ..core.value_objects import TokenClaims, TokenHeader
from ..infrastructure.adapters.system_clock import SystemClock
from ..utils.encoding import base64url_encode, encode_segment
from ..utils.validators import is_non_empty_string
from .error_mapper import app_check_error_from_crypto_signer_error

logger = logging.getLogger(__name__)


class AppCheckTokenGenerator:
    """Mints RS256 custom tokens for the App Check token exchange.

    Holds only its signer and clock, so one instance can serve concurrent
    callers.
    """

    def __init__(self, signer: Optional[CryptoSigner] = None, clock: Optional[Clock] = None):
        """Initialize the generator.

        Args:
            signer: CryptoSigner used to sign every token
            clock: Time source; defaults to the system clock

        Raises:
            AppCheckError: If ``signer`` does not implement CryptoSigner
        """
        if not isinstance(signer, CryptoSigner):
            raise AppCheckError(AppCheckErrorCode.INVALID_ARGUMENT, ErrorMessages.INVALID_SIGNER)
        self._signer = signer
        self._clock = clock or SystemClock()

    @property
    def signer(self) -> CryptoSigner:
        return self._signer

    def create_custom_token(self, app_id: Optional[str] = None) -> Awaitable[str]:
        """Create a custom token for ``app_id``.

        Input is validated before any coroutine is created, so a bad
        ``app_id`` raises here rather than when awaiting.

        Args:
            app_id: App ID placed verbatim in the ``app_id`` claim

        Returns:
            Awaitable resolving to the compact token string

        Raises:
            AppCheckError: ``app-check/invalid-argument`` if ``app_id`` is not a
                non-empty string. Awaiting raises the mapped AppCheckError if
                signing fails.
        """
        if not is_non_empty_string(app_id):
            raise AppCheckError(AppCheckErrorCode.INVALID_ARGUMENT, ErrorMessages.INVALID_APP_ID)
        return self._sign_custom_token(app_id)

    async def _sign_custom_token(self, app_id: str) -> str:
        issued_at = int(self._clock.now())
        header = TokenHeader()
        try:
            account_id = await self._signer.get_account_id()
            claims = TokenClaims.create(app_id, account_id, issued_at)
            unsigned_token = f"{encode_segment(header.to_dict())}.{encode_segment(claims.to_dict())}"
            signature = await self._signer.sign(unsigned_token.encode("utf-8"))
        except CryptoSignerError as e:
            app_check_error = app_check_error_from_crypto_signer_error(e)
            logger.warning(
                f"Custom token signing failed for app {app_id}: {app_check_error.code}"
            )
            raise app_check_error from e

        logger.debug(f"Minted custom token for app {app_id}, expires at {claims.exp}")
        return f"{unsigned_token}.{base64url_encode(signature)}"
