"""Translation of signer failures into caller-facing App Check errors."""

from typing import Any, Optional

from ..config.constants import ErrorMessages
from ..core.exceptions import (
    AppCheckError,
    AppCheckErrorCode,
    CryptoSignerError,
    CryptoSignerErrorCode,
    HttpError,
)
from ..utils.encoding import compact_json


def _has_error_body(error_body: Any) -> bool:
    # Empty objects and arrays still count as an error body.
    if error_body is None:
        return False
    if isinstance(error_body, (str, int, float)):
        return bool(error_body)
    return True


def _server_error_message(cause: Any) -> Optional[str]:
    """Message for a server failure carrying ``data["error"]``, else None.

    The server's own message is used when ``data["error"]`` is an object with
    a non-empty string ``message``. Any other error body yields the full
    serialized response.
    """
    if not isinstance(cause, HttpError):
        return None
    data = cause.response.data
    if not isinstance(data, dict):
        return None
    error_body = data.get("error")
    if not _has_error_body(error_body):
        return None
    if isinstance(error_body, dict):
        message = error_body.get("message")
        if isinstance(message, str) and message:
            return message
    return cause.response.to_json()


def _render_response_data(cause: Any) -> str:
    if isinstance(cause, HttpError):
        return compact_json(cause.response.data)
    return "null"


def app_check_error_from_crypto_signer_error(error: CryptoSignerError) -> AppCheckError:
    """Map a CryptoSignerError to the AppCheckError callers should see.

    Server errors whose body carries a non-empty ``error`` member become
    ``unknown-error`` with the server's message, or with the full response
    serialized when the body has no message. Every code without a dedicated
    arm becomes ``internal-error``.

    Args:
        error: Failure raised by a CryptoSigner

    Returns:
        AppCheckError with a namespaced code and deterministic message
    """
    if not isinstance(error, CryptoSignerError):
        raise TypeError(f"Expected CryptoSignerError, got {type(error).__name__}")

    match error.code:
        case CryptoSignerErrorCode.INVALID_ARGUMENT:
            return AppCheckError(AppCheckErrorCode.INVALID_ARGUMENT, error.message)
        case CryptoSignerErrorCode.INVALID_CREDENTIAL:
            return AppCheckError(AppCheckErrorCode.INVALID_CREDENTIAL, error.message)
        case CryptoSignerErrorCode.SERVER_ERROR if (
            server_message := _server_error_message(error.cause)
        ) is not None:
            return AppCheckError(
                AppCheckErrorCode.UNKNOWN_ERROR,
                ErrorMessages.SERVER_SIGNING_ERROR + server_message,
                details={"status": error.cause.response.status},
            )
        case _:
            return AppCheckError(
                AppCheckErrorCode.INTERNAL_ERROR,
                f"{ErrorMessages.SERVER_ERROR}{_render_response_data(error.cause)}.",
            )
