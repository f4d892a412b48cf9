"""Fixed token constants for App Check custom tokens.

These values are part of the token wire format and are deliberately not
exposed through settings.
"""

from enum import Enum


class TokenConstants:
    """Custom token header and claim constants."""

    ALGORITHM = "RS256"
    TOKEN_TYPE = "JWT"
    ONE_HOUR_IN_SECONDS = 60 * 60
    AUDIENCE = (
        "https://firebaseappcheck.googleapis.com/"
        "google.firebase.appcheck.v1beta.TokenExchangeService"
    )


class ErrorPrefixes(str, Enum):
    """Namespaces for caller-facing error codes."""
    APP_CHECK = "app-check"


class ErrorMessages:
    """Error messages that callers may match on."""

    INVALID_SIGNER = "Must provide a CryptoSigner to use AppCheckTokenGenerator"
    INVALID_APP_ID = "`appId` must be a non-empty string."
    SERVER_SIGNING_ERROR = "Error returned from server while signing a custom token: "
    SERVER_ERROR = "Error returned from server: "


class Headers:
    """HTTP header names used by the remote signer."""

    METADATA_FLAVOR = "Metadata-Flavor"
    METADATA_FLAVOR_VALUE = "Google"
