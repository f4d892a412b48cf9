"""Neo-AppCheck - App Check custom tokens for the NeoMultiTenant platform.

Mints RS256 custom tokens that clients exchange with the App Check token
exchange service, and translates signer failures into stable AppCheckError
codes.

Usage:
    from neo_appcheck import (
        AppCheckTokenGenerator,
        ServiceAccountCredential,
        ServiceAccountSigner,
    )

    credential = ServiceAccountCredential.from_file("service-account.json")
    generator = AppCheckTokenGenerator(ServiceAccountSigner(credential))
    token = await generator.create_custom_token("1:1234:web:abcd")
"""

from .__version__ import __version__

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .config import (
    TokenConstants,
    AppCheckSettings,
    get_settings,
    setup_logging,
    LoggingConfig,
)

from .core import (
    # Value Objects
    HttpResponse,
    TokenHeader,
    TokenClaims,

    # Exceptions
    NeoAppCheckError,
    AppCheckError,
    AppCheckErrorCode,
    CryptoSignerError,
    CryptoSignerErrorCode,
    HttpError,

    # Protocols
    CryptoSigner,
    Clock,
)

from .application import (
    AppCheckTokenGenerator,
    app_check_error_from_crypto_signer_error,
)

from .infrastructure import (
    SystemClock,
    ServiceAccountCredential,
    ServiceAccountSigner,
    IAMSigner,
    create_crypto_signer,
)

__all__ = [
    "__version__",

    # Configuration
    "TokenConstants",
    "AppCheckSettings",
    "get_settings",
    "setup_logging",
    "LoggingConfig",

    # Value Objects
    "HttpResponse",
    "TokenHeader",
    "TokenClaims",

    # Exceptions
    "NeoAppCheckError",
    "AppCheckError",
    "AppCheckErrorCode",
    "CryptoSignerError",
    "CryptoSignerErrorCode",
    "HttpError",

    # Protocols
    "CryptoSigner",
    "Clock",

    # Token generation
    "AppCheckTokenGenerator",
    "app_check_error_from_crypto_signer_error",

    # Signers
    "SystemClock",
    "ServiceAccountCredential",
    "ServiceAccountSigner",
    "IAMSigner",
    "create_crypto_signer",
]
