"""App Check use cases: token generation and signer error mapping."""

from .error_mapper import app_check_error_from_crypto_signer_error
from .token_generator import AppCheckTokenGenerator

__all__ = [
    "AppCheckTokenGenerator",
    "app_check_error_from_crypto_signer_error",
]
