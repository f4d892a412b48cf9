"""Runtime settings for App Check signers.

Only transport-level knobs are configurable. Token shape (algorithm,
audience, lifetime) is fixed in :mod:`neo_appcheck.config.constants`.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppCheckSettings(BaseSettings):
    """Settings loaded from ``APP_CHECK_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="APP_CHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Remote signing
    iam_base_url: str = Field(default="https://iamcredentials.googleapis.com")
    metadata_url: str = Field(
        default="http://metadata/computeMetadata/v1/instance/service-accounts/default/email"
    )
    request_timeout: float = Field(default=10.0, gt=0)

    # Explicit service account for IAM signing; discovered via metadata when unset
    service_account_id: Optional[str] = Field(default=None)

    @field_validator("iam_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("service_account_id")
    @classmethod
    def empty_as_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    def sign_blob_url(self, service_account_id: str) -> str:
        """Build the IAM Credentials ``signBlob`` URL for an account."""
        return f"{self.iam_base_url}/v1/projects/-/serviceAccounts/{service_account_id}:signBlob"


@lru_cache()
def get_settings() -> AppCheckSettings:
    """Get cached settings instance."""
    return AppCheckSettings()
