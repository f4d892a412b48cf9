"""Pytest configuration and fixtures for neo-appcheck tests."""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

import jwt
import jwt.api_jwt
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from neo_appcheck import (
    HttpError,
    HttpResponse,
    ServiceAccountCredential,
    ServiceAccountSigner,
)

CLIENT_EMAIL = "mock-email@mock-project.iam.gserviceaccount.com"


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, start: float = 0.0):
        self.current = start

    def now(self) -> float:
        return self.current

    def tick(self, seconds: float) -> None:
        self.current += seconds


class RecordingSigner:
    """CryptoSigner wrapper that records every buffer it is asked to sign."""

    def __init__(self, delegate):
        self.delegate = delegate
        self.buffers: List[bytes] = []
        self.account_lookups = 0

    async def sign(self, buffer: bytes) -> bytes:
        self.buffers.append(buffer)
        return await self.delegate.sign(buffer)

    async def get_account_id(self) -> str:
        self.account_lookups += 1
        return await self.delegate.get_account_id()


class FailingSigner:
    """CryptoSigner that raises on sign or on account lookup."""

    def __init__(self, error: Exception, fail_on: str = "sign"):
        self.error = error
        self.fail_on = fail_on

    async def sign(self, buffer: bytes) -> bytes:
        raise self.error

    async def get_account_id(self) -> str:
        if self.fail_on == "account":
            raise self.error
        return CLIENT_EMAIL


def _generate_key_pair() -> Dict[str, str]:
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return {
        "private": private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        ).decode("utf-8"),
        "public": private_key.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        ).decode("utf-8"),
    }


@pytest.fixture(scope="session")
def key_pairs() -> List[Dict[str, str]]:
    """Two unrelated RSA key pairs as PEM strings."""
    return [_generate_key_pair(), _generate_key_pair()]


@pytest.fixture
def certificate_object(key_pairs) -> Dict[str, Any]:
    """Service account document signed by the first key pair."""
    return {
        "type": "service_account",
        "project_id": "project_id",
        "private_key_id": "aaaaaaaaaabbbbbbbbbbccccccccccdddddddddd",
        "private_key": key_pairs[0]["private"],
        "client_email": CLIENT_EMAIL,
        "client_id": "1234567890",
    }


@pytest.fixture
def credential(certificate_object) -> ServiceAccountCredential:
    return ServiceAccountCredential.from_dict(certificate_object)


@pytest.fixture
def service_account_signer(credential) -> ServiceAccountSigner:
    return ServiceAccountSigner(credential)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def error_from():
    """Build an HttpError from a JSON object or a raw text body."""

    def build(data: Union[Dict[str, Any], str], status: int = 500) -> HttpError:
        return HttpError(HttpResponse.from_body(data, status=status))

    return build


@pytest.fixture
def freeze_jwt_time(monkeypatch):
    """Pin the "now" PyJWT uses for exp/iat checks to a timestamp."""

    def freeze(timestamp: float) -> None:
        class FrozenDatetime(datetime):
            @classmethod
            def now(cls, tz: Optional[Any] = None):
                return datetime.fromtimestamp(timestamp, tz)

        monkeypatch.setattr(jwt.api_jwt, "datetime", FrozenDatetime)

    return freeze


@pytest.fixture
def recording_signer(service_account_signer) -> RecordingSigner:
    return RecordingSigner(service_account_signer)


@pytest.fixture
def failing_signer():
    """Build a signer that raises ``error`` from sign() or get_account_id()."""

    def build(error: Exception, fail_on: str = "sign") -> FailingSigner:
        return FailingSigner(error, fail_on=fail_on)

    return build
