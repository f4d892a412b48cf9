"""Unit tests for IAMSigner using httpx.MockTransport."""

import base64
import json

import httpx
import jwt
import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from neo_appcheck import (
    AppCheckError,
    AppCheckSettings,
    AppCheckTokenGenerator,
    CryptoSigner,
    CryptoSignerError,
    CryptoSignerErrorCode,
    HttpError,
    IAMSigner,
    TokenConstants,
)

SERVICE_ACCOUNT = "signer@project.iam.gserviceaccount.com"
METADATA_URL = "http://metadata.test/computeMetadata/v1/instance/service-accounts/default/email"


@pytest.fixture
def settings():
    return AppCheckSettings(
        iam_base_url="https://iam.test/",
        metadata_url=METADATA_URL,
        request_timeout=2.0,
    )


def make_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestIAMSignerConstruction:
    """Test constructor assertions."""

    @pytest.mark.parametrize("http_client", [None, "client", object()])
    def test_requires_async_http_client(self, http_client, settings):
        with pytest.raises(CryptoSignerError) as exc_info:
            IAMSigner(http_client, settings=settings)

        assert exc_info.value.code == CryptoSignerErrorCode.INVALID_ARGUMENT
        assert "Must provide a HTTP client" in exc_info.value.message

    @pytest.mark.parametrize("service_account_id", ["", 1, ["a"]])
    def test_rejects_invalid_service_account_id(self, service_account_id, settings):
        with pytest.raises(CryptoSignerError) as exc_info:
            IAMSigner(make_client(lambda request: httpx.Response(200)), service_account_id, settings)

        assert exc_info.value.code == CryptoSignerErrorCode.INVALID_ARGUMENT

    def test_implements_crypto_signer(self, settings):
        signer = IAMSigner(make_client(lambda request: httpx.Response(200)), SERVICE_ACCOUNT, settings)

        assert isinstance(signer, CryptoSigner)


class TestIAMSignerSign:
    """Test signBlob requests and failure classification."""

    @pytest.mark.asyncio
    async def test_sign_posts_payload_and_decodes_signed_blob(self, settings):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200, json={"keyId": "key", "signedBlob": base64.b64encode(b"signature").decode()}
            )

        async with make_client(handler) as client:
            signer = IAMSigner(client, SERVICE_ACCOUNT, settings)
            signature = await signer.sign(b"header.claims")

        assert signature == b"signature"
        assert len(requests) == 1
        request = requests[0]
        assert request.method == "POST"
        assert request.url.host == "iam.test"
        assert request.url.path.endswith("signBlob")
        assert "/v1/projects/-/serviceAccounts/" in request.url.path
        assert json.loads(request.content) == {
            "payload": base64.b64encode(b"header.claims").decode()
        }

    @pytest.mark.asyncio
    async def test_server_error_carries_http_error_cause(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, json={"error": {"message": "Permission denied."}})

        async with make_client(handler) as client:
            signer = IAMSigner(client, SERVICE_ACCOUNT, settings)
            with pytest.raises(CryptoSignerError) as exc_info:
                await signer.sign(b"header.claims")

        error = exc_info.value
        assert error.code == CryptoSignerErrorCode.SERVER_ERROR
        assert isinstance(error.cause, HttpError)
        assert error.cause.response.status == 403
        assert error.cause.response.data == {"error": {"message": "Permission denied."}}

    @pytest.mark.asyncio
    async def test_network_failure_is_internal_error(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            signer = IAMSigner(client, SERVICE_ACCOUNT, settings)
            with pytest.raises(CryptoSignerError) as exc_info:
                await signer.sign(b"header.claims")

        assert exc_info.value.code == CryptoSignerErrorCode.INTERNAL_ERROR

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"signedBlob": "***"}, {"signedBlob": None}])
    async def test_malformed_response_is_internal_error(self, settings, body):
        async with make_client(lambda request: httpx.Response(200, json=body)) as client:
            signer = IAMSigner(client, SERVICE_ACCOUNT, settings)
            with pytest.raises(CryptoSignerError) as exc_info:
                await signer.sign(b"header.claims")

        assert exc_info.value.code == CryptoSignerErrorCode.INTERNAL_ERROR


class TestIAMSignerAccountId:
    """Test service account discovery."""

    @pytest.mark.asyncio
    async def test_returns_configured_account(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        async with make_client(handler) as client:
            signer = IAMSigner(client, SERVICE_ACCOUNT, settings)
            assert await signer.get_account_id() == SERVICE_ACCOUNT

    @pytest.mark.asyncio
    async def test_discovers_account_from_metadata_server_once(self, settings):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, text=SERVICE_ACCOUNT)

        async with make_client(handler) as client:
            signer = IAMSigner(client, settings=settings)
            assert await signer.get_account_id() == SERVICE_ACCOUNT
            assert await signer.get_account_id() == SERVICE_ACCOUNT

        assert len(requests) == 1
        assert str(requests[0].url) == METADATA_URL
        assert requests[0].headers["Metadata-Flavor"] == "Google"

    @pytest.mark.asyncio
    async def test_metadata_failure_is_invalid_credential(self, settings):
        async with make_client(lambda request: httpx.Response(404, text="not found")) as client:
            signer = IAMSigner(client, settings=settings)
            with pytest.raises(CryptoSignerError) as exc_info:
                await signer.get_account_id()

        assert exc_info.value.code == CryptoSignerErrorCode.INVALID_CREDENTIAL
        assert exc_info.value.message.startswith("Failed to determine service account.")

    @pytest.mark.asyncio
    async def test_empty_metadata_response_is_invalid_credential(self, settings):
        async with make_client(lambda request: httpx.Response(200, text="")) as client:
            signer = IAMSigner(client, settings=settings)
            with pytest.raises(CryptoSignerError) as exc_info:
                await signer.get_account_id()

        assert exc_info.value.code == CryptoSignerErrorCode.INVALID_CREDENTIAL


class TestIAMSignerWithTokenGenerator:
    """Test the generator end to end over a mocked IAM service."""

    @pytest.mark.asyncio
    async def test_token_signed_remotely_verifies(self, settings, credential, key_pairs):
        def handler(request: httpx.Request) -> httpx.Response:
            payload = base64.b64decode(json.loads(request.content)["payload"])
            signature = credential.signing_key.sign(payload, padding.PKCS1v15(), hashes.SHA256())
            return httpx.Response(200, json={"signedBlob": base64.b64encode(signature).decode()})

        async with make_client(handler) as client:
            generator = AppCheckTokenGenerator(IAMSigner(client, SERVICE_ACCOUNT, settings))
            token = await generator.create_custom_token("test-app-id")

        decoded = jwt.decode(
            token,
            key_pairs[0]["public"],
            algorithms=["RS256"],
            audience=TokenConstants.AUDIENCE,
        )
        assert decoded["iss"] == SERVICE_ACCOUNT
        assert decoded["sub"] == SERVICE_ACCOUNT

    @pytest.mark.asyncio
    async def test_server_error_maps_to_unknown_error(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, json={"error": {"message": "Permission denied."}})

        async with make_client(handler) as client:
            generator = AppCheckTokenGenerator(IAMSigner(client, SERVICE_ACCOUNT, settings))
            with pytest.raises(AppCheckError) as exc_info:
                await generator.create_custom_token("test-app-id")

        assert exc_info.value.code == "app-check/unknown-error"
        assert exc_info.value.message == (
            "Error returned from server while signing a custom token: Permission denied."
        )

    @pytest.mark.asyncio
    async def test_metadata_failure_maps_to_invalid_credential(self, settings):
        async with make_client(lambda request: httpx.Response(500)) as client:
            generator = AppCheckTokenGenerator(IAMSigner(client, settings=settings))
            with pytest.raises(AppCheckError) as exc_info:
                await generator.create_custom_token("test-app-id")

        assert exc_info.value.code == "app-check/invalid-credential"
