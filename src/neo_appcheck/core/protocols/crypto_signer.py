"""CryptoSigner protocol contract."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CryptoSigner(Protocol):
    """Protocol for signing custom tokens.

    Defines ONLY the signing contract. Implementations may hold a private key
    locally or delegate to a remote signing service; either way they report
    failures as CryptoSignerError.
    """

    async def sign(self, buffer: bytes) -> bytes:
        """Sign ``buffer`` with the signer's private key.

        Args:
            buffer: Exact bytes to sign

        Returns:
            Raw signature bytes

        Raises:
            CryptoSignerError: If the signature cannot be produced
        """
        ...

    async def get_account_id(self) -> str:
        """Get the account ID (service account email) of the signer.

        Returns:
            Account identifier used as token issuer and subject

        Raises:
            CryptoSignerError: If the account cannot be determined
        """
        ...
