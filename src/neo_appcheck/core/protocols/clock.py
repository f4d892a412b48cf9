"""Clock protocol contract."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Time source for token issuance."""

    def now(self) -> float:
        """Current time in seconds since the epoch."""
        ...
