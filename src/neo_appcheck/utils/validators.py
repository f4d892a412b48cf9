"""Input validators shared by the generator and signers."""

from typing import Any


def is_non_empty_string(value: Any) -> bool:
    """Check that ``value`` is a ``str`` with at least one character.

    ``str`` subclasses are accepted; ``bytes`` and every other type are not.
    """
    return isinstance(value, str) and value != ""
