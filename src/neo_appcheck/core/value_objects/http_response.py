"""HTTP response value object attached to transport failures."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ...utils.encoding import compact_json


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


@dataclass(frozen=True)
class HttpResponse:
    """Immutable snapshot of an HTTP response.

    ``data`` is derived from ``text``: the decoded JSON document, or ``None``
    when the body is not JSON.
    """

    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    text: str = ""

    @classmethod
    def from_body(
        cls,
        body: Union[Mapping[str, Any], str],
        status: int = 500,
        headers: Optional[Dict[str, str]] = None,
    ) -> "HttpResponse":
        """Build a response from a JSON object or a raw text body."""
        text = body if isinstance(body, str) else compact_json(dict(body))
        return cls(status=status, headers=dict(headers or {}), text=text)

    @property
    def data(self) -> Any:
        return self._parse()[1]

    def is_json(self) -> bool:
        return self._parse()[0]

    def _parse(self) -> Tuple[bool, Any]:
        try:
            return True, json.loads(self.text, parse_constant=_reject_constant)
        except ValueError:
            return False, None

    def to_dict(self) -> Dict[str, Any]:
        """Fields in stable ``status, headers, data, text`` order."""
        return {
            "status": self.status,
            "headers": dict(self.headers),
            "data": self.data,
            "text": self.text,
        }

    def to_json(self) -> str:
        return compact_json(self.to_dict())
