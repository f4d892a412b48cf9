"""Transport-level exception raised for non-2xx HTTP responses."""

from ..value_objects.http_response import HttpResponse
from .base import NeoAppCheckError


class HttpError(NeoAppCheckError):
    """Exception carrying the HTTP response that caused it."""

    def __init__(self, response: HttpResponse) -> None:
        super().__init__(
            f"Server responded with status {response.status}.",
            details={"status": response.status},
        )
        self.response = response
