"""
Client error taxonomy

Every failure of a JSON-RPC call is raised to the caller as one of the
exceptions below. Nothing is retried and no partial result is returned.
"""

import json
from typing import Any, Optional


class JsonRpcClientError(RuntimeError):
    """Base class for all errors raised by the JSON-RPC HTTP client."""


class SerializationError(JsonRpcClientError):
    """Raised when request params cannot be encoded as JSON."""


class TransportError(JsonRpcClientError):
    """Raised when the HTTP request cannot be built or the connection fails."""


class HTTPStatusError(JsonRpcClientError):
    """Raised when the HTTP status line is anything other than "200 OK"."""

    def __init__(self, status: str, status_code: Optional[int] = None):
        self.status = status
        self.status_code = status_code
        super().__init__(f"Server reports status: {status}")


class DecodeError(JsonRpcClientError):
    """Raised when the response body is not a well-formed response envelope."""


class RemoteError(JsonRpcClientError):
    """Raised when the server populated the error field of the response.

    The raw error value is kept in ``error``. When the server sent a JSON-RPC
    error object, ``code``, ``message`` and ``data`` mirror its members.
    """

    def __init__(self, error: Any):
        self.error = error
        self.code = None
        self.message = None
        self.data = None
        if isinstance(error, dict):
            self.code = error.get("code")
            self.message = error.get("message")
            self.data = error.get("data")
        super().__init__(render_error_value(error))


class ProtocolError(JsonRpcClientError):
    """Raised when the server reported success but sent no result."""


class CorrelationError(JsonRpcClientError):
    """Raised when the response id does not match the request id."""

    def __init__(self, expected: int, returned: int):
        self.expected = expected
        self.returned = returned
        super().__init__(f"id mismatch: expected={expected} returned={returned}")


class ResultShapeError(JsonRpcClientError):
    """Raised when the result array is empty or its first element is not an object."""


def render_error_value(error: Any) -> str:
    """Render a JSON error value of any type as a message string

    Args:
        error: Decoded JSON value from the response error field

    Returns:
        str: Strings verbatim, everything else as compact JSON
    """
    if isinstance(error, str):
        return error
    try:
        return json.dumps(error, separators=(",", ":"), sort_keys=True)
    except (TypeError, ValueError):
        return repr(error)
