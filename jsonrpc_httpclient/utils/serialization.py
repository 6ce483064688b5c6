"""
JSON-RPC envelope serialization/deserialization tools

Provides the request encoder and response decoder used by the HTTP client.
Both sides are stateless: the correlation id generated by the encoder is
returned to the caller, which passes it back into the decoder.
"""

import json
import secrets
from dataclasses import dataclass
from typing import Dict, Any, List, Optional, Tuple, Union, IO

from jsonrpc_httpclient.errors import (
    SerializationError,
    DecodeError,
    RemoteError,
    ProtocolError,
    CorrelationError,
    ResultShapeError,
)

JSONRPC_VERSION = "2.0"
MAX_REQUEST_ID = 2 ** 64 - 1
JSON_WHITESPACE = " \t\n\r"

Body = Union[bytes, bytearray, str, IO]


@dataclass(frozen=True)
class RequestEnvelope:
    """Outgoing request: method, params, correlation id and protocol version"""
    method: str
    params: Any
    id: int
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> Dict[str, Any]:
        # Key order is part of the wire format
        return {
            "method": self.method,
            "params": self.params,
            "id": self.id,
            "jsonrpc": self.jsonrpc,
        }


@dataclass(frozen=True)
class ResponseEnvelope:
    """Incoming response: raw result and error values plus the echoed id"""
    result: Any = None
    error: Any = None
    id: int = 0


def new_request_id() -> int:
    """Generate a random correlation id over the full unsigned 64-bit range"""
    return secrets.randbits(64)


def encode_request(method: str, params: Any, request_id: int) -> bytes:
    """Serialize a JSON-RPC request envelope

    Args:
        method: Name of the remote method
        params: Any JSON-representable value, None is sent as null
        request_id: Correlation id echoed back by the server

    Returns:
        bytes: UTF-8 encoded JSON request

    Raises:
        SerializationError: params (or method) cannot be represented as JSON
    """
    if not isinstance(method, str):
        raise SerializationError(f"method must be a string, got {type(method).__name__}")

    envelope = RequestEnvelope(method=method, params=params, id=request_id)
    try:
        return json.dumps(
            envelope.to_dict(), separators=(",", ":"), allow_nan=False
        ).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(f"cannot encode params for {method!r}: {e}") from e


def prepare_request(method: str, params: Any) -> Tuple[bytes, int]:
    """Generate a fresh correlation id and encode the request with it

    Returns:
        Tuple[bytes, int]: Encoded request and the id it carries
    """
    request_id = new_request_id()
    return encode_request(method, params, request_id), request_id


def _read_body(body: Body) -> str:
    if hasattr(body, "read"):
        body = body.read()
    if isinstance(body, (bytes, bytearray)):
        try:
            return bytes(body).decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"response body is not valid UTF-8: {e}") from e
    if isinstance(body, str):
        return body
    raise DecodeError(f"unsupported response body type: {type(body).__name__}")


def _is_request_id(value: Any) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= MAX_REQUEST_ID
    )


def parse_response(body: Body) -> ResponseEnvelope:
    """Parse a response body into a ResponseEnvelope

    Only the first JSON value of the body is read; anything after it is
    ignored. A missing or null id reads as 0.

    Raises:
        DecodeError: Body is not JSON, not an object, or carries a malformed id
    """
    text = _read_body(body)
    try:
        # Only JSON whitespace may precede the value
        data, _ = json.JSONDecoder().raw_decode(text.lstrip(JSON_WHITESPACE))
    except (ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError and oversized integer literals,
        # RecursionError covers pathologically deep nesting
        raise DecodeError(f"invalid JSON in response: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(f"response is not a JSON object: {type(data).__name__}")

    response_id = data.get("id")
    if response_id is None:
        response_id = 0
    elif not _is_request_id(response_id):
        raise DecodeError(f"response id is not an unsigned 64-bit integer: {response_id!r}")

    return ResponseEnvelope(
        result=data.get("result"),
        error=data.get("error"),
        id=response_id,
    )


def decode_response(body: Body, expected_id: Optional[int]) -> Dict[str, Any]:
    """Decode a response body and unwrap the first result object

    The checks run in protocol order: error field, presence of a result,
    array shape, id correlation, then the shape of the first element.

    Args:
        body: Response body as bytes, str or a readable stream
        expected_id: Id carried by the request this response answers

    Returns:
        Dict: First element of the result array

    Raises:
        DecodeError: Malformed JSON or result is not an array
        RemoteError: Server populated the error field
        ProtocolError: Server returned no result
        CorrelationError: Response id differs from expected_id
        ResultShapeError: Result array empty or first element not an object
    """
    response = parse_response(body)

    # Server-side failure takes precedence over everything else
    if response.error is not None:
        raise RemoteError(response.error)

    # Success without a payload
    if response.result is None:
        raise ProtocolError("server returned no result")

    if not isinstance(response.result, list):
        raise DecodeError(
            f"result is not a JSON array: {type(response.result).__name__}"
        )
    results: List[Any] = response.result

    # Only checked once the result itself is usable
    if response.id != expected_id:
        raise CorrelationError(expected_id, response.id)

    # The server wraps its single result object in an array
    if not results:
        raise ResultShapeError("unexpected result shape: empty result array")
    first = results[0]
    if not isinstance(first, dict):
        raise ResultShapeError(
            f"unexpected result shape: first element is {type(first).__name__}, not an object"
        )
    return first
