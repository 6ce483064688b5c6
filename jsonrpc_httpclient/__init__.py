"""
JSON-RPC over HTTP client

Encodes a method call into a JSON-RPC 2.0 request envelope, POSTs it to the
remote ``/targetrpc`` endpoint with basic authentication, and decodes the
response envelope into the first object of the server's result array.

Errors are raised as subclasses of JsonRpcClientError.
"""

from jsonrpc_httpclient.adapters.http.client import JsonRpcHttpClient
from jsonrpc_httpclient.config import HttpConfig, ClientConfig
from jsonrpc_httpclient.errors import (
    JsonRpcClientError,
    SerializationError,
    TransportError,
    HTTPStatusError,
    DecodeError,
    RemoteError,
    ProtocolError,
    CorrelationError,
    ResultShapeError,
)

__version__ = "0.1.0"

__all__ = [
    "JsonRpcHttpClient",
    "HttpConfig",
    "ClientConfig",
    "JsonRpcClientError",
    "SerializationError",
    "TransportError",
    "HTTPStatusError",
    "DecodeError",
    "RemoteError",
    "ProtocolError",
    "CorrelationError",
    "ResultShapeError",
]
