"""
HTTP client adapter

JSON-RPC 2.0 client over HTTP POST. Credentials are embedded in the target
URL and sent as a UTF-8 Basic authorization header; the server answers with
a singleton result array.
"""

import time
import logging
from contextlib import nullcontext
from typing import Dict, Any

import requests
from opentelemetry import trace

from jsonrpc_httpclient.adapters.adapter_interface import ClientAdapterInterface
from jsonrpc_httpclient.config import HttpConfig, ClientConfig
from jsonrpc_httpclient.errors import JsonRpcClientError, TransportError, HTTPStatusError
from jsonrpc_httpclient.utils import serialization
from jsonrpc_httpclient.telemetry.tracer import create_span
from jsonrpc_httpclient.telemetry.metrics import record_latency, increment_counter

logger = logging.getLogger(__name__)

HTTP_HEADERS = {"Content-Type": "application/json"}
EXPECTED_STATUS = "200 OK"

class JsonRpcHttpClient(ClientAdapterInterface):
    """
    Sends JSON-RPC requests over HTTP POST and returns the server's result.

    ``id`` holds the correlation id generated by the last encode_request()
    or execute() call. The encode_request()/decode_response() pair reads it
    back, so using that pair from several threads on one client needs
    external locking. execute() keeps its id local to the call.
    """

    def __init__(self,
                 http_config: HttpConfig,
                 enable_metrics: bool = True,
                 enable_tracing: bool = True):
        """Initialize the client

        Args:
            http_config: Credentials and address of the remote endpoint
            enable_metrics: Record OpenTelemetry counters and latency
            enable_tracing: Wrap each call in an OpenTelemetry span
        """
        self.id = 0
        self.http = http_config
        self.enable_metrics = enable_metrics
        self.enable_tracing = enable_tracing
        logger.debug(f"JSON-RPC HTTP client targeting {http_config.redacted_url}")

    @classmethod
    def from_config(cls, config: ClientConfig) -> "JsonRpcHttpClient":
        return cls(
            config.http,
            enable_metrics=config.enable_metrics,
            enable_tracing=config.enable_tracing,
        )

    def encode_request(self, method: str, params: Any) -> bytes:
        """Encode a request and remember its id as the expected response id

        Raises:
            SerializationError: params cannot be represented as JSON
        """
        self.id = serialization.new_request_id()
        return serialization.encode_request(method, params, self.id)

    def decode_response(self, body) -> Dict[str, Any]:
        """Decode a response body against the id of the last encoded request"""
        return serialization.decode_response(body, self.id)

    def execute(self, method: str, params: Any = None) -> Dict[str, Any]:
        """Call a remote method and return the first object of its result array

        Args:
            method: Name of the remote method
            params: JSON-representable parameters

        Returns:
            Dict: Decoded result object

        Raises:
            SerializationError: params cannot be encoded
            TransportError: Connection or request construction failed
            HTTPStatusError: Status line was not "200 OK"
            DecodeError, RemoteError, ProtocolError, CorrelationError,
            ResultShapeError: Response envelope rejected by the decoder
        """
        request_id = serialization.new_request_id()
        self.id = request_id
        attributes = {"method": method}

        try:
            payload = serialization.encode_request(method, params, request_id)
        except JsonRpcClientError as e:
            self._record_error(e, attributes)
            raise

        # Counted only once the payload is ready to go out
        self._increment("rpc.client.requests", attributes)
        start_time = time.time()

        with self._span(method, request_id):
            try:
                result = self._post(payload, request_id)
            except JsonRpcClientError as e:
                self._record_error(e, attributes)
                raise
            finally:
                latency_ms = (time.time() - start_time) * 1000
                if self.enable_metrics:
                    record_latency("rpc.client.latency", latency_ms, attributes)
                logger.debug(f"{method} id={request_id} finished in {latency_ms:.2f}ms")

        self._increment("rpc.client.success", attributes)
        return result

    def call(self, method: str, params: Any = None) -> Dict[str, Any]:
        return self.execute(method, params)

    def close(self) -> None:
        """Nothing to release; every call opens and closes its own connection"""
        pass

    def _post(self, payload: bytes, request_id: int) -> Dict[str, Any]:
        logger.debug(f"POST {self.http.redacted_url} id={request_id} ({len(payload)} bytes)")
        try:
            # Basic credentials go out as UTF-8 bytes, not Latin-1
            with requests.post(self.http.url,
                               data=payload,
                               headers=HTTP_HEADERS,
                               auth=self.http.basic_auth,
                               stream=True) as response:
                # Literal status line comparison; other 2xx codes are failures too
                status = f"{response.status_code} {response.reason}"
                if status != EXPECTED_STATUS:
                    raise HTTPStatusError(status, response.status_code)
                body = response.content
        except (requests.RequestException, UnicodeError) as e:
            raise TransportError(f"request to {self.http.redacted_url} failed: {e}") from e

        logger.debug(f"Received {len(body)} bytes for id={request_id}")
        return serialization.decode_response(body, request_id)

    def _span(self, method: str, request_id: int):
        if not self.enable_tracing:
            return nullcontext()
        return create_span(
            "jsonrpc.execute",
            {
                "rpc.system": "jsonrpc",
                "rpc.method": method,
                # Unsigned 64-bit ids do not fit a signed span attribute
                "rpc.jsonrpc.request_id": str(request_id),
            },
            kind=trace.SpanKind.CLIENT,
        )

    def _increment(self, name: str, attributes: Dict[str, Any]):
        if self.enable_metrics:
            increment_counter(name, 1, attributes)

    def _record_error(self, error: Exception, attributes: Dict[str, Any]):
        if self.enable_metrics:
            increment_counter("rpc.client.errors", 1, {**attributes, "type": type(error).__name__})
