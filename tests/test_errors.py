"""
Tests for the client error taxonomy
"""
import pytest

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
    render_error_value,
)


@pytest.mark.parametrize("error_class", [
    SerializationError,
    TransportError,
    HTTPStatusError,
    DecodeError,
    RemoteError,
    ProtocolError,
    CorrelationError,
    ResultShapeError,
])
def test_common_base(error_class):
    """Every client error can be caught through the base class"""
    assert issubclass(error_class, JsonRpcClientError)
    assert issubclass(error_class, RuntimeError)


class TestRenderErrorValue:
    """Test rendering of server error values"""

    def test_string(self):
        assert render_error_value("bad method") == "bad method"

    def test_object(self):
        rendered = render_error_value({"message": "Method not found", "code": -32601})
        assert rendered == '{"code":-32601,"message":"Method not found"}'

    def test_other_json_types(self):
        assert render_error_value(42) == "42"
        assert render_error_value(False) == "false"
        assert render_error_value(["a", 1]) == '["a",1]'


class TestErrorAttributes:
    """Test structured error attributes"""

    def test_remote_error_without_object(self):
        """Non-object errors leave code and message unset"""
        error = RemoteError("bad method")
        assert str(error) == "bad method"
        assert error.error == "bad method"
        assert error.code is None
        assert error.message is None

    def test_http_status_error(self):
        error = HTTPStatusError("503 Service Unavailable", 503)
        assert str(error) == "Server reports status: 503 Service Unavailable"
        assert error.status == "503 Service Unavailable"
        assert error.status_code == 503

    def test_correlation_error(self):
        error = CorrelationError(42, 43)
        assert str(error) == "id mismatch: expected=42 returned=43"
        assert (error.expected, error.returned) == (42, 43)
