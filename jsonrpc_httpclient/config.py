"""
Configuration for the JSON-RPC HTTP client
"""
import os
from typing import Dict, Any, Tuple
from dataclasses import dataclass
from urllib.parse import quote


TARGET_PATH = "/targetrpc"

_TRUE_VALUES = ("1", "true", "yes", "on")


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE_VALUES


@dataclass
class HttpConfig:
    """Connection settings for the remote JSON-RPC endpoint"""
    user: str
    password: str
    host: str = "localhost"
    port: str = "80"
    ssl: bool = False

    @classmethod
    def from_env(cls, prefix: str = "JSONRPC_") -> "HttpConfig":
        """Create config from environment variables"""
        ssl = _parse_bool(os.getenv(f"{prefix}SSL"))
        return cls(
            user=os.getenv(f"{prefix}USER", ""),
            password=os.getenv(f"{prefix}PASSWORD", ""),
            host=os.getenv(f"{prefix}HOST", "localhost"),
            port=os.getenv(f"{prefix}PORT", "443" if ssl else "80"),
            ssl=ssl,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HttpConfig":
        """Create config from a mapping of {user, password, host, port, ssl}

        ``tls`` is accepted as an alias for ``ssl``.
        """
        ssl = _parse_bool(data.get("ssl", data.get("tls", False)))
        port = data.get("port")
        if port is None:
            port = "443" if ssl else "80"
        return cls(
            user=str(data.get("user", "")),
            password=str(data.get("password", "")),
            host=str(data.get("host", "localhost")),
            port=str(port),
            ssl=ssl,
        )

    @property
    def scheme(self) -> str:
        return "https" if self.ssl else "http"

    @property
    def url(self) -> str:
        """Target URL with the credentials embedded as userinfo"""
        return self._build_url()

    @property
    def basic_auth(self) -> Tuple[bytes, bytes]:
        """Basic auth credentials encoded as UTF-8"""
        return self.user.encode("utf-8"), self.password.encode("utf-8")

    @property
    def redacted_url(self) -> str:
        """Target URL with the password masked, safe for log output"""
        return self._build_url(redact=True)

    def _build_url(self, redact: bool = False) -> str:
        # Reserved characters in credentials must not leak into the authority
        user = quote(self.user, safe="")
        if redact:
            password = "***" if self.password else ""
        else:
            password = quote(self.password, safe="")
        return f"{self.scheme}://{user}:{password}@{self.host}:{self.port}{TARGET_PATH}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, masking the password"""
        return {
            "user": self.user,
            "password": "***" if self.password else "",
            "host": self.host,
            "port": self.port,
            "ssl": self.ssl,
        }


@dataclass
class ClientConfig:
    """Main configuration for the JSON-RPC client"""
    http: HttpConfig

    # Telemetry configuration
    enable_metrics: bool = True
    enable_tracing: bool = True
    service_name: str = "jsonrpc.httpclient"

    @classmethod
    def default(cls) -> "ClientConfig":
        """Create default configuration from the environment"""
        return cls(
            http=HttpConfig.from_env(),
            enable_metrics=not _parse_bool(os.getenv("JSONRPC_DISABLE_METRICS")),
            enable_tracing=not _parse_bool(os.getenv("JSONRPC_DISABLE_TRACING")),
            service_name=os.getenv("JSONRPC_SERVICE_NAME", "jsonrpc.httpclient"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "http": self.http.to_dict(),
            "enable_metrics": self.enable_metrics,
            "enable_tracing": self.enable_tracing,
            "service_name": self.service_name,
        }
