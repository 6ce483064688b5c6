"""
Client Adapters Module

- http: JSON-RPC 2.0 over HTTP POST
"""

from .adapter_interface import ClientAdapterInterface
from .http import JsonRpcHttpClient

__all__ = [
    "ClientAdapterInterface",
    "JsonRpcHttpClient",
]
