"""
HTTP Adapter Package

JSON-RPC 2.0 client over HTTP POST with basic authentication.
"""

from jsonrpc_httpclient.adapters.http.client import JsonRpcHttpClient

__all__ = ["JsonRpcHttpClient"]
