#!/usr/bin/env python
"""
HTTP Client Example

Calls a remote JSON-RPC method using connection settings from the
environment (JSONRPC_USER, JSONRPC_PASSWORD, JSONRPC_HOST, JSONRPC_PORT,
JSONRPC_SSL).

Usage:
    python examples/http_client_example.py getinfo '{"verbose": true}'
"""

import sys
import json
import logging

from jsonrpc_httpclient import ClientConfig, JsonRpcHttpClient, JsonRpcClientError, RemoteError
from jsonrpc_httpclient.telemetry import setup_tracer, setup_metrics

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

def main():
    """Run HTTP client example"""
    method = sys.argv[1] if len(sys.argv) > 1 else "getinfo"
    params = json.loads(sys.argv[2]) if len(sys.argv) > 2 else {}

    config = ClientConfig.default()
    if config.enable_tracing:
        setup_tracer(config.service_name)
    if config.enable_metrics:
        setup_metrics(config.service_name)

    logger.info(f"Calling {method} on {config.http.redacted_url}")

    with JsonRpcHttpClient.from_config(config) as client:
        try:
            result = client.execute(method, params)
        except RemoteError as e:
            logger.error(f"Server rejected {method}: {e}")
            return 1
        except JsonRpcClientError as e:
            logger.error(f"Call failed ({type(e).__name__}): {e}")
            return 1

    logger.info(f"Result: {json.dumps(result, indent=2)}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
