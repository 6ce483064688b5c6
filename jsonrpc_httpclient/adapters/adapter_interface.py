"""
Client adapter interface

Defines the interface a JSON-RPC client transport implements, so calling
code does not depend on how the request reaches the server.
"""

import abc
from typing import Dict, Any

class ClientAdapterInterface(abc.ABC):
    """Methods every client adapter must implement"""

    @abc.abstractmethod
    def call(self, method: str, params: Any = None) -> Dict[str, Any]:
        """Send an RPC request and wait for the response

        Args:
            method: Name of the method to invoke
            params: Method parameters

        Returns:
            Dict: Decoded result object

        Raises:
            JsonRpcClientError: Any transport, protocol or remote failure
        """
        pass

    @abc.abstractmethod
    def close(self) -> None:
        """Close the connection and release resources"""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
