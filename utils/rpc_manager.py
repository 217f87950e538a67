"""
RPC Manager
Builds the Web3 connection used for a deployment
"""

from typing import Dict, Optional
from web3 import Web3
from loguru import logger

from blockchain.errors import NetworkError
from .config_loader import get_rpc_url


class RPCManager:
    """
    Owns the HTTP provider for the configured network
    Verifies connectivity and chain id before anything is signed
    """

    def __init__(self, config: Dict, rpc_url: Optional[str] = None):
        """
        Initialize RPC Manager

        Args:
            config: Launcher configuration
            rpc_url: Endpoint override (default: env var named in config)
        """
        network = config['network']

        self.rpc_url = rpc_url or get_rpc_url(config)
        self.expected_chain_id = network.get('chain_id')
        self.request_timeout = network['request_timeout_seconds']

        self.w3 = Web3(Web3.HTTPProvider(
            self.rpc_url,
            request_kwargs={'timeout': self.request_timeout}
        ))

    def connect(self) -> Web3:
        """
        Check the connection and return the Web3 instance

        Returns:
            Web3 instance

        Raises:
            NetworkError: node unreachable or on the wrong chain
        """
        try:
            connected = self.w3.is_connected()
        except OSError as e:
            raise NetworkError(f"Failed to connect to {self.rpc_url}: {e}") from e

        if not connected:
            logger.error(f"Failed to connect to {self.rpc_url}")
            raise NetworkError(f"Failed to connect to {self.rpc_url}")

        try:
            chain_id = self.w3.eth.chain_id
        except OSError as e:
            raise NetworkError(f"Failed to read chain id: {e}") from e

        if self.expected_chain_id is not None and chain_id != self.expected_chain_id:
            logger.error(f"Chain id mismatch: node={chain_id} expected={self.expected_chain_id}")
            raise NetworkError(
                f"Connected to chain {chain_id}, expected {self.expected_chain_id}"
            )

        logger.success(f"Connected to chain {chain_id}")
        return self.w3

    def is_healthy(self) -> bool:
        """Check if the node answers"""
        try:
            return self.w3.is_connected()
        except Exception:
            return False
