"""
RPC Manager
Single-endpoint JSON-RPC connection to the test network
"""

from decimal import Decimal
from typing import Optional
from web3 import Web3
from loguru import logger

from .exceptions import RPCConnectionError


class RPCManager:
    """
    Owns the one Web3 connection used by every later stage.
    No failover and no retry: an unreachable endpoint ends the run.
    """

    def __init__(self, rpc_url: str):
        """
        Initialize RPC Manager

        Args:
            rpc_url: HTTP(S) JSON-RPC endpoint
        """
        self.rpc_url = rpc_url
        self.w3: Optional[Web3] = None
        self.chain_id: Optional[int] = None

    def connect(self) -> Web3:
        """
        Open the HTTP connection and verify the endpoint answers

        Returns:
            Web3 instance
        """
        w3 = Web3(Web3.HTTPProvider(self.rpc_url))

        if not w3.is_connected():
            raise RPCConnectionError(f"Failed to connect to {self.rpc_url}")

        self.w3 = w3
        self.chain_id = w3.eth.chain_id

        logger.success(f"Connected to {self.rpc_url}")
        logger.info(f"Chain ID: {self.chain_id} | Block: {w3.eth.block_number}")

        return w3

    def get_web3(self) -> Web3:
        """Get the connected Web3 instance"""
        if self.w3 is None:
            raise RPCConnectionError("RPC Manager is not connected")
        return self.w3

    def get_balance(self, address: str) -> Decimal:
        """
        Get native balance of an address

        Args:
            address: Account address

        Returns:
            Balance in ether units
        """
        w3 = self.get_web3()
        balance_wei = w3.eth.get_balance(address)
        return Decimal(str(w3.from_wei(balance_wei, 'ether')))

