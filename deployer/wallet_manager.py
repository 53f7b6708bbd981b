"""
Wallet Manager
Loads the deployer private key from disk and signs transactions
"""

import os
from typing import Dict, Optional
from eth_account import Account
from loguru import logger

from utils.exceptions import KeyFileNotFoundError, InvalidPrivateKeyError


class WalletManager:
    """
    Single signing wallet backed by a private key file.
    The key file holds the raw key string; surrounding whitespace is ignored.
    """

    def __init__(self, key_path: str = "privkey.txt"):
        """
        Initialize wallet manager

        Args:
            key_path: Path to the private key file
        """
        self.key_path = key_path
        self.account = None
        self.address: Optional[str] = None

    def load(self):
        """
        Read the key file and derive the signing account

        Returns:
            eth_account LocalAccount
        """
        if not os.path.exists(self.key_path):
            raise KeyFileNotFoundError(self.key_path)

        try:
            with open(self.key_path, 'r', encoding='utf-8') as f:
                private_key = f.read().strip()
        except UnicodeDecodeError as e:
            raise InvalidPrivateKeyError(f"Key file '{self.key_path}' is not valid UTF-8") from e

        try:
            self.account = Account.from_key(private_key)
        except Exception as e:
            # never echo the key itself
            raise InvalidPrivateKeyError(
                f"Key in '{self.key_path}' is not a valid private key: {type(e).__name__}"
            ) from e

        self.address = self.account.address
        logger.info(f"Deployer wallet: {self.address}")

        return self.account

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the loaded account

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        if self.account is None:
            raise InvalidPrivateKeyError("Wallet not loaded")

        try:
            return self.account.sign_transaction(transaction)
        except Exception as e:
            logger.error(f"Error signing transaction: {e}")
            raise
