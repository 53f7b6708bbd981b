"""
Transaction Builder
Builds, signs, submits, and confirms contract transactions
"""

from typing import Dict
from web3 import Web3
from web3.exceptions import TimeExhausted, Web3Exception
from loguru import logger

from utils.exceptions import (
    TransactionSubmissionError,
    TransactionTimeoutError,
    TransactionFailedError
)


class TransactionBuilder:
    """
    Turns web3 contract calls (constructor or function) into signed,
    submitted transactions from the deployer wallet.
    Fee fields are left for web3 to fill from the node.
    """

    def __init__(
        self,
        w3: Web3,
        wallet_manager,
        gas_limit_multiplier: float = 1.2,
        receipt_timeout: float = 120
    ):
        """
        Initialize Transaction Builder

        Args:
            w3: Web3 instance
            wallet_manager: Wallet manager for address and signing
            gas_limit_multiplier: Buffer applied to the gas estimate
            receipt_timeout: Seconds to wait for a receipt
        """
        self.w3 = w3
        self.wallet_manager = wallet_manager
        self.gas_limit_multiplier = gas_limit_multiplier
        self.receipt_timeout = receipt_timeout

    def build(self, contract_call) -> Dict:
        """
        Build a transaction dict for a contract call

        Args:
            contract_call: ContractConstructor or ContractFunction

        Returns:
            Transaction dict
        """
        sender = self.wallet_manager.address

        try:
            nonce = self.w3.eth.get_transaction_count(sender, 'pending')
            gas_estimate = contract_call.estimate_gas({'from': sender})
            gas_limit = int(gas_estimate * self.gas_limit_multiplier)

            tx = contract_call.build_transaction({
                'from': sender,
                'nonce': nonce,
                'gas': gas_limit,
                'chainId': self.w3.eth.chain_id
            })
        except (Web3Exception, ValueError) as e:
            raise TransactionSubmissionError(f"Could not build transaction: {e}") from e

        logger.debug(f"Built tx: nonce={nonce}, gas={gas_limit} (estimate {gas_estimate})")
        return tx

    def send(self, tx: Dict) -> str:
        """
        Sign and submit a transaction

        Args:
            tx: Transaction dict

        Returns:
            0x-prefixed transaction hash
        """
        signed_tx = self.wallet_manager.sign_transaction(tx)

        try:
            tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        except (Web3Exception, ValueError) as e:
            raise TransactionSubmissionError(f"Transaction rejected: {e}") from e

        return self.w3.to_hex(tx_hash)

    def wait(self, tx_hash: str):
        """
        Wait for a transaction to be mined

        Args:
            tx_hash: Transaction hash

        Returns:
            Transaction receipt
        """
        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(
                tx_hash,
                timeout=self.receipt_timeout
            )
        except TimeExhausted as e:
            raise TransactionTimeoutError(
                f"No receipt for {tx_hash} after {self.receipt_timeout}s"
            ) from e

        if receipt['status'] != 1:
            raise TransactionFailedError(f"Transaction {tx_hash} reverted")

        logger.debug(f"Receipt for {tx_hash}: block {receipt['blockNumber']}, gas used {receipt['gasUsed']}")
        return receipt
