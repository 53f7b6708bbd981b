"""
Contract Manager
Read and write calls against the deployed token
"""

from web3 import Web3
from web3.exceptions import Web3Exception
from loguru import logger

from utils.exceptions import ContractCallError
from .contract_record import ContractRecord
from .transaction_builder import TransactionBuilder


class ContractManager:
    """
    Issues calls on a deployed contract instance; writes are signed
    through the transaction builder's wallet
    """

    def __init__(self, w3: Web3, tx_builder: TransactionBuilder, record: ContractRecord):
        """
        Initialize Contract Manager

        Args:
            w3: Web3 instance
            tx_builder: Transaction builder
            record: Deployed contract record (instance set)
        """
        self.w3 = w3
        self.tx_builder = tx_builder
        self.record = record

    @property
    def contract(self):
        return self.record.instance

    def get_name(self) -> str:
        """Read name() from the contract"""
        try:
            return self.contract.functions.name().call()
        except (Web3Exception, ValueError) as e:
            raise ContractCallError(f"name() call failed: {e}") from e

    def submit_transfer(self, to_address: str, amount: int) -> str:
        """
        Submit a token transfer

        Args:
            to_address: Recipient
            amount: Amount in the token's smallest unit

        Returns:
            Transaction hash
        """
        transfer = self.contract.functions.transfer(
            Web3.to_checksum_address(to_address),
            amount
        )
        tx = self.tx_builder.build(transfer)
        tx_hash = self.tx_builder.send(tx)

        logger.info(f"transfer tx in progress: {tx_hash}")
        return tx_hash

    def confirm_transfer(self, tx_hash: str):
        """Wait for a submitted transfer; returns the receipt"""
        return self.tx_builder.wait(tx_hash)
