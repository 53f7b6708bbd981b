"""
Contract Deployer
Deploys a compiled contract and binds a live handle to it
"""

from typing import List
from web3 import Web3
from loguru import logger

from .contract_record import ContractRecord
from .transaction_builder import TransactionBuilder


class ContractDeployer:
    """Deploys one compiled contract from the wallet's account"""

    def __init__(self, w3: Web3, tx_builder: TransactionBuilder):
        self.w3 = w3
        self.tx_builder = tx_builder

    def submit(self, record: ContractRecord, constructor_args: List) -> str:
        """
        Submit the deployment transaction

        Args:
            record: Compiled contract record
            constructor_args: Constructor arguments, in declaration order

        Returns:
            Deployment transaction hash
        """
        factory = self.w3.eth.contract(abi=record.abi, bytecode=record.bytecode)

        tx = self.tx_builder.build(factory.constructor(*constructor_args))
        record.tx_hash = self.tx_builder.send(tx)

        logger.info(f"deployment tx in progress: {record.tx_hash}")
        return record.tx_hash

    def confirm(self, record: ContractRecord) -> ContractRecord:
        """
        Wait for the deployment and attach the deployed instance

        Args:
            record: Record with tx_hash set

        Returns:
            The same record, with address and instance set
        """
        receipt = self.tx_builder.wait(record.tx_hash)

        record.address = receipt['contractAddress']
        record.instance = self.w3.eth.contract(address=record.address, abi=record.abi)

        logger.success(f"{record.name} deployed at {record.address}")
        logger.info(f"Gas used: {receipt['gasUsed']}")

        return record

    def deploy(self, record: ContractRecord, constructor_args: List) -> ContractRecord:
        """Submit and confirm in one step"""
        self.submit(record, constructor_args)
        return self.confirm(record)
