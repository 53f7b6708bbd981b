"""
Deployment Runner - Core orchestration logic
Key -> connect -> compile -> deploy -> read -> transfer, once, in order
"""

from enum import Enum
from typing import Dict, Optional
from loguru import logger

from blockchain.contract_record import ContractRecord
from blockchain.contract_compiler import ContractCompiler
from blockchain.transaction_builder import TransactionBuilder
from blockchain.contract_deployer import ContractDeployer
from blockchain.contract_manager import ContractManager

from utils.config_loader import load_config
from utils.rpc_manager import RPCManager

from .wallet_manager import WalletManager


class DeploymentStage(Enum):
    """Pipeline stages; a run only ever moves forward"""

    INIT = 0
    KEY_LOADED = 1
    CONNECTED = 2
    COMPILED = 3
    SUBMITTED = 4
    CONFIRMED = 5
    QUERIED = 6
    TRANSFER_SUBMITTED = 7
    TRANSFER_CONFIRMED = 8
    DONE = 9


class DeploymentRunner:
    """
    Runs the SampleToken deployment pipeline a single time.
    Any failure propagates and leaves `stage` at the last stage reached.
    """

    def __init__(self, config: Optional[Dict] = None):
        """
        Initialize Deployment Runner

        Args:
            config: Deployment config (defaults to load_config())
        """
        self.config = config if config is not None else load_config()

        contract_config = self.config['contract']
        compiler_config = self.config['compiler']

        self.wallet_manager = WalletManager(self.config['private_key_path'])
        self.rpc_manager = RPCManager(self.config['rpc_url'])
        self.compiler = ContractCompiler(
            solc_binary=compiler_config['binary'],
            evm_version=compiler_config['evm_version']
        )
        self.record = ContractRecord(contract_config['path'], contract_config['name'])

        self.w3 = None
        self.tx_builder: Optional[TransactionBuilder] = None
        self.contract_manager: Optional[ContractManager] = None
        self.on_chain_name: Optional[str] = None

        self.stage = DeploymentStage.INIT

    def _advance(self, stage: DeploymentStage):
        if stage.value != self.stage.value + 1:
            raise RuntimeError(f"Illegal transition {self.stage.name} -> {stage.name}")

        logger.debug(f"Stage: {self.stage.name} -> {stage.name}")
        self.stage = stage

    def load_key(self):
        self.wallet_manager.load()
        self._advance(DeploymentStage.KEY_LOADED)

    def connect(self):
        self.w3 = self.rpc_manager.connect()

        balance = self.rpc_manager.get_balance(self.wallet_manager.address)
        logger.info(f"Account balance: {balance} ETH")
        if balance <= 0:
            logger.warning("Deployer balance is zero - transactions will likely be rejected")

        tx_config = self.config['transactions']
        self.tx_builder = TransactionBuilder(
            self.w3,
            self.wallet_manager,
            gas_limit_multiplier=tx_config['gas_limit_multiplier'],
            receipt_timeout=tx_config['receipt_timeout']
        )
        self._advance(DeploymentStage.CONNECTED)

    def compile(self):
        self.compiler.compile(self.record)
        self._advance(DeploymentStage.COMPILED)

    def deploy(self):
        deployer = ContractDeployer(self.w3, self.tx_builder)

        deployer.submit(self.record, self.config['constructor_args'])
        self._advance(DeploymentStage.SUBMITTED)

        deployer.confirm(self.record)
        self._advance(DeploymentStage.CONFIRMED)

        self.contract_manager = ContractManager(self.w3, self.tx_builder, self.record)

    def query(self):
        self.on_chain_name = self.contract_manager.get_name()
        logger.info(f"on-chain contract name: {self.on_chain_name}")
        self._advance(DeploymentStage.QUERIED)

    def transfer(self):
        # nominal amount, sent back to the deployer itself
        tx_hash = self.contract_manager.submit_transfer(self.wallet_manager.address, 1)
        self._advance(DeploymentStage.TRANSFER_SUBMITTED)

        self.contract_manager.confirm_transfer(tx_hash)
        self._advance(DeploymentStage.TRANSFER_CONFIRMED)

        logger.success("transfer completed!")

    def run(self) -> ContractRecord:
        """
        Execute every stage in order

        Returns:
            The fully populated contract record
        """
        logger.info("Starting SampleToken deployment...")

        self.load_key()
        self.connect()
        self.compile()
        self.deploy()
        self.query()
        self.transfer()

        self._advance(DeploymentStage.DONE)
        return self.record
