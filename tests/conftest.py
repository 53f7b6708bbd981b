"""
Shared fixtures: fake network, fake compiler output, log capture
"""

import copy
import json
from decimal import Decimal
from unittest.mock import MagicMock, Mock

import pytest
from loguru import logger
from web3 import Web3

from utils.config_loader import DEFAULT_CONFIG


# Hardhat/Anvil dev account #0
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

DEPLOYED_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
DEPLOY_TX_HASH = b'\x11' * 32
TRANSFER_TX_HASH = b'\x22' * 32

SAMPLE_ABI = [
    {
        "inputs": [
            {"internalType": "string", "name": "_name", "type": "string"},
            {"internalType": "string", "name": "_sym", "type": "string"},
            {"internalType": "uint8", "name": "_dec", "type": "uint8"},
            {"internalType": "uint256", "name": "_ts", "type": "uint256"}
        ],
        "stateMutability": "nonpayable",
        "type": "constructor"
    },
    {
        "inputs": [],
        "name": "name",
        "outputs": [{"internalType": "string", "name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "_to", "type": "address"},
            {"internalType": "uint256", "name": "_value", "type": "uint256"}
        ],
        "name": "transfer",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]

SAMPLE_BIN = "608060405234801561001057600080fd5b50"


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test"""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record['message']), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer .env overrides out of tests"""
    for var in ('DEPLOY_RPC_URL', 'DEPLOY_PRIVATE_KEY_PATH', 'DEPLOY_SOLC_BINARY'):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def solc_output():
    """solc --combined-json abi,bin output for sample.sol"""
    return {
        "contracts": {
            "sample.sol:SampleToken": {
                "abi": SAMPLE_ABI,
                "bin": SAMPLE_BIN
            }
        },
        "version": "0.8.26+commit.8a97fa7a.Linux.g++"
    }


@pytest.fixture
def solc_run(solc_output):
    """Successful subprocess.run result for solc"""
    return Mock(returncode=0, stdout=json.dumps(solc_output), stderr='')


@pytest.fixture
def key_file(tmp_path):
    """Key file with a trailing newline"""
    path = tmp_path / "privkey.txt"
    path.write_text(TEST_PRIVATE_KEY + "\n")
    return path


@pytest.fixture
def config(key_file):
    """Default config pointing at the temp key file"""
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    cfg['private_key_path'] = str(key_file)
    return cfg


@pytest.fixture
def wallet():
    """Loaded wallet stand-in that signs without real crypto"""
    wallet_manager = Mock()
    wallet_manager.address = TEST_ADDRESS
    wallet_manager.sign_transaction.return_value = Mock(raw_transaction=b'\xf8signed')
    return wallet_manager


def _receipt(status=1, contract_address=None):
    return {
        'status': status,
        'contractAddress': contract_address,
        'blockNumber': 100,
        'gasUsed': 21000
    }


@pytest.fixture
def receipt():
    """Receipt factory"""
    return _receipt


@pytest.fixture
def token_instance():
    """Deployed SampleToken handle"""
    instance = MagicMock()
    instance.functions.name.return_value.call.return_value = "The Quantum Cat"

    transfer_call = instance.functions.transfer.return_value
    transfer_call.estimate_gas.return_value = 50000
    transfer_call.build_transaction.side_effect = lambda tx: dict(tx, data='0xa9059cbb')
    return instance


@pytest.fixture
def token_factory():
    """Contract factory returned for abi+bytecode"""
    factory = MagicMock()

    constructor_call = factory.constructor.return_value
    constructor_call.estimate_gas.return_value = 1000000
    constructor_call.build_transaction.side_effect = lambda tx: dict(tx, data='0x6080')
    return factory


@pytest.fixture
def mock_w3(token_factory, token_instance, receipt):
    """Web3 stand-in for a chain that accepts every transaction"""
    w3 = MagicMock()
    w3.to_hex.side_effect = Web3.to_hex
    w3.from_wei.side_effect = Web3.from_wei

    w3.eth.chain_id = 1337
    w3.eth.block_number = 99
    w3.eth.get_transaction_count.return_value = 0
    w3.eth.get_balance.return_value = 10 ** 18

    def contract(**kwargs):
        return token_instance if 'address' in kwargs else token_factory

    w3.eth.contract.side_effect = contract
    w3.eth.send_raw_transaction.side_effect = [DEPLOY_TX_HASH, TRANSFER_TX_HASH]
    w3.eth.wait_for_transaction_receipt.side_effect = [
        _receipt(contract_address=DEPLOYED_ADDRESS),
        _receipt()
    ]
    return w3


@pytest.fixture
def rpc_manager(mock_w3):
    """Connected RPC manager stand-in"""
    manager = Mock()
    manager.connect.return_value = mock_w3
    manager.get_balance.return_value = Decimal('1')
    return manager
