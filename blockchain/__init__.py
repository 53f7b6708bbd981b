"""
Blockchain Interaction Package
Handles compilation, deployment, transaction building, and contract calls
"""

from .contract_record import ContractRecord
from .contract_compiler import ContractCompiler
from .transaction_builder import TransactionBuilder
from .contract_deployer import ContractDeployer
from .contract_manager import ContractManager

__all__ = [
    'ContractRecord',
    'ContractCompiler',
    'TransactionBuilder',
    'ContractDeployer',
    'ContractManager'
]
