"""
Utilities Package
Configuration, RPC connection, and typed pipeline errors
"""

from .config_loader import load_config, DEFAULT_CONFIG
from .rpc_manager import RPCManager
from .exceptions import (
    DeploymentError,
    ConfigurationError,
    KeyFileNotFoundError,
    InvalidPrivateKeyError,
    RPCConnectionError,
    CompilerNotFoundError,
    CompilationError,
    ContractNotFoundError,
    TransactionSubmissionError,
    TransactionTimeoutError,
    TransactionFailedError,
    ContractStateError,
    ContractCallError
)

__all__ = [
    'load_config',
    'DEFAULT_CONFIG',
    'RPCManager',
    'DeploymentError',
    'ConfigurationError',
    'KeyFileNotFoundError',
    'InvalidPrivateKeyError',
    'RPCConnectionError',
    'CompilerNotFoundError',
    'CompilationError',
    'ContractNotFoundError',
    'TransactionSubmissionError',
    'TransactionTimeoutError',
    'TransactionFailedError',
    'ContractStateError',
    'ContractCallError'
]
