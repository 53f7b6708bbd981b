"""
Exceptions
Typed failures for every stage of the deployment pipeline
"""


class DeploymentError(Exception):
    """Base exception for all deployment pipeline failures."""

    pass


class ConfigurationError(DeploymentError, ValueError):
    """Raised when the deployment config file cannot be read."""

    pass


class KeyFileNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when the private key file does not exist."""

    def __init__(self, path: str):
        super().__init__(f"private key '{path}' was not found! exiting.")
        self.path = path


class InvalidPrivateKeyError(DeploymentError, ValueError):
    """Raised when the key file contents cannot derive an account."""

    pass


class RPCConnectionError(DeploymentError, ConnectionError):
    """Raised when the RPC endpoint is unreachable."""

    pass


class CompilerNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when the solc binary is not on PATH."""

    pass


class CompilationError(DeploymentError, RuntimeError):
    """Raised when solc fails or prints something that is not JSON."""

    pass


class ContractNotFoundError(DeploymentError, KeyError):
    """Raised when the compiler output has no entry for the contract."""

    def __str__(self):
        # KeyError wraps its message in quotes
        return str(self.args[0]) if self.args else ""


class TransactionSubmissionError(DeploymentError, RuntimeError):
    """Raised when a transaction is rejected before it is mined."""

    pass


class TransactionTimeoutError(DeploymentError, TimeoutError):
    """Raised when no receipt arrives within the timeout."""

    pass


class TransactionFailedError(DeploymentError, RuntimeError):
    """Raised when a mined transaction reports a failed status."""

    pass


class ContractStateError(DeploymentError, RuntimeError):
    """Raised when a contract record field is set out of order or twice."""

    pass


class ContractCallError(DeploymentError, RuntimeError):
    """Raised when a read-only contract call fails."""

    pass
