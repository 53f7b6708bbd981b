"""
Deployer Core Package
Handles pipeline orchestration and wallet operations
"""

from .deployment_runner import DeploymentRunner, DeploymentStage
from .wallet_manager import WalletManager

__all__ = ['DeploymentRunner', 'DeploymentStage', 'WalletManager']
