"""
Launcher Package
Drives a single contract deployment and models its outcome
"""

from .deployment_launcher import DeploymentLauncher
from .models import DeploymentResult
from .wallet_manager import WalletManager

__all__ = ['DeploymentLauncher', 'DeploymentResult', 'WalletManager']
