"""
Utilities Package
Configuration, RPC connection and gas pricing
"""

from .config_loader import load_config
from .gas_calculator import GasCalculator
from .rpc_manager import RPCManager

__all__ = [
    'load_config',
    'GasCalculator',
    'RPCManager'
]
