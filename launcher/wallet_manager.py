"""
Wallet Manager
Holds the deployer account used to sign the creation transaction
"""

from decimal import Decimal
from typing import Dict, Optional
from web3 import Web3
from eth_account import Account
from loguru import logger

from blockchain.errors import ConfigurationError
from utils.config_loader import get_private_key


class WalletManager:
    """
    Manages the single deployer wallet
    """

    def __init__(self, config: Dict, private_key: Optional[str] = None):
        """
        Initialize wallet manager

        Args:
            config: Launcher configuration
            private_key: Key override (default: env var named in config)
        """
        private_key = private_key or get_private_key(config)

        try:
            self.account = Account.from_key(private_key)
        except Exception as e:
            raise ConfigurationError(f"Invalid deployer private key: {e}") from e

        self.address = self.account.address
        self.min_balance_ether = Decimal(str(config['wallet']['min_balance_ether']))

        logger.info(f"Deployer wallet: {self.address}")

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the deployer key

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        try:
            return self.account.sign_transaction(transaction)
        except Exception as e:
            logger.error(f"Error signing transaction: {e}")
            raise

    def get_balance_ether(self, w3: Web3) -> Decimal:
        """Native balance of the deployer in ether"""
        balance_wei = w3.eth.get_balance(self.address)
        return Decimal(str(Web3.from_wei(balance_wei, 'ether')))

    def has_sufficient_balance(self, w3: Web3) -> bool:
        """Compare balance against the configured minimum"""
        balance = self.get_balance_ether(w3)
        logger.info(f"Account balance: {balance} ETH")

        if balance < self.min_balance_ether:
            logger.error(
                f"Insufficient balance for deployment "
                f"(need at least {self.min_balance_ether} ETH)"
            )
            return False

        return True
