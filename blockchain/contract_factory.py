"""
Contract Factory
Builds, signs and broadcasts the creation transaction for one artifact
"""

import asyncio
from typing import Dict
from web3 import Web3
from web3.exceptions import Web3Exception
from loguru import logger

from .artifact_store import ContractArtifact
from .errors import NetworkError, TransactionSubmissionError
from .pending_deployment import PendingDeployment


class ContractFactory:
    """
    Deployable contract bound to a network, a deployer wallet and a gas policy
    """

    def __init__(self, w3: Web3, artifact: ContractArtifact, wallet_manager, gas_calculator, config: Dict):
        """
        Initialize Contract Factory

        Args:
            w3: Web3 instance
            artifact: Resolved contract artifact
            wallet_manager: Deployer wallet
            gas_calculator: Gas limit and fee policy
            config: Launcher configuration
        """
        self.w3 = w3
        self.artifact = artifact
        self.wallet_manager = wallet_manager
        self.gas_calculator = gas_calculator

        self.confirmation_timeout = config['confirmation']['timeout_seconds']
        self.poll_latency = config['confirmation']['poll_latency_seconds']

        self.contract = w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)

    async def deploy(self, *constructor_args) -> PendingDeployment:
        """
        Submit the creation transaction (exactly one broadcast)

        Args:
            *constructor_args: Constructor arguments

        Returns:
            PendingDeployment for the broadcast transaction

        Raises:
            TransactionSubmissionError: signing failed or node rejected the tx
            NetworkError: node unreachable
        """
        logger.info(f"Building deployment transaction for {self.artifact.name}...")

        try:
            transaction = await asyncio.to_thread(self._build_transaction, constructor_args)
        except OSError as e:
            logger.error(f"Network error while building transaction: {e}")
            raise NetworkError(f"Network error while building transaction: {e}") from e
        except (ValueError, TypeError, Web3Exception) as e:
            logger.error(f"Error building deployment transaction: {e}")
            raise TransactionSubmissionError(f"Could not build deployment transaction: {e}") from e

        logger.info("Signing transaction...")
        try:
            signed_tx = self.wallet_manager.sign_transaction(transaction)
        except Exception as e:
            raise TransactionSubmissionError(f"Could not sign deployment transaction: {e}") from e

        logger.info("Sending deployment transaction...")
        try:
            tx_hash = await asyncio.to_thread(
                self.w3.eth.send_raw_transaction,
                signed_tx.raw_transaction
            )
        except OSError as e:
            logger.error(f"Network error while broadcasting: {e}")
            raise NetworkError(f"Network error while broadcasting: {e}") from e
        except (ValueError, Web3Exception) as e:
            logger.error(f"Node rejected deployment transaction: {e}")
            raise TransactionSubmissionError(f"Node rejected deployment transaction: {e}") from e

        tx_hash = Web3.to_hex(tx_hash)
        logger.success(f"Transaction sent: {tx_hash}")

        return PendingDeployment(
            self.w3,
            self.artifact.name,
            tx_hash,
            timeout=self.confirmation_timeout,
            poll_latency=self.poll_latency
        )

    def _build_transaction(self, constructor_args) -> Dict:
        """Assemble the unsigned creation transaction (blocking web3 calls)"""
        sender = self.wallet_manager.address

        if not self.wallet_manager.has_sufficient_balance(self.w3):
            raise TransactionSubmissionError(
                f"Deployer {sender} balance is below "
                f"{self.wallet_manager.min_balance_ether} ETH"
            )

        constructor_call = self.contract.constructor(*constructor_args)

        gas_limit = self.gas_calculator.estimate_gas_limit(constructor_call, sender)
        fee_params = self.gas_calculator.get_fee_params()

        tx_params = {
            'from': sender,
            'nonce': self.w3.eth.get_transaction_count(sender, 'pending'),
            'gas': gas_limit,
            'chainId': self.w3.eth.chain_id,
        }
        tx_params.update(fee_params)

        return constructor_call.build_transaction(tx_params)
