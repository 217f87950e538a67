"""
Pending Deployment
Waits for a broadcast creation transaction to be confirmed on-chain
"""

import asyncio
from dataclasses import dataclass
from web3 import Web3
from web3.exceptions import TimeExhausted, Web3Exception
from loguru import logger

from .errors import NetworkError, TransactionRevertedError


@dataclass(frozen=True)
class DeployedContract:
    """Contract confirmed at an on-chain address"""
    address: str
    transaction_hash: str
    block_number: int
    gas_used: int


class PendingDeployment:
    """
    A broadcast creation transaction that has not been confirmed yet
    """

    def __init__(
        self,
        w3: Web3,
        contract_name: str,
        transaction_hash: str,
        timeout: float = 300,
        poll_latency: float = 0.5
    ):
        """
        Args:
            w3: Web3 instance
            contract_name: Name used in log messages
            transaction_hash: Hex hash returned by the node
            timeout: Seconds to wait for the receipt
            poll_latency: Seconds between receipt polls
        """
        self.w3 = w3
        self.contract_name = contract_name
        self.transaction_hash = transaction_hash
        self.timeout = timeout
        self.poll_latency = poll_latency

    async def wait_for_deployment(self) -> DeployedContract:
        """
        Wait until the contract code exists at its address

        Returns:
            DeployedContract

        Raises:
            TransactionRevertedError: mined with status 0, or no code deployed
            NetworkError: timeout or lost connection
        """
        logger.info("Waiting for confirmation...")

        try:
            receipt = await asyncio.to_thread(
                self.w3.eth.wait_for_transaction_receipt,
                self.transaction_hash,
                timeout=self.timeout,
                poll_latency=self.poll_latency
            )
        except TimeExhausted as e:
            logger.error(f"No receipt for {self.transaction_hash} after {self.timeout}s")
            raise NetworkError(
                f"Transaction {self.transaction_hash} not confirmed within {self.timeout}s",
                transaction_hash=self.transaction_hash
            ) from e
        except OSError as e:
            logger.error(f"Connection lost while waiting for receipt: {e}")
            raise NetworkError(
                f"Connection lost while waiting for {self.transaction_hash}: {e}",
                transaction_hash=self.transaction_hash
            ) from e
        except (ValueError, Web3Exception) as e:
            logger.error(f"Node error while waiting for receipt: {e}")
            raise NetworkError(
                f"Node error while waiting for {self.transaction_hash}: {e}",
                transaction_hash=self.transaction_hash
            ) from e

        if receipt['status'] != 1:
            logger.error(f"❌ Deployment of {self.contract_name} reverted")
            logger.error(f"Transaction hash: {self.transaction_hash}")
            raise TransactionRevertedError(
                f"Transaction {self.transaction_hash} reverted "
                f"(block {receipt.get('blockNumber')}, gas used {receipt.get('gasUsed')})",
                transaction_hash=self.transaction_hash
            )

        contract_address = receipt.get('contractAddress')
        if not contract_address:
            raise TransactionRevertedError(
                f"Receipt for {self.transaction_hash} has no contract address",
                transaction_hash=self.transaction_hash
            )

        contract_address = Web3.to_checksum_address(contract_address)

        try:
            code = await asyncio.to_thread(self.w3.eth.get_code, contract_address)
        except (OSError, ValueError, Web3Exception) as e:
            logger.error(f"Could not read code at {contract_address}: {e}")
            raise NetworkError(
                f"Could not read code at {contract_address}: {e}",
                transaction_hash=self.transaction_hash
            ) from e

        if not code:
            raise TransactionRevertedError(
                f"No contract code at {contract_address}",
                transaction_hash=self.transaction_hash
            )

        logger.success(f"Contract {self.contract_name} confirmed at {contract_address}")
        logger.debug(f"Gas used: {receipt['gasUsed']}, block: {receipt['blockNumber']}")

        return DeployedContract(
            address=contract_address,
            transaction_hash=self.transaction_hash,
            block_number=receipt['blockNumber'],
            gas_used=receipt['gasUsed']
        )
