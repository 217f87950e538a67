"""
Deployment Launcher
Performs exactly one contract deployment and reports its outcome
"""

from typing import Dict, Optional
from web3 import Web3
from loguru import logger

from blockchain.artifact_store import ArtifactStore
from blockchain.contract_factory import ContractFactory
from blockchain.errors import DeploymentError
from utils.gas_calculator import GasCalculator
from utils.rpc_manager import RPCManager

from .models import DeploymentResult
from .wallet_manager import WalletManager


class DeploymentLauncher:
    """
    Resolve → submit → await confirmation → report

    A single attempt is made per call. Failures become a failed
    DeploymentResult; nothing is retried.
    """

    def __init__(
        self,
        config: Dict,
        w3: Optional[Web3] = None,
        wallet_manager: Optional[WalletManager] = None,
        artifact_store: Optional[ArtifactStore] = None
    ):
        """
        Initialize Deployment Launcher

        Args:
            config: Launcher configuration
            w3: Connected Web3 instance (default: RPCManager on first use)
            wallet_manager: Deployer wallet (default: key from .env)
            artifact_store: Artifact lookup (default: deployment.artifacts_dir)
        """
        self.config = config
        self.w3 = w3
        self.wallet_manager = wallet_manager
        self.artifact_store = artifact_store or ArtifactStore(
            config['deployment']['artifacts_dir']
        )
        self.constructor_args = config['deployment']['constructor_args']

    def get_contract_factory(self, contract_name: str) -> ContractFactory:
        """
        Resolve an artifact and bind it to the network and deployer

        The artifact is resolved before the node is contacted.

        Raises:
            ArtifactNotFoundError: name unknown to the artifact store
            NetworkError: node unreachable or on the wrong chain
        """
        artifact = self.artifact_store.load(contract_name)

        if self.w3 is None:
            self.w3 = RPCManager(self.config).connect()

        if self.wallet_manager is None:
            self.wallet_manager = WalletManager(self.config)

        return ContractFactory(
            self.w3,
            artifact,
            self.wallet_manager,
            GasCalculator(self.w3, self.config),
            self.config
        )

    async def deploy(self, contract_name: str) -> DeploymentResult:
        """
        Deploy a contract by artifact name

        Args:
            contract_name: Artifact name, e.g. "Auction"

        Returns:
            DeploymentResult (succeeded with address, or failed with error detail)
        """
        logger.info(f"Starting deployment of {contract_name}...")

        try:
            factory = self.get_contract_factory(contract_name)
            pending = await factory.deploy(*self.constructor_args)
            deployed = await pending.wait_for_deployment()

        except DeploymentError as e:
            logger.error(f"Deployment of {contract_name} failed: {e}")
            return DeploymentResult.failure(
                contract_name, e, transaction_hash=e.transaction_hash
            )

        logger.success("✅ Contract deployed successfully!")
        logger.success(f"Transaction hash: {deployed.transaction_hash}")
        logger.success(f"Gas used: {deployed.gas_used}")

        return DeploymentResult.success(
            contract_name,
            deployed.address,
            transaction_hash=deployed.transaction_hash,
            gas_used=deployed.gas_used
        )
