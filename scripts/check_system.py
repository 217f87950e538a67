"""
System Check Script
Verifies configuration, node connection, deployer balance and artifact
before a deployment. Never sends a transaction.

Usage: python -m scripts.check_system
"""

import os
import sys
from typing import Dict, Optional
from web3 import Web3
from loguru import logger

from blockchain.artifact_store import ArtifactStore
from blockchain.errors import ArtifactNotFoundError, ConfigurationError
from launcher.wallet_manager import WalletManager
from utils.config_loader import load_config
from utils.rpc_manager import RPCManager


def check_environment_variables(config: Dict) -> bool:
    """Check if the env vars named in config are set"""
    logger.info("Checking environment variables...")

    required_vars = [
        config['network']['rpc_url_env'],
        config['wallet']['private_key_env']
    ]

    missing = [var for var in required_vars if not os.getenv(var)]

    if missing:
        logger.error(f"Missing environment variables: {', '.join(missing)}")
        return False

    logger.success("✓ All environment variables set")
    return True


def check_rpc_connection(config: Dict) -> Optional[Web3]:
    """Connect to the configured node; None on failure"""
    logger.info("Checking RPC connection...")

    try:
        w3 = RPCManager(config).connect()
        logger.success(f"  ✓ Connected (Block: {w3.eth.block_number})")
        return w3
    except Exception as e:
        logger.error(f"  ✗ {e}")
        return None


def check_wallet_balance(config: Dict, w3: Optional[Web3]) -> bool:
    """Check the deployer balance against wallet.min_balance_ether"""
    logger.info("Checking deployer balance...")

    if w3 is None:
        logger.warning("No RPC connection - skipping balance check")
        return False

    try:
        wallet_manager = WalletManager(config)
    except ConfigurationError as e:
        logger.error(f"  ✗ {e}")
        return False

    try:
        sufficient = wallet_manager.has_sufficient_balance(w3)
    except Exception as e:
        logger.error(f"  Error checking deployer balance: {e}")
        return False

    if not sufficient:
        logger.warning(f"  ⚠ Deployer balance low (need at least {wallet_manager.min_balance_ether} ETH)")
        return False

    logger.success("  ✓ Deployer balance sufficient")
    return True


def check_artifact(config: Dict) -> bool:
    """Check that the configured contract artifact resolves"""
    logger.info("Checking contract artifact...")

    artifact_store = ArtifactStore(config['deployment']['artifacts_dir'])
    contract_name = config['deployment']['contract_name']

    try:
        artifact = artifact_store.load(contract_name)
    except ArtifactNotFoundError as e:
        logger.error(f"  ✗ {e}")
        available = artifact_store.list_contracts()
        if available:
            logger.info(f"  Available contracts: {', '.join(available)}")
        else:
            logger.info("  Run 'npx hardhat compile' first")
        return False

    logger.success(f"  ✓ {artifact.source_name}:{artifact.name}")
    return True


def main(config: Optional[Dict] = None) -> int:
    """Run all system checks"""
    logger.info("=" * 70)
    logger.info("Contract Launcher System Check")
    logger.info("=" * 70)

    config = config or load_config()

    results = [
        ("Environment Variables", check_environment_variables(config)),
        ("Contract Artifact", check_artifact(config)),
    ]

    w3 = check_rpc_connection(config)
    results.append(("RPC Connection", w3 is not None))
    results.append(("Deployer Balance", check_wallet_balance(config, w3)))

    # Summary
    logger.info("")
    logger.info("=" * 70)
    logger.info("Summary")
    logger.info("=" * 70)

    passed = sum(1 for _, result in results if result)
    total = len(results)

    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        logger.info(f"  {status}: {name}")

    logger.info("")
    logger.info(f"Total: {passed}/{total} checks passed")

    if passed == total:
        logger.success("✅ Ready to deploy: python main.py")
        return 0

    logger.error("❌ Not ready - fix issues above")
    return 1


if __name__ == "__main__":
    sys.exit(main())
