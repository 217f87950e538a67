"""
Contract Launcher - Main Entry Point
Deploys one compiled contract and reports its address
"""

import asyncio
import sys
from typing import Dict, List, Optional
from loguru import logger

from launcher.deployment_launcher import DeploymentLauncher
from launcher.models import DeploymentResult
from utils.config_loader import load_config

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"


def setup_logging(config: Dict):
    """Configure loguru sinks from the logging section"""
    log_config = config['logging']

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=log_config['level'])

    if log_config.get('file'):
        logger.add(
            log_config['file'],
            rotation=log_config['rotation'],
            retention=log_config['retention'],
            format=FILE_FORMAT,
            level="DEBUG"
        )


def report(result: DeploymentResult) -> int:
    """
    Write the outcome and pick the exit code

    Stdout carries only the address line; failures go to stderr.
    """
    if result.succeeded:
        print(f"Contract deployed to address: {result.address}")
        return 0

    print(result.error_detail, file=sys.stderr)
    return 1


async def main(argv: Optional[List[str]] = None, launcher: Optional[DeploymentLauncher] = None,
               config: Optional[Dict] = None) -> int:
    """
    Run one deployment

    Args:
        argv: Optional [CONTRACT_NAME]; defaults to deployment.contract_name
        launcher: Prebuilt launcher (tests)
        config: Preloaded configuration (tests)

    Returns:
        Process exit code
    """
    argv = sys.argv[1:] if argv is None else argv

    try:
        config = config or load_config()
        setup_logging(config)

        contract_name = argv[0] if argv else config['deployment']['contract_name']
        launcher = launcher or DeploymentLauncher(config)

        result = await launcher.deploy(contract_name)

    except Exception as e:
        logger.opt(exception=True).error(f"Fatal error: {e}")
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1

    return report(result)


def run():
    """Console script entry point"""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
