"""
Config Loader
Loads launcher settings from config/launcher_config.json and .env
"""

import copy
import json
import os
from typing import Dict, Optional
from loguru import logger
from dotenv import load_dotenv

from blockchain.errors import ConfigurationError

DEFAULT_CONFIG_PATH = "config/launcher_config.json"

DEFAULT_CONFIG = {
    'deployment': {
        'contract_name': 'Auction',
        'artifacts_dir': 'artifacts',
        'constructor_args': []
    },
    'network': {
        'rpc_url_env': 'RPC_URL',
        'chain_id': None,
        'request_timeout_seconds': 30
    },
    'wallet': {
        'private_key_env': 'DEPLOYER_PRIVATE_KEY',
        'min_balance_ether': 0
    },
    'gas_settings': {
        'gas_limit_buffer': 1.2,
        'default_gas_limit': 3000000,
        'max_gas_price_gwei': 500,
        'priority_fee_gwei': 2,
        'use_eip1559': True
    },
    'confirmation': {
        'timeout_seconds': 300,
        'poll_latency_seconds': 0.5
    },
    'logging': {
        'level': 'INFO',
        'file': None,
        'rotation': '1 day',
        'retention': '7 days'
    }
}


def load_config(config_path: Optional[str] = None) -> Dict:
    """
    Load launcher configuration

    Environment variables are read from .env first. The JSON file is merged
    over the built-in defaults; a missing file means defaults only.

    Args:
        config_path: JSON file (default: $LAUNCHER_CONFIG or config/launcher_config.json)

    Returns:
        Configuration dict
    """
    load_dotenv()

    config_path = config_path or os.getenv('LAUNCHER_CONFIG', DEFAULT_CONFIG_PATH)
    config = copy.deepcopy(DEFAULT_CONFIG)

    if os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                file_config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e

        if not isinstance(file_config, dict):
            raise ConfigurationError(f"{config_path} must contain a JSON object")

        _deep_merge(config, file_config)
        logger.debug(f"Loaded configuration from {config_path}")
    else:
        logger.debug(f"No config file at {config_path}, using defaults")

    if not isinstance(config['deployment']['constructor_args'], list):
        raise ConfigurationError("deployment.constructor_args must be a list")

    if config['gas_settings']['gas_limit_buffer'] < 1:
        raise ConfigurationError("gas_settings.gas_limit_buffer must be >= 1")

    return config


def get_rpc_url(config: Dict) -> str:
    """Resolve the RPC endpoint from the env var named in config"""
    env_name = config['network']['rpc_url_env']
    rpc_url = os.getenv(env_name)

    if not rpc_url:
        raise ConfigurationError(f"{env_name} must be set in .env")

    return rpc_url


def get_private_key(config: Dict) -> str:
    """Resolve the deployer private key from the env var named in config"""
    env_name = config['wallet']['private_key_env']
    private_key = os.getenv(env_name)

    if not private_key:
        raise ConfigurationError(f"{env_name} must be set in .env")

    return private_key


def _deep_merge(base: Dict, override: Dict):
    """Merge override into base in place, recursing into nested dicts"""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
