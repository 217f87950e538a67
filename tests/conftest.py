"""
Shared fixtures: launcher config, Hardhat-style artifacts and a mocked node
"""

import copy
import json
from decimal import Decimal
from unittest.mock import Mock

import pytest

from utils.config_loader import DEFAULT_CONFIG

# First contract address Hardhat assigns to account #0
DEPLOYED_ADDRESS = '0x5fbdb2315678afecb367f032d93f642f64180aa3'
DEPLOYER_ADDRESS = '0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266'
TX_HASH_BYTES = b'\xab' * 32
TX_HASH = '0x' + 'ab' * 32

AUCTION_ABI = [
    {
        "inputs": [],
        "stateMutability": "nonpayable",
        "type": "constructor"
    },
    {
        "inputs": [],
        "name": "highestBid",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    }
]


def write_artifact(artifacts_dir, source_path, name, bytecode='0x6080604052348015600f57600080fd5b50'):
    """Write <artifacts_dir>/<source_path>/<name>.json the way Hardhat does"""
    contract_dir = artifacts_dir / source_path
    contract_dir.mkdir(parents=True, exist_ok=True)

    artifact = {
        "_format": "hh-sol-artifact-1",
        "contractName": name,
        "sourceName": source_path,
        "abi": AUCTION_ABI,
        "bytecode": bytecode,
        "deployedBytecode": bytecode,
    }
    (contract_dir / f"{name}.json").write_text(json.dumps(artifact))
    (contract_dir / f"{name}.dbg.json").write_text(json.dumps({"buildInfo": "../build-info/x.json"}))
    return contract_dir / f"{name}.json"


@pytest.fixture
def artifacts_dir(tmp_path):
    """Artifacts directory holding a deployable Auction contract"""
    root = tmp_path / 'artifacts'
    write_artifact(root, 'contracts/Auction.sol', 'Auction')
    return root


@pytest.fixture
def config(artifacts_dir):
    """Default configuration pointed at the temporary artifacts"""
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    cfg['deployment']['artifacts_dir'] = str(artifacts_dir)
    cfg['confirmation']['timeout_seconds'] = 5
    cfg['confirmation']['poll_latency_seconds'] = 0.01
    return cfg


@pytest.fixture
def constructor_call():
    """Mocked Contract.constructor() result"""
    call = Mock()
    call.estimate_gas.return_value = 100000
    call.build_transaction.side_effect = lambda params: dict(params, data='0x6080')
    return call


@pytest.fixture
def w3(constructor_call):
    """Mock Web3 instance for a node that confirms deployments"""
    w3 = Mock()
    w3.eth.chain_id = 31337
    w3.eth.gas_price = 10 ** 9
    w3.eth.get_balance.return_value = 10 ** 18
    w3.eth.get_transaction_count.return_value = 0
    w3.eth.get_block.return_value = {'baseFeePerGas': 10 ** 9}
    w3.eth.contract.return_value.constructor.return_value = constructor_call
    w3.eth.send_raw_transaction.return_value = TX_HASH_BYTES
    w3.eth.wait_for_transaction_receipt.return_value = {
        'status': 1,
        'contractAddress': DEPLOYED_ADDRESS,
        'gasUsed': 123456,
        'blockNumber': 7,
    }
    w3.eth.get_code.return_value = b'\x60\x80\x60\x40'
    return w3


@pytest.fixture
def wallet_manager():
    """Mock deployer wallet"""
    wallet = Mock()
    wallet.address = DEPLOYER_ADDRESS
    wallet.min_balance_ether = Decimal('0')
    wallet.has_sufficient_balance.return_value = True
    wallet.sign_transaction.return_value = Mock(raw_transaction=b'\x02\xf8')
    return wallet
