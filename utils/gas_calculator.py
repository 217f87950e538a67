"""
Gas Calculator
Gas limit estimation and fee pricing for the creation transaction
"""

from typing import Dict
from web3 import Web3
from loguru import logger

from blockchain.errors import NetworkError


class GasCalculator:
    """
    Calculates gas limit and fee parameters for a deployment
    Prefers EIP-1559 fees when the chain reports a base fee
    """

    def __init__(self, w3: Web3, config: Dict):
        """
        Initialize Gas Calculator

        Args:
            w3: Web3 instance
            config: Launcher configuration
        """
        self.w3 = w3

        gas_settings = config['gas_settings']
        self.gas_limit_buffer = gas_settings['gas_limit_buffer']
        self.default_gas_limit = gas_settings['default_gas_limit']
        self.max_gas_price_gwei = gas_settings['max_gas_price_gwei']
        self.priority_fee_gwei = gas_settings['priority_fee_gwei']
        self.use_eip1559 = gas_settings['use_eip1559']

        logger.debug("Gas Calculator initialized")

    def estimate_gas_limit(self, constructor_call, sender: str) -> int:
        """
        Estimate gas for a constructor call with a safety buffer

        Args:
            constructor_call: Result of Contract.constructor(*args)
            sender: Deployer address

        Returns:
            Gas limit
        """
        try:
            gas_estimate = constructor_call.estimate_gas({'from': sender})
            gas_limit = int(gas_estimate * self.gas_limit_buffer)
        except Exception as e:
            logger.warning(f"Gas estimation failed: {e}, using default")
            gas_limit = self.default_gas_limit

        logger.info(f"Gas limit: {gas_limit}")
        return gas_limit

    def get_fee_params(self) -> Dict[str, int]:
        """
        Get fee fields for the transaction

        Returns:
            Either {'maxFeePerGas', 'maxPriorityFeePerGas'} or {'gasPrice'}, in wei

        Raises:
            NetworkError: node could not be queried
        """
        try:
            if self.use_eip1559:
                latest_block = self.w3.eth.get_block('latest')
                base_fee_wei = latest_block.get('baseFeePerGas')

                if base_fee_wei is not None:
                    params = self.eip1559_fees(
                        base_fee_wei,
                        Web3.to_wei(self.priority_fee_gwei, 'gwei'),
                        Web3.to_wei(self.max_gas_price_gwei, 'gwei')
                    )
                    logger.info(
                        f"Max fee: {Web3.from_wei(params['maxFeePerGas'], 'gwei')} gwei, "
                        f"priority fee: {Web3.from_wei(params['maxPriorityFeePerGas'], 'gwei')} gwei"
                    )
                    return params

                logger.debug("No base fee on latest block, using legacy gas price")

            gas_price_wei = self.legacy_gas_price(
                self.w3.eth.gas_price,
                Web3.to_wei(self.max_gas_price_gwei, 'gwei')
            )
            logger.info(f"Gas price: {Web3.from_wei(gas_price_wei, 'gwei')} gwei")
            return {'gasPrice': gas_price_wei}

        except OSError as e:
            logger.error(f"Error fetching gas price: {e}")
            raise NetworkError(f"Could not fetch gas price: {e}") from e

    @staticmethod
    def eip1559_fees(base_fee_wei: int, priority_fee_wei: int, max_fee_cap_wei: int) -> Dict[str, int]:
        """Max fee = base fee * 2 + tip, capped; tip never exceeds max fee"""
        max_fee_wei = min((base_fee_wei * 2) + priority_fee_wei, max_fee_cap_wei)
        priority_fee_wei = min(priority_fee_wei, max_fee_wei)

        return {
            'maxFeePerGas': int(max_fee_wei),
            'maxPriorityFeePerGas': int(priority_fee_wei)
        }

    @staticmethod
    def legacy_gas_price(network_gas_price_wei: int, max_gas_price_wei: int) -> int:
        """Network gas price plus 5% for faster inclusion, capped"""
        buffered = network_gas_price_wei * 105 // 100
        return int(min(buffered, max_gas_price_wei))
