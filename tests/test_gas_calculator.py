"""
Gas Calculator Tests
"""

from unittest.mock import Mock

import pytest
from web3 import Web3

from blockchain.errors import NetworkError
from utils.gas_calculator import GasCalculator


@pytest.fixture
def calculator(w3, config):
    return GasCalculator(w3, config)


class TestGasLimit:

    def test_buffer_applied(self, calculator, constructor_call):
        """Test estimate is scaled by the gas buffer"""
        assert calculator.estimate_gas_limit(constructor_call, '0x0') == int(100000 * 1.2)
        constructor_call.estimate_gas.assert_called_once_with({'from': '0x0'})

    def test_fallback_on_estimation_error(self, calculator):
        """Test failed estimate returns the default limit"""
        call = Mock()
        call.estimate_gas.side_effect = ValueError("execution reverted")

        assert calculator.estimate_gas_limit(call, '0x0') == 3000000


class TestFeeParams:

    def test_eip1559_when_base_fee_present(self, calculator):
        """Test EIP-1559 fees when the block has a base fee"""
        params = calculator.get_fee_params()

        assert params == {
            'maxFeePerGas': Web3.to_wei(4, 'gwei'),
            'maxPriorityFeePerGas': Web3.to_wei(2, 'gwei'),
        }

    def test_legacy_when_no_base_fee(self, calculator, w3):
        """Test legacy gas price on pre-London blocks"""
        w3.eth.get_block.return_value = {'number': 1}

        params = calculator.get_fee_params()

        assert params == {'gasPrice': 10 ** 9 * 105 // 100}

    def test_legacy_when_eip1559_disabled(self, w3, config):
        """Test legacy gas price when EIP-1559 is turned off"""
        config['gas_settings']['use_eip1559'] = False

        params = GasCalculator(w3, config).get_fee_params()

        assert 'gasPrice' in params
        w3.eth.get_block.assert_not_called()

    def test_fees_capped(self, calculator, w3):
        """Test fees never exceed max_gas_price_gwei"""
        w3.eth.get_block.return_value = {'baseFeePerGas': Web3.to_wei(1000, 'gwei')}

        params = calculator.get_fee_params()

        assert params['maxFeePerGas'] == Web3.to_wei(500, 'gwei')

    def test_network_error(self, calculator, w3):
        """Test connection failure raises NetworkError"""
        w3.eth.get_block.side_effect = ConnectionError("refused")

        with pytest.raises(NetworkError):
            calculator.get_fee_params()
