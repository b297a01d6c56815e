"""Test helpers module for shared test utilities.

- constants: Token, pool and account addresses
- chain: Canned contract state for MockEthRpc
"""

from tests.helpers.chain import add_erc20, add_slot0
from tests.helpers.constants import (
    ACCOUNT,
    DAI,
    GOERLI_SWAP_CONTRACT,
    GOERLI_USDC,
    GOERLI_WETH,
    HARDHAT_ACCOUNT0,
    HARDHAT_PRIVKEY0,
    USDC,
    USDC_WETH_500,
    USDC_WETH_3000,
    WBTC,
    WBTC_WETH_3000,
    WETH,
)

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "WBTC",
    "USDC_WETH_500",
    "USDC_WETH_3000",
    "WBTC_WETH_3000",
    "GOERLI_WETH",
    "GOERLI_USDC",
    "GOERLI_SWAP_CONTRACT",
    "HARDHAT_PRIVKEY0",
    "HARDHAT_ACCOUNT0",
    "ACCOUNT",
    # Chain state
    "add_erc20",
    "add_slot0",
]
