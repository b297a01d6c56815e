"""Pytest configuration and fixtures."""

import pytest

from tests.helpers import ACCOUNT, GOERLI_SWAP_CONTRACT, GOERLI_USDC, GOERLI_WETH, add_erc20
from v3swap.rpc.client import MockEthRpc
from v3swap.settings import Settings


@pytest.fixture
def mock_rpc() -> MockEthRpc:
    """MockEthRpc with a signing account and no chain state."""
    return MockEthRpc(account=ACCOUNT)


@pytest.fixture
def goerli_settings() -> Settings:
    """Settings for swapping WETH -> USDC on goerli through the 1% pool."""
    return Settings(rpc_url="http://localhost:8545", network="goerli")


@pytest.fixture
def goerli_tokens(mock_rpc: MockEthRpc) -> MockEthRpc:
    """mock_rpc serving WETH (1 WETH balance, no allowance) and USDC (empty)."""
    add_erc20(
        mock_rpc,
        GOERLI_WETH,
        "Wrapped Ether",
        18,
        balances={ACCOUNT: 10**18},
        allowances={(ACCOUNT, GOERLI_SWAP_CONTRACT): 0},
    )
    add_erc20(mock_rpc, GOERLI_USDC, "USD Coin", 6, balances={ACCOUNT: 0})
    return mock_rpc
