"""Tests for the command line interface."""

import pytest

from tests.helpers import ACCOUNT, GOERLI_USDC, GOERLI_WETH, USDC_WETH_500, USDC_WETH_3000, add_slot0
from v3swap import cli
from v3swap.constants import Q96
from v3swap.networks import GOERLI
from v3swap.rpc import MockEthRpc
from v3swap.uniswap_v3 import plan_swap, price_to_sqrt_price_x96


@pytest.fixture
def rpc_env(monkeypatch, goerli_tokens):
    """Route chain commands to goerli_tokens via V3SWAP_* settings."""
    monkeypatch.setenv("V3SWAP_RPC_URL", "http://localhost:8545")
    monkeypatch.setenv("V3SWAP_NETWORK", "goerli")
    monkeypatch.setattr(cli, "make_client", lambda settings: goerli_tokens)
    return goerli_tokens


class TestOfflineCommands:
    def test_pool_address(self, capsys):
        assert cli.main(["pool-address", "WETH", "USDC", "--fee", "500"]) == 0

        out = capsys.readouterr().out
        assert USDC_WETH_500 in out.lower()
        assert "Inverted: True" in out

    def test_pool_address_default_fee(self, capsys):
        assert cli.main(["pool-address", "USDC", "WETH"]) == 0

        out = capsys.readouterr().out
        assert USDC_WETH_3000 in out.lower()
        assert "Inverted: False" in out

    def test_pool_address_bad_token(self):
        assert cli.main(["pool-address", "WETH", "0x1234"]) == 1
        assert cli.main(["pool-address", "0x" + "1_" * 19 + "11", "USDC"]) == 1

    def test_price(self, capsys):
        assert cli.main(["price", str(2 * Q96), "18", "18"]) == 0
        assert "Price: 4.000000" in capsys.readouterr().out

    def test_price_inverted_zero_fails(self):
        assert cli.main(["price", "0", "6", "18", "--inverted"]) == 1


class TestChainCommands:
    def test_missing_rpc_url(self, monkeypatch):
        monkeypatch.delenv("V3SWAP_RPC_URL", raising=False)
        assert cli.main(["balance", ACCOUNT]) == 1

    def test_balance(self, rpc_env, capsys):
        rpc_env.balances[ACCOUNT] = 42
        assert cli.main(["balance", ACCOUNT]) == 0
        assert "ETH balance: 42" in capsys.readouterr().out

    def test_balance_defaults_to_key_account(self, rpc_env, capsys):
        rpc_env.balances[ACCOUNT] = 7
        assert cli.main(["balance"]) == 0
        assert "ETH balance: 7" in capsys.readouterr().out

    def test_balance_without_account(self, monkeypatch):
        monkeypatch.setenv("V3SWAP_RPC_URL", "http://localhost:8545")
        monkeypatch.delenv("V3SWAP_ACCOUNT", raising=False)
        monkeypatch.setattr(cli, "make_client", lambda settings: MockEthRpc())
        assert cli.main(["balance"]) == 1

    def test_token(self, rpc_env, capsys):
        assert cli.main(["token", "WETH"]) == 0
        out = capsys.readouterr().out
        assert "Wrapped Ether:" in out
        assert "Token balance: 1000000000000000000" in out
        assert "Token decimals: 18" in out

    def test_tokens(self, rpc_env, capsys):
        assert cli.main(["tokens"]) == 0
        out = capsys.readouterr().out
        assert "Wrapped Ether:" in out
        assert "USD Coin:" in out

    def test_approve(self, rpc_env, capsys):
        assert cli.main(["approve"]) == 0
        out = capsys.readouterr().out
        assert "Approve TX hash:" in out
        assert "Token approval complete!" in out
        assert len(rpc_env.transactions) == 1

    def test_malformed_private_key(self, rpc_env, monkeypatch):
        monkeypatch.setenv("V3SWAP_PRIVATE_KEY", "not-a-key")
        assert cli.main(["balance", ACCOUNT]) == 1

    def test_approve_requires_signing_key(self, rpc_env, monkeypatch):
        monkeypatch.setenv("V3SWAP_ACCOUNT", "0x" + "11" * 20)
        monkeypatch.setattr(cli, "make_client", lambda settings: MockEthRpc())
        assert cli.main(["approve"]) == 1

    def test_swap(self, rpc_env, capsys):
        plan = plan_swap(GOERLI_WETH, GOERLI_USDC, 10000, GOERLI)
        add_slot0(rpc_env, plan.pool_address, price_to_sqrt_price_x96(1 / 1500, 6, 18))

        assert cli.main(["swap", "--amount", "1000"]) == 0

        out = capsys.readouterr().out
        assert f"Pool address: {plan.pool_address}" in out
        assert "Current price: 1500.000000" in out
        assert "Swapping Wrapped Ether for USD Coin" in out
        assert "Swap TX hash:" in out

    def test_swap_rpc_failure(self, rpc_env):
        # No slot0 configured for the pool
        assert cli.main(["swap"]) == 1


class TestMakeClient:
    def test_builds_web3_client(self):
        from v3swap.rpc.client import Web3EthRpc
        from v3swap.settings import Settings

        settings = Settings(rpc_url="http://localhost:8545", network="goerli", gas_limit_multiplier=1.5)
        client = cli.make_client(settings)

        assert isinstance(client, Web3EthRpc)
        assert client.chain_id == 5
        assert client.gas_limit_multiplier == 1.5
        assert client.default_account is None
