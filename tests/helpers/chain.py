"""Helpers that load canned contract state into a MockEthRpc."""

from eth_abi import encode  # type: ignore[attr-defined]

from v3swap.rpc.client import MockEthRpc
from v3swap.uniswap_v3 import encoding


def add_erc20(
    rpc: MockEthRpc,
    token: str,
    name: str,
    decimals: int,
    balances: dict[str, int] | None = None,
    allowances: dict[tuple[str, str], int] | None = None,
) -> None:
    """Serve name/decimals/balanceOf/allowance for a token."""
    rpc.set_result(token, encoding.encode_name(), encode(["string"], [name]))
    rpc.set_result(token, encoding.encode_decimals(), encode(["uint8"], [decimals]))
    for account, balance in (balances or {}).items():
        rpc.set_result(token, encoding.encode_balance_of(account), encode(["uint256"], [balance]))
    for (owner, spender), allowance in (allowances or {}).items():
        rpc.set_result(
            token, encoding.encode_allowance(owner, spender), encode(["uint256"], [allowance])
        )


def add_slot0(rpc: MockEthRpc, pool: str, sqrt_price_x96: int, tick: int = 0) -> None:
    """Serve slot0() for a pool."""
    rpc.set_result(
        pool,
        encoding.encode_slot0(),
        encode(encoding.SLOT0_OUTPUT_TYPES, [sqrt_price_x96, tick, 0, 1, 1, 0, True]),
    )


__all__ = ["add_erc20", "add_slot0"]
