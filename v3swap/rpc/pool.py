"""UniswapV3 pool reads and swap submission."""

from __future__ import annotations

import structlog

from v3swap.models.chain import Slot0
from v3swap.uniswap_v3 import encoding
from v3swap.uniswap_v3.swap import SwapPlan

from .client import EthRpc

logger = structlog.get_logger()


def call_slot0(rpc: EthRpc, pool: str) -> Slot0:
    """Read slot0() from a pool."""
    return encoding.decode_slot0(rpc.call(pool, encoding.encode_slot0()))


def send_swap(
    rpc: EthRpc,
    swap_contract: str,
    plan: SwapPlan,
    recipient: str,
    amount_in: int,
    sqrt_price_limit_x96: int,
) -> str:
    """Send an exact-input swap through the swap wrapper contract.

    Args:
        rpc: Client whose account pays token_in (must have approved swap_contract)
        swap_contract: Swap wrapper address
        plan: Pool and direction for the swap
        recipient: Address receiving token_out
        amount_in: Exact amount of token_in, in base units
        sqrt_price_limit_x96: Limit from SwapPlan.sqrt_price_limit

    Returns:
        Transaction hash
    """
    calldata = encoding.encode_swap(
        plan.pool_address,
        recipient,
        plan.zero_for_one,
        amount_in,
        sqrt_price_limit_x96,
    )
    tx_hash = rpc.send_transaction(swap_contract, calldata)
    logger.info(
        "v3_swap_sent",
        pool=plan.pool_address,
        token_in=plan.token_in,
        token_out=plan.token_out,
        zero_for_one=plan.zero_for_one,
        amount_in=amount_in,
        tx_hash=tx_hash,
    )
    return tx_hash


__all__ = ["call_slot0", "send_swap"]
