"""ERC20 reads and the approve transaction."""

from __future__ import annotations

import structlog

from v3swap.uniswap_v3 import encoding

from .client import EthRpc

logger = structlog.get_logger()


def call_name(rpc: EthRpc, token: str) -> str:
    """Call name() on an ERC20 token."""
    return encoding.decode_name(rpc.call(token, encoding.encode_name()))


def call_decimals(rpc: EthRpc, token: str) -> int:
    """Call decimals() on an ERC20 token."""
    return encoding.decode_decimals(rpc.call(token, encoding.encode_decimals()))


def call_balance_of(rpc: EthRpc, token: str, account: str) -> int:
    """Call balanceOf(account) on an ERC20 token."""
    data = rpc.call(token, encoding.encode_balance_of(account))
    return encoding.decode_uint256(data, "balanceOf(address)")


def call_allowance(rpc: EthRpc, token: str, owner: str, spender: str) -> int:
    """Call allowance(owner, spender) on an ERC20 token."""
    data = rpc.call(token, encoding.encode_allowance(owner, spender))
    return encoding.decode_uint256(data, "allowance(address,address)")


def send_approve(rpc: EthRpc, token: str, spender: str, amount: int) -> str:
    """Send approve(spender, amount) from the client's account.

    Returns:
        Transaction hash
    """
    tx_hash = rpc.send_transaction(token, encoding.encode_approve(spender, amount))
    logger.info("erc20_approve_sent", token=token, spender=spender, amount=amount, tx_hash=tx_hash)
    return tx_hash


__all__ = ["call_name", "call_decimals", "call_balance_of", "call_allowance", "send_approve"]
