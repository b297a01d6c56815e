"""Chain access: JSON-RPC clients and contract helpers."""

from .client import EthRpc, MockEthRpc, Web3EthRpc
from .erc20 import call_allowance, call_balance_of, call_decimals, call_name, send_approve
from .pool import call_slot0, send_swap
from .wait import wait_for_transaction

__all__ = [
    "EthRpc",
    "Web3EthRpc",
    "MockEthRpc",
    "call_name",
    "call_decimals",
    "call_balance_of",
    "call_allowance",
    "send_approve",
    "call_slot0",
    "send_swap",
    "wait_for_transaction",
]
