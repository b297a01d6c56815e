"""End-to-end flows: balances, token info, approval and a single-pool swap.

Each function performs its RPC calls in sequence and lets failures propagate
as V3SwapError subclasses; nothing here exits the process.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from v3swap.constants import DEFAULT_POLL_INTERVAL
from v3swap.errors import ConfigurationError, InvalidInput
from v3swap.models.chain import TokenInfo
from v3swap.models.types import checksum
from v3swap.rpc import erc20
from v3swap.rpc.client import EthRpc
from v3swap.rpc.pool import call_slot0, send_swap
from v3swap.rpc.wait import wait_for_transaction
from v3swap.settings import Settings
from v3swap.uniswap_v3.swap import SwapPlan, plan_swap

logger = structlog.get_logger()


@dataclass(frozen=True)
class SwapReport:
    """Outcome of execute_swap."""

    plan: SwapPlan
    token_in: TokenInfo
    token_out: TokenInfo
    current_price: float
    sqrt_price_limit_x96: int
    swap_tx_hash: str
    approve_tx_hash: str | None = None


def get_eth_balance(rpc: EthRpc, account: str) -> int:
    """Native balance of an account in wei."""
    return rpc.get_balance(checksum(account))


def get_token_info(rpc: EthRpc, token: str, account: str) -> TokenInfo:
    """Read an ERC20's name and decimals plus the account's balance."""
    token = checksum(token)
    info = TokenInfo(
        address=token,
        name=erc20.call_name(rpc, token),
        decimals=erc20.call_decimals(rpc, token),
        balance=erc20.call_balance_of(rpc, token, account),
    )
    logger.debug("token_info", token=token, name=info.name, decimals=info.decimals, balance=info.balance)
    return info


def ensure_allowance(
    rpc: EthRpc,
    token: str,
    owner: str,
    spender: str,
    amount: int,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    timeout: float | None = None,
) -> str | None:
    """Approve spender for amount if the current allowance is lower.

    Waits for the approval to be included before returning.

    Returns:
        The approve transaction hash, or None if no approval was needed
    """
    allowance = erc20.call_allowance(rpc, token, owner, spender)
    if allowance >= amount:
        logger.info("allowance_sufficient", token=token, spender=spender, allowance=allowance)
        return None

    tx_hash = erc20.send_approve(rpc, token, spender, amount)
    wait_for_transaction(rpc, tx_hash, poll_interval=poll_interval, timeout=timeout)
    return tx_hash


def require_account(rpc: EthRpc) -> str:
    """Address of the client's signing account."""
    account = rpc.default_account
    if account is None:
        raise ConfigurationError("A private key is required for this operation")
    return account


def execute_swap(rpc: EthRpc, settings: Settings, amount_in: int | None = None) -> SwapReport:
    """Swap token_in for token_out through the configured fee tier's pool.

    Reads both tokens, approves the swap contract if needed, reads the pool
    price and sends an exact-input swap.

    Args:
        rpc: Client with a signing account
        settings: Tokens, fee, network, swap contract and limit price
        amount_in: Base units to swap; the account's full token_in balance if None

    Raises:
        ConfigurationError: If no signing account or swap contract is available
        InvalidInput: If the tokens are identical or the amount is not positive
        RpcError: If any chain interaction fails
    """
    account = require_account(rpc)
    swap_contract = settings.swap_contract_address

    plan = plan_swap(settings.token_in_address, settings.token_out_address, settings.fee, settings.profile)
    logger.info("v3_pool_resolved", pool=plan.pool_address, fee=plan.fee, inverted=plan.inverted)

    token_in = get_token_info(rpc, plan.token_in, account)
    token_out = get_token_info(rpc, plan.token_out, account)

    if amount_in is None:
        amount_in = token_in.balance
    if amount_in <= 0:
        raise InvalidInput(f"Nothing to swap: amount_in={amount_in} {token_in.name}")

    approve_tx_hash = ensure_allowance(
        rpc,
        plan.token_in,
        account,
        swap_contract,
        amount_in,
        poll_interval=settings.poll_interval,
        timeout=settings.tx_timeout,
    )

    slot0 = call_slot0(rpc, plan.pool_address)
    current_price = plan.price(slot0.sqrt_price_x96, token_in.decimals, token_out.decimals)
    logger.info("v3_pool_price", pool=plan.pool_address, price=current_price, tick=slot0.tick)

    sqrt_price_limit_x96 = plan.sqrt_price_limit(
        settings.limit_price, token_in.decimals, token_out.decimals
    )
    swap_tx_hash = send_swap(rpc, swap_contract, plan, account, amount_in, sqrt_price_limit_x96)

    return SwapReport(
        plan=plan,
        token_in=token_in,
        token_out=token_out,
        current_price=current_price,
        sqrt_price_limit_x96=sqrt_price_limit_x96,
        swap_tx_hash=swap_tx_hash,
        approve_tx_hash=approve_tx_hash,
    )


__all__ = [
    "SwapReport",
    "require_account",
    "get_eth_balance",
    "get_token_info",
    "ensure_allowance",
    "execute_swap",
]
