"""Command line interface.

Usage:
    v3swap pool-address WETH USDC --fee 500 --network mainnet
    v3swap price 1771595571142957166518320255467520 6 18 --inverted
    v3swap balance [ACCOUNT]
    v3swap token WETH [--account ACCOUNT]
    v3swap tokens
    v3swap approve
    v3swap swap [--amount BASE_UNITS]

Commands that touch the chain read their settings from V3SWAP_* environment
variables (see v3swap.settings).
"""

from __future__ import annotations

import argparse
import sys

import structlog

from v3swap.constants import FEE_MEDIUM, FEE_TIERS
from v3swap.errors import ConfigurationError, V3SwapError
from v3swap.log import configure_logging
from v3swap.networks import NETWORKS, get_network
from v3swap.rpc.client import EthRpc, Web3EthRpc
from v3swap.settings import Settings, load_settings
from v3swap.uniswap_v3 import derive_pool_address, sqrt_price_x96_to_price
from v3swap.workflow import (
    ensure_allowance,
    execute_swap,
    get_eth_balance,
    get_token_info,
    require_account,
)

logger = structlog.get_logger()


def make_client(settings: Settings) -> EthRpc:
    """Build the RPC client described by settings."""
    private_key = settings.private_key.get_secret_value() if settings.private_key else None
    return Web3EthRpc(
        settings.rpc_url,
        private_key=private_key,
        chain_id=settings.effective_chain_id,
        gas_limit_multiplier=settings.gas_limit_multiplier,
    )


def _account(args: argparse.Namespace, settings: Settings, rpc: EthRpc) -> str:
    account = getattr(args, "account", None) or settings.account or rpc.default_account
    if account is None:
        raise ConfigurationError("No account given; pass one or set V3SWAP_ACCOUNT / V3SWAP_PRIVATE_KEY")
    return account


def cmd_pool_address(args: argparse.Namespace) -> int:
    network = get_network(args.network)
    token_a = network.resolve_token(args.token_a)
    token_b = network.resolve_token(args.token_b)
    inverted, pool = derive_pool_address(token_a, token_b, args.fee, network)
    print(f"Pool address: {pool}")
    print(f"Inverted: {inverted}")
    return 0


def cmd_price(args: argparse.Namespace) -> int:
    price = sqrt_price_x96_to_price(args.sqrt_price_x96, args.decimals0, args.decimals1, args.inverted)
    print(f"Price: {price:f}")
    return 0


def cmd_balance(args: argparse.Namespace, settings: Settings, rpc: EthRpc) -> int:
    balance = get_eth_balance(rpc, _account(args, settings, rpc))
    print(f"ETH balance: {balance}")
    return 0


def cmd_token(args: argparse.Namespace, settings: Settings, rpc: EthRpc) -> int:
    account = _account(args, settings, rpc)
    tokens = [args.token] if args.token else [settings.token_in, settings.token_out]
    for token in tokens:
        info = get_token_info(rpc, settings.profile.resolve_token(token), account)
        print(f"{info.name}:")
        print(f"\tToken balance: {info.balance}")
        print(f"\tToken decimals: {info.decimals}")
    return 0


def cmd_approve(args: argparse.Namespace, settings: Settings, rpc: EthRpc) -> int:
    account = require_account(rpc)
    info = get_token_info(rpc, settings.token_in_address, account)
    tx_hash = ensure_allowance(
        rpc,
        info.address,
        account,
        settings.swap_contract_address,
        info.balance,
        poll_interval=settings.poll_interval,
        timeout=settings.tx_timeout,
    )
    if tx_hash is not None:
        print(f"Approve TX hash: {tx_hash}")
    print("Token approval complete!")
    return 0


def cmd_swap(args: argparse.Namespace, settings: Settings, rpc: EthRpc) -> int:
    report = execute_swap(rpc, settings, amount_in=args.amount)
    print(f"Pool address: {report.plan.pool_address}")
    print(f"Current price: {report.current_price:f}")
    print(f"Swapping {report.token_in.name} for {report.token_out.name}")
    print(f"Swap TX hash: {report.swap_tx_hash}")
    return 0


RPC_COMMANDS = {
    "balance": cmd_balance,
    "token": cmd_token,
    "tokens": cmd_token,
    "approve": cmd_approve,
    "swap": cmd_swap,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="v3swap",
        description="Read ERC20 state and swap through a UniswapV3 pool",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("pool-address", help="Derive a pool address offline")
    p.add_argument("token_a", help="Token symbol or address")
    p.add_argument("token_b", help="Token symbol or address")
    p.add_argument(
        "--fee",
        type=int,
        default=FEE_MEDIUM,
        help=f"Fee tier, usually one of {FEE_TIERS} (default: {FEE_MEDIUM})",
    )
    p.add_argument("--network", choices=sorted(NETWORKS), default="mainnet")

    p = sub.add_parser("price", help="Convert a sqrtPriceX96 to a price offline")
    p.add_argument("sqrt_price_x96", type=int)
    p.add_argument("decimals0", type=int)
    p.add_argument("decimals1", type=int)
    p.add_argument("--inverted", action="store_true", help="Report token0 per token1")

    p = sub.add_parser("balance", help="ETH balance of an account")
    p.add_argument("account", nargs="?")

    p = sub.add_parser("token", help="ERC20 name, decimals and balance")
    p.add_argument("token", help="Token symbol or address")
    p.add_argument("--account")

    p = sub.add_parser("tokens", help="Token info for the configured swap pair")
    p.add_argument("--account")
    p.set_defaults(token=None)

    sub.add_parser("approve", help="Approve the swap contract for the token_in balance")

    p = sub.add_parser("swap", help="Swap token_in for token_out")
    p.add_argument("--amount", type=int, help="Amount in base units (default: full balance)")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == "pool-address":
            return cmd_pool_address(args)
        if args.command == "price":
            return cmd_price(args)

        settings = load_settings()
        rpc = make_client(settings)
        return RPC_COMMANDS[args.command](args, settings, rpc)
    except V3SwapError as e:
        logger.error("command_failed", command=args.command, error=str(e), error_type=type(e).__name__)
        return 1


if __name__ == "__main__":
    sys.exit(main())
