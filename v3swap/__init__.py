"""v3swap - ERC20 reads, approvals and UniswapV3 swaps over JSON-RPC."""

from v3swap.errors import DivisionByZero, InvalidInput, PrecisionLossWarning, V3SwapError
from v3swap.networks import GOERLI, MAINNET, NetworkProfile
from v3swap.uniswap_v3 import (
    SwapPlan,
    derive_pool_address,
    plan_swap,
    price_to_sqrt_price_x96,
    sqrt_price_x96_to_price,
)

__version__ = "0.1.0"
__all__ = [
    "derive_pool_address",
    "sqrt_price_x96_to_price",
    "price_to_sqrt_price_x96",
    "plan_swap",
    "SwapPlan",
    "NetworkProfile",
    "MAINNET",
    "GOERLI",
    "V3SwapError",
    "InvalidInput",
    "DivisionByZero",
    "PrecisionLossWarning",
    "__version__",
]
