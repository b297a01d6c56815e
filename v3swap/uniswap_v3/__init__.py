"""UniswapV3 pool math and calldata.

This package provides:
- Pool address derivation (CREATE2 from a canonical pool key)
- sqrtPriceX96 <-> price conversion
- Swap planning (direction, price display, price limit)
- Calldata encoding for ERC20, slot0 and the swap wrapper
"""

from .pool_address import PoolKey, compute_pool_address, derive_pool_address, pool_key
from .price import price_to_sqrt_price_x96, sqrt_price_x96_to_price
from .swap import SwapPlan, plan_swap, sqrt_price_limit_for_direction

__all__ = [
    # Pool address
    "PoolKey",
    "pool_key",
    "compute_pool_address",
    "derive_pool_address",
    # Price
    "sqrt_price_x96_to_price",
    "price_to_sqrt_price_x96",
    # Swap
    "SwapPlan",
    "plan_swap",
    "sqrt_price_limit_for_direction",
]
