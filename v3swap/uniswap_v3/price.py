"""Conversion between sqrtPriceX96 and human-readable prices.

A pool stores its price as

    sqrtPriceX96 = sqrt(token1 / token0) * 2**96

in raw token units. With the tokens' decimal counts the human-scale price of
token0 in token1 is

    price = (sqrtPriceX96 / 2**96) ** 2 * 10 ** (decimals0 - decimals1)

Both directions run in ``decimal.Decimal`` with a 78-digit context: the raw
value spans up to 2**160, so squaring in float would overflow or drop bits.
The result is still approximate. ``price_to_sqrt_price_x96`` truncates and is
not bit-exact with on-chain fixed-point math; do not rely on it where a limit
must never overshoot by one unit.
"""

from __future__ import annotations

import math
import warnings
from decimal import Context, Decimal, localcontext

from v3swap.constants import MAX_DECIMALS, MAX_SQRT_PRICE, PRECISION_WARNING_DECIMALS, Q96
from v3swap.errors import DivisionByZero, InvalidInput, PrecisionLossWarning

# Enough digits for a full uint256 plus headroom for the decimal scaling.
# Each call works in a localcontext copy; the template never changes
PRICE_CONTEXT = Context(prec=78)

_Q96 = Decimal(Q96)


def _validate_decimals(decimals0: int, decimals1: int) -> int:
    """Check both decimal counts and return decimals0 - decimals1."""
    for name, value in (("decimals0", decimals0), ("decimals1", decimals1)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInput(f"{name} must be an integer, got {type(value).__name__}")
        if not 0 <= value <= MAX_DECIMALS:
            raise InvalidInput(f"{name}={value} outside uint8 range")

    shift = decimals0 - decimals1
    if abs(shift) > PRECISION_WARNING_DECIMALS:
        warnings.warn(
            f"Decimal difference of {abs(shift)} exceeds {PRECISION_WARNING_DECIMALS}; "
            "price precision is reduced",
            PrecisionLossWarning,
            stacklevel=3,
        )
    return shift


def sqrt_price_x96_to_price(
    sqrt_price_x96: int,
    decimals0: int,
    decimals1: int,
    inverted: bool = False,
) -> float:
    """Convert a pool's sqrtPriceX96 to a human-scale price.

    Args:
        sqrt_price_x96: sqrt(token1/token0) * 2^96 as read from slot0
        decimals0: Decimals of the pool's token0
        decimals1: Decimals of the pool's token1
        inverted: Return token0 per token1 instead of token1 per token0

    Returns:
        Price as a finite, non-negative float

    Raises:
        InvalidInput: If sqrt_price_x96 is not a uint160, decimals are not
            uint8, or the result does not fit in a float
        DivisionByZero: If inverted and sqrt_price_x96 is zero
    """
    if isinstance(sqrt_price_x96, bool) or not isinstance(sqrt_price_x96, int):
        raise InvalidInput(f"sqrtPriceX96 must be an integer, got {type(sqrt_price_x96).__name__}")
    if not 0 <= sqrt_price_x96 <= MAX_SQRT_PRICE:
        raise InvalidInput(f"sqrtPriceX96 {sqrt_price_x96} outside uint160 range")
    shift = _validate_decimals(decimals0, decimals1)

    if sqrt_price_x96 == 0:
        if inverted:
            raise DivisionByZero("Cannot invert a zero price")
        return 0.0

    with localcontext(PRICE_CONTEXT) as ctx:
        sqrt_ratio = ctx.divide(Decimal(sqrt_price_x96), _Q96)
        price = ctx.multiply(sqrt_ratio, sqrt_ratio).scaleb(shift, ctx)
        if inverted:
            price = ctx.divide(Decimal(1), price)
        result = float(price)

    if math.isinf(result):
        raise InvalidInput(f"Price {price:.6E} is not representable as a float")
    return result


def price_to_sqrt_price_x96(price: float, decimals0: int, decimals1: int) -> int:
    """Convert a human-scale price (token1 per token0) to sqrtPriceX96.

    Approximate: the square root is computed in Decimal and the result is
    truncated toward zero.

    Args:
        price: Price of token0 expressed in token1
        decimals0: Decimals of the pool's token0
        decimals1: Decimals of the pool's token1

    Returns:
        sqrtPriceX96 as an integer

    Raises:
        InvalidInput: If price is negative or not finite, decimals are not
            uint8, or the result does not fit in a uint160
    """
    if isinstance(price, bool) or not isinstance(price, (int, float, Decimal)):
        raise InvalidInput(f"Price must be a number, got {type(price).__name__}")
    value = Decimal(price)
    if not value.is_finite():
        raise InvalidInput(f"Price must be finite, got {price}")
    if value < 0:
        raise InvalidInput(f"Price cannot be negative: {price}")
    shift = _validate_decimals(decimals0, decimals1)

    with localcontext(PRICE_CONTEXT) as ctx:
        raw_ratio = value.scaleb(-shift, ctx)
        sqrt_price_x96 = int(ctx.multiply(raw_ratio.sqrt(ctx), _Q96))

    if sqrt_price_x96 > MAX_SQRT_PRICE:
        raise InvalidInput(f"Price {price} exceeds the uint160 sqrtPriceX96 range")
    return sqrt_price_x96


__all__ = ["PRICE_CONTEXT", "sqrt_price_x96_to_price", "price_to_sqrt_price_x96"]
