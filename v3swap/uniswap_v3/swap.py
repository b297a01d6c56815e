"""Swap planning for a single UniswapV3 pool.

The canonical token order is computed once, in ``plan_swap``, and the
resulting ``SwapPlan`` answers every question that depends on it: which pool,
which direction (zeroForOne), how to read the pool price from the caller's
point of view, and which sqrtPriceLimitX96 to send.
"""

from __future__ import annotations

from dataclasses import dataclass

from v3swap.constants import MAX_SQRT_RATIO, MIN_SQRT_RATIO
from v3swap.errors import InvalidInput
from v3swap.models.types import TokenId, checksum
from v3swap.networks import MAINNET, NetworkProfile

from .pool_address import compute_pool_address, pool_key
from .price import price_to_sqrt_price_x96, sqrt_price_x96_to_price


def sqrt_price_limit_for_direction(zero_for_one: bool) -> int:
    """Provide a valid sqrtPriceLimitX96 that imposes no limit.

    Uniswap V3 requires direction-consistent bounds:
    - zeroForOne=True  => limit must be > MIN_SQRT_RATIO
    - zeroForOne=False => limit must be < MAX_SQRT_RATIO
    """
    if zero_for_one:
        return MIN_SQRT_RATIO + 1
    return MAX_SQRT_RATIO - 1


def _clamp_limit(sqrt_price_x96: int) -> int:
    return max(MIN_SQRT_RATIO + 1, min(MAX_SQRT_RATIO - 1, sqrt_price_x96))


@dataclass(frozen=True)
class SwapPlan:
    """Direction and pool for swapping token_in into token_out.

    Addresses are EIP-55 checksummed. ``inverted`` is True when token_in is
    the pool's token1, i.e. the swap runs oneForZero.
    """

    token_in: str
    token_out: str
    fee: int
    pool_address: str
    inverted: bool

    @property
    def zero_for_one(self) -> bool:
        """True when swapping the pool's token0 for token1."""
        return not self.inverted

    @property
    def token0(self) -> str:
        return self.token_out if self.inverted else self.token_in

    @property
    def token1(self) -> str:
        return self.token_in if self.inverted else self.token_out

    def _pool_decimals(self, decimals_in: int, decimals_out: int) -> tuple[int, int]:
        if self.inverted:
            return decimals_out, decimals_in
        return decimals_in, decimals_out

    def price(self, sqrt_price_x96: int, decimals_in: int, decimals_out: int) -> float:
        """Price of one token_in in token_out, from the pool's sqrtPriceX96."""
        decimals0, decimals1 = self._pool_decimals(decimals_in, decimals_out)
        return sqrt_price_x96_to_price(sqrt_price_x96, decimals0, decimals1, self.inverted)

    def sqrt_price_limit(
        self,
        limit_price: float | None = None,
        decimals_in: int = 18,
        decimals_out: int = 18,
    ) -> int:
        """sqrtPriceLimitX96 for this swap.

        Args:
            limit_price: Worst acceptable price as token_out per token_in, or
                None for no limit
            decimals_in: Decimals of token_in
            decimals_out: Decimals of token_out

        Returns:
            A limit strictly inside (MIN_SQRT_RATIO, MAX_SQRT_RATIO)

        Raises:
            InvalidInput: If limit_price is not a positive finite number or
                converts beyond the uint160 sqrtPriceX96 range
        """
        if limit_price is None:
            return sqrt_price_limit_for_direction(self.zero_for_one)
        if limit_price <= 0:
            raise InvalidInput(f"Limit price must be positive, got {limit_price}")

        decimals0, decimals1 = self._pool_decimals(decimals_in, decimals_out)
        # Pool price is token1 per token0; token_in per token_out when inverted
        pool_price = 1 / limit_price if self.inverted else limit_price
        return _clamp_limit(price_to_sqrt_price_x96(pool_price, decimals0, decimals1))


def plan_swap(
    token_in: TokenId,
    token_out: TokenId,
    fee: int,
    network: NetworkProfile = MAINNET,
) -> SwapPlan:
    """Canonicalize a token pair once and derive everything the swap needs.

    Raises:
        InvalidInput: If the tokens are malformed, identical, or fee is not a uint24
    """
    key = pool_key(token_in, token_out, fee)
    if key.token0 == key.token1:
        raise InvalidInput(f"Cannot swap a token for itself: {checksum(token_in)}")

    return SwapPlan(
        token_in=checksum(token_in),
        token_out=checksum(token_out),
        fee=fee,
        pool_address=compute_pool_address(key, network),
        inverted=key.inverted,
    )


__all__ = ["SwapPlan", "plan_swap", "sqrt_price_limit_for_direction"]
