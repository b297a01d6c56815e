"""Tests for swap planning."""

import pytest
from eth_utils import to_checksum_address

from tests.helpers import DAI, USDC, USDC_WETH_500, WETH
from v3swap.constants import MAX_SQRT_RATIO, MIN_SQRT_RATIO
from v3swap.errors import InvalidInput
from v3swap.networks import MAINNET
from v3swap.uniswap_v3 import (
    derive_pool_address,
    plan_swap,
    price_to_sqrt_price_x96,
    sqrt_price_limit_for_direction,
)

# ETH at 2000 USDC in the USDC/WETH pool (token0=USDC, token1=WETH)
SQRT_PRICE_2000 = price_to_sqrt_price_x96(1 / 2000, 6, 18)


class TestPlanSwap:
    """Tests for plan_swap."""

    def test_weth_to_usdc(self):
        plan = plan_swap(WETH, USDC, 500, MAINNET)

        assert plan.inverted is True
        assert plan.zero_for_one is False
        assert plan.pool_address.lower() == USDC_WETH_500
        assert plan.token_in == to_checksum_address(WETH)
        assert plan.token_out == to_checksum_address(USDC)
        assert plan.token0 == to_checksum_address(USDC)
        assert plan.token1 == to_checksum_address(WETH)

    def test_usdc_to_weth(self):
        plan = plan_swap(USDC, WETH, 500, MAINNET)

        assert plan.inverted is False
        assert plan.zero_for_one is True
        assert plan.pool_address.lower() == USDC_WETH_500
        assert plan.token0 == to_checksum_address(USDC)

    def test_matches_derive_pool_address(self):
        plan = plan_swap(DAI, WETH, 3000)
        assert (plan.inverted, plan.pool_address) == derive_pool_address(DAI, WETH, 3000)

    def test_same_token_rejected(self):
        with pytest.raises(InvalidInput):
            plan_swap(WETH, to_checksum_address(WETH), 3000)

    def test_bad_token_rejected(self):
        with pytest.raises(InvalidInput):
            plan_swap(WETH, "0x1234", 3000)


class TestPrice:
    """SwapPlan.price reports token_out per token_in."""

    def test_weth_to_usdc(self):
        plan = plan_swap(WETH, USDC, 500)
        assert plan.price(SQRT_PRICE_2000, 18, 6) == pytest.approx(2000, rel=1e-9)

    def test_usdc_to_weth(self):
        plan = plan_swap(USDC, WETH, 500)
        assert plan.price(SQRT_PRICE_2000, 6, 18) == pytest.approx(1 / 2000, rel=1e-9)

    def test_directions_are_reciprocal(self):
        sell = plan_swap(WETH, USDC, 500).price(SQRT_PRICE_2000, 18, 6)
        buy = plan_swap(USDC, WETH, 500).price(SQRT_PRICE_2000, 6, 18)
        assert sell * buy == pytest.approx(1.0, rel=1e-12)


class TestSqrtPriceLimit:
    """Tests for price limits."""

    def test_direction_bounds(self):
        assert sqrt_price_limit_for_direction(True) == MIN_SQRT_RATIO + 1 == 4295128740
        assert sqrt_price_limit_for_direction(False) == MAX_SQRT_RATIO - 1

    def test_no_limit(self):
        assert plan_swap(USDC, WETH, 500).sqrt_price_limit() == MIN_SQRT_RATIO + 1
        assert plan_swap(WETH, USDC, 500).sqrt_price_limit() == MAX_SQRT_RATIO - 1

    def test_limit_inverted(self):
        """Selling WETH (token1) pushes the pool price up; the limit sits above it."""
        plan = plan_swap(WETH, USDC, 500)
        limit = plan.sqrt_price_limit(1900, decimals_in=18, decimals_out=6)

        assert limit == price_to_sqrt_price_x96(1 / 1900, 6, 18)
        assert limit > SQRT_PRICE_2000
        assert plan.price(limit, 18, 6) == pytest.approx(1900, rel=1e-9)

    def test_limit_zero_for_one(self):
        """Selling USDC (token0) pushes the pool price down; the limit sits below it."""
        plan = plan_swap(USDC, WETH, 500)
        limit = plan.sqrt_price_limit(1 / 2100, decimals_in=6, decimals_out=18)

        assert limit == price_to_sqrt_price_x96(1 / 2100, 6, 18)
        assert limit < SQRT_PRICE_2000

    def test_limit_clamped_to_lower_bound(self):
        plan = plan_swap(USDC, WETH, 500)
        assert plan.sqrt_price_limit(1e-40, 18, 18) == MIN_SQRT_RATIO + 1

    def test_limit_beyond_uint160(self):
        with pytest.raises(InvalidInput):
            plan_swap(WETH, USDC, 500).sqrt_price_limit(1e-40, 18, 18)

    @pytest.mark.parametrize("limit", [0, -1.0])
    def test_non_positive_limit(self, limit):
        with pytest.raises(InvalidInput):
            plan_swap(WETH, USDC, 500).sqrt_price_limit(limit)
