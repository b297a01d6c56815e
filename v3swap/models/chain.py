"""Values read from chain state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenInfo:
    """ERC20 metadata plus one account's balance."""

    address: str
    name: str
    decimals: int
    balance: int

    def to_units(self, amount: int) -> float:
        """Convert base units to a human-scale amount."""
        return amount / 10**self.decimals


@dataclass(frozen=True)
class Slot0:
    """Decoded result of UniswapV3Pool.slot0()."""

    sqrt_price_x96: int
    tick: int
    observation_index: int
    observation_cardinality: int
    observation_cardinality_next: int
    fee_protocol: int
    unlocked: bool


__all__ = ["TokenInfo", "Slot0"]
