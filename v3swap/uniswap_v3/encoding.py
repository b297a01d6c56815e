"""Calldata encoding and return-data decoding for the contracts we talk to.

Covers the ERC20 methods used by the swap flow, UniswapV3Pool.slot0() and
the swap wrapper contract's swap(...) entry point.
"""

from __future__ import annotations

from typing import Any

from eth_abi import decode, encode  # type: ignore[attr-defined]
from eth_abi.exceptions import DecodingError
from eth_utils import function_signature_to_4byte_selector

from v3swap.errors import DecodeError, InvalidInput
from v3swap.models.chain import Slot0
from v3swap.models.types import UINT256_MAX, TokenId, address_to_bytes

# ERC20 function selectors
# name()
ERC20_NAME_SELECTOR = bytes.fromhex("06fdde03")
# decimals()
ERC20_DECIMALS_SELECTOR = bytes.fromhex("313ce567")
# balanceOf(address)
ERC20_BALANCE_OF_SELECTOR = bytes.fromhex("70a08231")
# allowance(address,address)
ERC20_ALLOWANCE_SELECTOR = bytes.fromhex("dd62ed3e")
# approve(address,uint256)
ERC20_APPROVE_SELECTOR = bytes.fromhex("095ea7b3")

# UniswapV3Pool.slot0()
SLOT0_SELECTOR = bytes.fromhex("3850c7bd")
SLOT0_OUTPUT_TYPES = ["uint160", "int24", "uint16", "uint16", "uint16", "uint8", "bool"]

# Swap wrapper: calls pool.swap and pays from msg.sender in the callback
SWAP_SIGNATURE = "swap(address,address,bool,int256,uint160)"
SWAP_SELECTOR = function_signature_to_4byte_selector(SWAP_SIGNATURE)


def _decode(types: list[str], data: bytes, method: str) -> tuple[Any, ...]:
    try:
        return tuple(decode(types, data))
    except (DecodingError, ValueError) as e:
        raise DecodeError(f"Could not decode {method} return data: {e}") from e


def _check_uint256(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= UINT256_MAX:
        raise InvalidInput(f"{name} {value} outside uint256 range")


def encode_name() -> bytes:
    return ERC20_NAME_SELECTOR


def encode_decimals() -> bytes:
    return ERC20_DECIMALS_SELECTOR


def encode_balance_of(account: TokenId) -> bytes:
    return ERC20_BALANCE_OF_SELECTOR + encode(["address"], [address_to_bytes(account)])


def encode_allowance(owner: TokenId, spender: TokenId) -> bytes:
    return ERC20_ALLOWANCE_SELECTOR + encode(
        ["address", "address"], [address_to_bytes(owner), address_to_bytes(spender)]
    )


def encode_approve(spender: TokenId, amount: int) -> bytes:
    """Encode ERC20.approve(spender, amount)."""
    _check_uint256("amount", amount)
    return ERC20_APPROVE_SELECTOR + encode(
        ["address", "uint256"], [address_to_bytes(spender), amount]
    )


def encode_slot0() -> bytes:
    return SLOT0_SELECTOR


def encode_swap(
    pool: TokenId,
    recipient: TokenId,
    zero_for_one: bool,
    amount_specified: int,
    sqrt_price_limit_x96: int,
) -> bytes:
    """Encode swap wrapper swap(pool, recipient, zeroForOne, amountSpecified, sqrtPriceLimitX96).

    Args:
        pool: Pool to swap through
        recipient: Address receiving the output tokens
        zero_for_one: True to swap token0 for token1
        amount_specified: Positive for exact input, negative for exact output
        sqrt_price_limit_x96: Price limit the swap may not cross

    Returns:
        Calldata bytes including the 4-byte selector
    """
    if not -(2**255) <= amount_specified < 2**255:
        raise InvalidInput(f"amountSpecified {amount_specified} outside int256 range")
    if not 0 <= sqrt_price_limit_x96 < 2**160:
        raise InvalidInput(f"sqrtPriceLimitX96 {sqrt_price_limit_x96} outside uint160 range")

    return SWAP_SELECTOR + encode(
        ["address", "address", "bool", "int256", "uint160"],
        [
            address_to_bytes(pool),
            address_to_bytes(recipient),
            zero_for_one,
            amount_specified,
            sqrt_price_limit_x96,
        ],
    )


def decode_name(data: bytes) -> str:
    return _decode(["string"], data, "name()")[0]


def decode_decimals(data: bytes) -> int:
    return int(_decode(["uint8"], data, "decimals()")[0])


def decode_uint256(data: bytes, method: str = "uint256") -> int:
    return int(_decode(["uint256"], data, method)[0])


def decode_slot0(data: bytes) -> Slot0:
    values = _decode(SLOT0_OUTPUT_TYPES, data, "slot0()")
    return Slot0(
        sqrt_price_x96=int(values[0]),
        tick=int(values[1]),
        observation_index=int(values[2]),
        observation_cardinality=int(values[3]),
        observation_cardinality_next=int(values[4]),
        fee_protocol=int(values[5]),
        unlocked=bool(values[6]),
    )


__all__ = [
    "ERC20_NAME_SELECTOR",
    "ERC20_DECIMALS_SELECTOR",
    "ERC20_BALANCE_OF_SELECTOR",
    "ERC20_ALLOWANCE_SELECTOR",
    "ERC20_APPROVE_SELECTOR",
    "SLOT0_SELECTOR",
    "SWAP_SIGNATURE",
    "SWAP_SELECTOR",
    "encode_name",
    "encode_decimals",
    "encode_balance_of",
    "encode_allowance",
    "encode_approve",
    "encode_slot0",
    "encode_swap",
    "decode_name",
    "decode_decimals",
    "decode_uint256",
    "decode_slot0",
]
