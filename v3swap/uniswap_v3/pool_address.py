"""Deterministic UniswapV3 pool address derivation.

Pools are deployed by the factory with CREATE2, so a pool's address is a pure
function of its key:

    salt    = keccak256(abi.encode(token0, token1, fee))
    address = keccak256(0xff ++ factory ++ salt ++ initCodeHash)[12:]

where token0 < token1 by unsigned big-endian byte comparison. Whether the
caller's (token_a, token_b) order had to be swapped to reach that canonical
order is reported as ``inverted``; downstream price display and swap
direction must reuse that flag rather than recompute it.
"""

from __future__ import annotations

from dataclasses import dataclass

from eth_abi import encode  # type: ignore[attr-defined]
from eth_utils import keccak, to_checksum_address

from v3swap.constants import MAX_FEE
from v3swap.errors import InvalidInput
from v3swap.models.types import TokenId, address_to_bytes
from v3swap.networks import MAINNET, NetworkProfile

CREATE2_PREFIX = b"\xff"


@dataclass(frozen=True)
class PoolKey:
    """Canonically ordered pool key.

    Attributes:
        token0: Lower token address (raw 20 bytes)
        token1: Higher token address (raw 20 bytes)
        fee: Fee tier in Uniswap units
        inverted: True if the caller passed the tokens in (token1, token0) order
    """

    token0: bytes
    token1: bytes
    fee: int
    inverted: bool

    def salt(self) -> bytes:
        """CREATE2 salt: keccak256 of the three left-padded 32-byte words."""
        return keccak(encode(["address", "address", "uint24"], [self.token0, self.token1, self.fee]))


def _validate_fee(fee: int) -> int:
    if isinstance(fee, bool) or not isinstance(fee, int):
        raise InvalidInput(f"Fee must be an integer, got {type(fee).__name__}")
    if not 0 <= fee <= MAX_FEE:
        raise InvalidInput(f"Fee {fee} outside uint24 range")
    return fee


def pool_key(token_a: TokenId, token_b: TokenId, fee: int) -> PoolKey:
    """Order two tokens canonically and build the pool key.

    Equal tokens are not rejected here; callers pairing tokens must check.

    Raises:
        InvalidInput: If a token is not 20 bytes wide or fee is not a uint24
    """
    a = address_to_bytes(token_a)
    b = address_to_bytes(token_b)
    fee = _validate_fee(fee)

    if a > b:
        return PoolKey(token0=b, token1=a, fee=fee, inverted=True)
    return PoolKey(token0=a, token1=b, fee=fee, inverted=False)


def compute_pool_address(key: PoolKey, network: NetworkProfile = MAINNET) -> str:
    """Compute the CREATE2 address of the pool for a key.

    Returns:
        EIP-55 checksummed pool address
    """
    raw = keccak(
        CREATE2_PREFIX + network.factory_bytes + key.salt() + network.init_code_hash_bytes
    )
    return to_checksum_address(raw[12:])


def derive_pool_address(
    token_a: TokenId,
    token_b: TokenId,
    fee: int,
    network: NetworkProfile = MAINNET,
) -> tuple[bool, str]:
    """Derive the pool for a token pair and fee tier.

    Args:
        token_a: First token as given by the caller (e.g., token in)
        token_b: Second token as given by the caller (e.g., token out)
        fee: Fee tier (e.g., 3000 for 0.3%)
        network: Network whose factory and init code hash to use

    Returns:
        Tuple of (inverted, pool_address)

    Raises:
        InvalidInput: If a token is not 20 bytes wide or fee is not a uint24
    """
    key = pool_key(token_a, token_b, fee)
    return key.inverted, compute_pool_address(key, network)


__all__ = ["PoolKey", "pool_key", "compute_pool_address", "derive_pool_address"]
