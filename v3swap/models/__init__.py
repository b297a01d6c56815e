"""Data models for v3swap."""

from v3swap.models.chain import Slot0, TokenInfo
from v3swap.models.types import (
    Address,
    TokenId,
    address_to_bytes,
    checksum,
    is_valid_address,
    normalize_address,
)

__all__ = [
    "Address",
    "TokenId",
    "TokenInfo",
    "Slot0",
    "address_to_bytes",
    "checksum",
    "is_valid_address",
    "normalize_address",
]
