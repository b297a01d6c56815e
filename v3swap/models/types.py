"""Shared type definitions and address helpers.

Token and account identifiers travel through the package as ``0x``-prefixed
hex strings. Raw 20-byte values are accepted at the edges and converted with
``address_to_bytes``.
"""

import re
from typing import Annotated, Any

from eth_utils import to_checksum_address
from pydantic import BeforeValidator, Field

from v3swap.errors import InvalidInput

# Width of an Ethereum address in bytes
ADDRESS_LENGTH = 20

# Maximum uint256 value
UINT256_MAX = 2**256 - 1

# 0x-prefixed, exactly 40 hex digits
ADDRESS_PATTERN = re.compile(r"0[xX][0-9a-fA-F]{40}")


def validate_address(value: Any) -> str:
    """Validate an address for pydantic fields and return it checksummed.

    Raises:
        ValueError: If value is not a 20-byte hex address
    """
    if not isinstance(value, str) or not is_valid_address(value):
        raise ValueError(f"Not an address: {value!r}")
    return to_checksum_address(value)


# Ethereum address (40 hex chars after 0x prefix), stored checksummed
Address = Annotated[
    str,
    BeforeValidator(validate_address),
    Field(description="20-byte address as 0x-prefixed hex"),
]

# A token identifier as it may arrive from callers
TokenId = str | bytes


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize an Ethereum address to lowercase.

    Args:
        address: An Ethereum address (with or without 0x prefix)
        validate: If True, raises InvalidInput for invalid addresses.

    Returns:
        Lowercase address with 0x prefix
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise InvalidInput(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address.

    Args:
        address: String to validate

    Returns:
        True if valid Ethereum address format
    """
    if not isinstance(address, str):
        return False
    return ADDRESS_PATTERN.fullmatch(address) is not None


def address_to_bytes(token: TokenId) -> bytes:
    """Convert a token identifier to its 20 raw bytes.

    Args:
        token: 0x-prefixed hex string (any case) or 20 raw bytes

    Returns:
        The 20-byte big-endian address

    Raises:
        InvalidInput: If the identifier is not exactly 20 bytes wide
    """
    if isinstance(token, (bytes, bytearray)):
        if len(token) != ADDRESS_LENGTH:
            raise InvalidInput(f"Address must be {ADDRESS_LENGTH} bytes, got {len(token)}")
        return bytes(token)

    if isinstance(token, str):
        if not is_valid_address(token):
            raise InvalidInput(f"Invalid address: {token!r}")
        return bytes.fromhex(token[2:])

    raise InvalidInput(f"Address must be str or bytes, got {type(token).__name__}")


def checksum(token: TokenId) -> str:
    """Return the EIP-55 checksummed form of a token identifier."""
    return to_checksum_address(address_to_bytes(token))


__all__ = [
    "ADDRESS_LENGTH",
    "UINT256_MAX",
    "ADDRESS_PATTERN",
    "Address",
    "TokenId",
    "validate_address",
    "normalize_address",
    "is_valid_address",
    "address_to_bytes",
    "checksum",
]
