"""Error classes for v3swap.

Every failure raised by the library derives from V3SwapError so callers can
decide in one place whether to abort, retry or report.
"""


class V3SwapError(Exception):
    """Base error for v3swap operations."""

    pass


class InvalidInput(V3SwapError, ValueError):
    """Argument is malformed or outside its domain.

    Examples: wrong-width token identifier, fee outside uint24, negative price,
    the same token on both sides of a swap.
    """

    pass


class DivisionByZero(V3SwapError, ArithmeticError):
    """Reciprocal requested on a zero price ratio."""

    pass


class ConfigurationError(V3SwapError):
    """Runtime settings are missing or invalid."""

    pass


class RpcError(V3SwapError):
    """JSON-RPC request failed (transport, node or revert)."""

    pass


class DecodeError(V3SwapError):
    """Contract return data could not be ABI-decoded."""

    pass


class TransactionTimeout(V3SwapError):
    """Transaction was not included in a block before the deadline."""

    pass


class PrecisionLossWarning(UserWarning):
    """Price conversion spans a decimal difference too wide for float precision.

    Advisory only: the conversion still returns a value.
    """

    pass


__all__ = [
    "V3SwapError",
    "InvalidInput",
    "DivisionByZero",
    "ConfigurationError",
    "RpcError",
    "DecodeError",
    "TransactionTimeout",
    "PrecisionLossWarning",
]
