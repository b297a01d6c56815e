"""Protocol constants shared across the package.

Network-specific addresses live in ``v3swap.networks``; this module only holds
values that are the same on every chain.
"""

# sqrtPriceX96 fixed-point scale
Q96 = 2**96

# Largest value a uint160 sqrtPriceX96 can hold
MAX_SQRT_PRICE = 2**160 - 1

# Uniswap V3 sqrt price bounds (from TickMath)
MIN_SQRT_RATIO = 4295128739
MAX_SQRT_RATIO = 1461446703485210103287273052203988822378723970342

# Fee tiers in Uniswap units (hundredths of a basis point)
# Fee = units / 1,000,000 (e.g., 3000 = 0.3%)
FEE_LOWEST = 100  # 0.01%
FEE_LOW = 500  # 0.05%
FEE_MEDIUM = 3000  # 0.30%
FEE_HIGH = 10000  # 1.00%

FEE_TIERS = [FEE_LOWEST, FEE_LOW, FEE_MEDIUM, FEE_HIGH]

# Fee is a uint24 on-chain
MAX_FEE = 2**24 - 1

# ERC20 decimals() is a uint8
MAX_DECIMALS = 255

# Decimal-count differences beyond this lose meaningful float precision
PRECISION_WARNING_DECIMALS = 18

# Seconds between inclusion checks while waiting for a transaction
DEFAULT_POLL_INTERVAL = 5.0

# Gas estimate headroom applied before signing
DEFAULT_GAS_LIMIT_MULTIPLIER = 1.25

__all__ = [
    "Q96",
    "MAX_SQRT_PRICE",
    "MIN_SQRT_RATIO",
    "MAX_SQRT_RATIO",
    "FEE_LOWEST",
    "FEE_LOW",
    "FEE_MEDIUM",
    "FEE_HIGH",
    "FEE_TIERS",
    "MAX_FEE",
    "MAX_DECIMALS",
    "PRECISION_WARNING_DECIMALS",
    "DEFAULT_POLL_INTERVAL",
    "DEFAULT_GAS_LIMIT_MULTIPLIER",
]
