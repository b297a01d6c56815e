"""Shared token constants for tests.

All addresses are lowercase for consistency with normalize_address().

Usage:
    from tests.helpers import WETH, USDC
"""

# =============================================================================
# Mainnet tokens
# =============================================================================

WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"  # Wrapped Ether (18 decimals)
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"  # USD Coin (6 decimals)
DAI = "0x6b175474e89094c44da98b954eedeac495271d0f"  # Dai Stablecoin (18 decimals)
WBTC = "0x2260fac5e5542a773aa44fbcfedf7c193bc2c599"  # Wrapped Bitcoin (8 decimals)

# =============================================================================
# Deployed mainnet UniswapV3 pools (token0/token1 fee)
# =============================================================================

USDC_WETH_500 = "0x88e6a0c2ddd26feeb64f039a2c41296fcb3f5640"
USDC_WETH_3000 = "0x8ad599c3a0ff1de082011efddc58f1908eb6e6d8"
WBTC_WETH_3000 = "0xcbcdf9626bc03e24f779434178a73a0b4bad62ed"

# =============================================================================
# Goerli tokens (match v3swap.networks.GOERLI)
# =============================================================================

GOERLI_WETH = "0xb4fbf271143f4fbf7b91a5ded31805e42b2208d6"
GOERLI_USDC = "0x07865c6e87b9f70255377e024ace6630c1eaa37f"
GOERLI_SWAP_CONTRACT = "0x1aa862951c58aec5f2745f63575d91baccf8fc41"

# =============================================================================
# Accounts
# =============================================================================

# Hardhat default account #0 (LOCAL ONLY, never fund on a public network)
HARDHAT_PRIVKEY0 = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
HARDHAT_ACCOUNT0 = "0xf39fd6e51aad88f6f4ce6ab8827279cfffb92266"

ACCOUNT = "0x69b352cbe6fc5c130b6f62cc8f30b9d7b0dc27d0"


__all__ = [
    "WETH",
    "USDC",
    "DAI",
    "WBTC",
    "USDC_WETH_500",
    "USDC_WETH_3000",
    "WBTC_WETH_3000",
    "GOERLI_WETH",
    "GOERLI_USDC",
    "GOERLI_SWAP_CONTRACT",
    "HARDHAT_PRIVKEY0",
    "HARDHAT_ACCOUNT0",
    "ACCOUNT",
]
