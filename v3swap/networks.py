"""Network profiles.

A NetworkProfile bundles the constants that differ per chain: the Uniswap V3
factory that deploys pools, the pool init code hash used in CREATE2, the
chain id, well-known tokens and the swap wrapper contract. Profiles are
selected once at process start and passed explicitly to the functions that
need them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from v3swap.errors import InvalidInput
from v3swap.models.types import is_valid_address, normalize_address

# keccak256 of the UniswapV3Pool creation code
UNISWAP_V3_POOL_INIT_CODE_HASH = "0xe34f199b19b2b4f47f68442619d555527d244f78a3297ea89325f843f87b8b54"

# UniswapV3Factory (same address on mainnet and the public testnets)
UNISWAP_V3_FACTORY = "0x1F98431c8aD98523631AE4a59f267346ea31F984"


def _validate_token_address(name: str, address: str) -> str:
    """Validate and return a token address.

    Raises:
        InvalidInput: If the address is invalid
    """
    if not is_valid_address(address):
        raise InvalidInput(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return normalize_address(address)


@dataclass(frozen=True)
class NetworkProfile:
    """Per-network constants.

    Attributes:
        name: Short network name (e.g., "mainnet")
        chain_id: EIP-155 chain id
        factory: UniswapV3Factory address
        init_code_hash: 32-byte hash of the pool creation code (0x hex)
        tokens: Well-known token symbol -> lowercase address
        swap_contract: Swap wrapper exposing swap(pool, recipient, zeroForOne,
            amountSpecified, sqrtPriceLimitX96), if one is deployed
    """

    name: str
    chain_id: int
    factory: str = UNISWAP_V3_FACTORY
    init_code_hash: str = UNISWAP_V3_POOL_INIT_CODE_HASH
    tokens: dict[str, str] = field(default_factory=dict)
    swap_contract: str | None = None

    @property
    def factory_bytes(self) -> bytes:
        return bytes.fromhex(self.factory[2:])

    @property
    def init_code_hash_bytes(self) -> bytes:
        return bytes.fromhex(self.init_code_hash[2:])

    def resolve_token(self, token: str) -> str:
        """Resolve a token symbol or address to a lowercase address.

        Args:
            token: A symbol known to this profile (case-insensitive) or an address

        Raises:
            InvalidInput: If the value is neither a known symbol nor an address
        """
        symbol = token.upper()
        if symbol in self.tokens:
            return self.tokens[symbol]
        return normalize_address(token, validate=True)


MAINNET = NetworkProfile(
    name="mainnet",
    chain_id=1,
    tokens={
        "WETH": _validate_token_address("WETH", "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"),
        "USDC": _validate_token_address("USDC", "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"),
        "USDT": _validate_token_address("USDT", "0xdac17f958d2ee523a2206206994597c13d831ec7"),
        "DAI": _validate_token_address("DAI", "0x6b175474e89094c44da98b954eedeac495271d0f"),
        "WBTC": _validate_token_address("WBTC", "0x2260fac5e5542a773aa44fbcfedf7c193bc2c599"),
    },
)

GOERLI = NetworkProfile(
    name="goerli",
    chain_id=5,
    tokens={
        "WETH": _validate_token_address("WETH", "0xb4fbf271143f4fbf7b91a5ded31805e42b2208d6"),
        "USDC": _validate_token_address("USDC", "0x07865c6e87b9f70255377e024ace6630c1eaa37f"),
    },
    swap_contract="0x1aa862951c58aEc5f2745F63575d91BaCCF8fc41",
)

NETWORKS = {profile.name: profile for profile in (MAINNET, GOERLI)}


def get_network(name: str) -> NetworkProfile:
    """Look up a network profile by name.

    Raises:
        InvalidInput: If no profile has that name
    """
    try:
        return NETWORKS[name.lower().strip()]
    except KeyError:
        raise InvalidInput(
            f"Unknown network {name!r} (expected one of: {', '.join(sorted(NETWORKS))})"
        ) from None


__all__ = [
    "UNISWAP_V3_FACTORY",
    "UNISWAP_V3_POOL_INIT_CODE_HASH",
    "NetworkProfile",
    "MAINNET",
    "GOERLI",
    "NETWORKS",
    "get_network",
]
