"""Runtime configuration.

Settings come from ``V3SWAP_``-prefixed environment variables, optionally
seeded from a ``.env`` file:

    V3SWAP_RPC_URL               JSON-RPC endpoint (required)
    V3SWAP_NETWORK               mainnet | goerli (default: goerli)
    V3SWAP_CHAIN_ID              Override the profile's chain id
    V3SWAP_PRIVATE_KEY           Signing key (required for approve/swap)
    V3SWAP_ACCOUNT               Account to report balances for (default: key's address)
    V3SWAP_TOKEN_IN              Symbol or address (default: WETH)
    V3SWAP_TOKEN_OUT             Symbol or address (default: USDC)
    V3SWAP_FEE                   Pool fee tier (default: 10000)
    V3SWAP_SWAP_CONTRACT         Swap wrapper address (default: the profile's)
    V3SWAP_POLL_INTERVAL         Seconds between inclusion checks (default: 5)
    V3SWAP_TX_TIMEOUT            Seconds to wait for inclusion (default: forever)
    V3SWAP_GAS_LIMIT_MULTIPLIER  Headroom on gas estimates (default: 1.25)
    V3SWAP_LIMIT_PRICE           Worst acceptable token_out per token_in (default: none)
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator

from v3swap.constants import DEFAULT_GAS_LIMIT_MULTIPLIER, DEFAULT_POLL_INTERVAL, FEE_HIGH, MAX_FEE
from v3swap.errors import ConfigurationError, InvalidInput
from v3swap.models.types import Address
from v3swap.networks import NETWORKS, NetworkProfile, get_network

ENV_PREFIX = "V3SWAP_"

# 32-byte secp256k1 key, 0x prefix optional
PRIVATE_KEY_PATTERN = re.compile(r"(0[xX])?[0-9a-fA-F]{64}")


class Settings(BaseModel):
    """Validated runtime settings."""

    model_config = ConfigDict(frozen=True, extra="ignore", hide_input_in_errors=True)

    rpc_url: str = Field(min_length=1)
    network: str = "goerli"
    chain_id: int | None = None
    private_key: SecretStr | None = None
    account: Address | None = None

    token_in: str = "WETH"
    token_out: str = "USDC"
    fee: int = Field(default=FEE_HIGH, ge=0, le=MAX_FEE)
    swap_contract: Address | None = None

    poll_interval: float = Field(default=DEFAULT_POLL_INTERVAL, gt=0)
    tx_timeout: float | None = Field(default=None, gt=0)
    gas_limit_multiplier: float = Field(default=DEFAULT_GAS_LIMIT_MULTIPLIER, ge=1)
    limit_price: float | None = Field(default=None, gt=0)

    @field_validator("network")
    @classmethod
    def _known_network(cls, value: str) -> str:
        name = value.lower().strip()
        if name not in NETWORKS:
            raise ValueError(f"unknown network {value!r} (expected one of: {', '.join(sorted(NETWORKS))})")
        return name

    @field_validator("private_key")
    @classmethod
    def _private_key_format(cls, value: SecretStr | None) -> SecretStr | None:
        if value is not None and PRIVATE_KEY_PATTERN.fullmatch(value.get_secret_value()) is None:
            raise ValueError("private key must be 32 bytes of hex")
        return value

    @property
    def profile(self) -> NetworkProfile:
        return get_network(self.network)

    @property
    def effective_chain_id(self) -> int:
        return self.chain_id if self.chain_id is not None else self.profile.chain_id

    def _resolve(self, name: str, token: str) -> str:
        try:
            return self.profile.resolve_token(token)
        except InvalidInput as e:
            raise ConfigurationError(f"{name}: {e}") from e

    @property
    def token_in_address(self) -> str:
        return self._resolve("token_in", self.token_in)

    @property
    def token_out_address(self) -> str:
        return self._resolve("token_out", self.token_out)

    @property
    def swap_contract_address(self) -> str:
        """Configured swap wrapper, falling back to the network profile's."""
        address = self.swap_contract or self.profile.swap_contract
        if address is None:
            raise ConfigurationError(
                f"No swap contract for network {self.network}; set {ENV_PREFIX}SWAP_CONTRACT"
            )
        return address


def load_settings(
    env: Mapping[str, str] | None = None,
    env_file: str | Path | None = None,
) -> Settings:
    """Load settings from the environment.

    Args:
        env: Mapping to read instead of os.environ (no .env loading)
        env_file: .env file to load first; searched from the working directory if None

    Raises:
        ConfigurationError: If required values are missing or invalid
    """
    if env is None:
        load_dotenv(dotenv_path=env_file)
        env = os.environ

    values = {
        key[len(ENV_PREFIX) :].lower(): value
        for key, value in env.items()
        if key.startswith(ENV_PREFIX) and value != ""
    }

    try:
        return Settings.model_validate(values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


__all__ = ["ENV_PREFIX", "Settings", "load_settings"]
