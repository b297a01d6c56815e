"""Ethereum JSON-RPC client implementations.

Everything above this module talks to the chain through the narrow EthRpc
protocol: read calls, signed transaction submission, balance and inclusion
lookups. Web3EthRpc is the real implementation; MockEthRpc serves canned
responses for tests.
"""

from __future__ import annotations

from typing import Any, Protocol

import structlog

from v3swap.constants import DEFAULT_GAS_LIMIT_MULTIPLIER
from v3swap.errors import ConfigurationError, RpcError
from v3swap.models.types import normalize_address

logger = structlog.get_logger()


class EthRpc(Protocol):
    """Protocol for chain access used by the ERC20, pool and workflow helpers."""

    @property
    def default_account(self) -> str | None:
        """Address transactions are sent from, if a key is loaded."""
        ...

    def get_balance(self, address: str) -> int:
        """Native balance of an address in wei."""
        ...

    def call(self, to: str, data: bytes) -> bytes:
        """eth_call against the latest block; returns raw return data."""
        ...

    def send_transaction(self, to: str, data: bytes, value: int = 0) -> str:
        """Sign and broadcast a transaction; returns its hash as 0x hex."""
        ...

    def get_transaction_block_hash(self, tx_hash: str) -> str | None:
        """Block hash a transaction was included in, or None while pending."""
        ...


class Web3EthRpc:
    """EthRpc backed by web3.py over HTTP, signing locally with eth_account."""

    def __init__(
        self,
        rpc_url: str,
        private_key: str | None = None,
        chain_id: int | None = None,
        gas_limit_multiplier: float = DEFAULT_GAS_LIMIT_MULTIPLIER,
        w3: Any = None,
    ):
        """Initialize the client.

        Args:
            rpc_url: HTTP RPC URL (e.g., "https://rpc.ankr.com/eth_goerli")
            private_key: Hex private key for signing; read-only client if None
            chain_id: Chain id for signing; fetched from the node if None
            gas_limit_multiplier: Headroom applied to eth_estimateGas
            w3: Preconfigured Web3 instance (overrides rpc_url)
        """
        from eth_account import Account
        from web3 import Web3

        self.rpc_url = rpc_url
        self.w3 = w3 if w3 is not None else Web3(Web3.HTTPProvider(rpc_url))
        try:
            self.account = Account.from_key(private_key) if private_key else None
        except ValueError as e:
            raise ConfigurationError("Private key is not a valid secp256k1 key") from e
        self.chain_id = chain_id
        self.gas_limit_multiplier = gas_limit_multiplier

    @property
    def default_account(self) -> str | None:
        return self.account.address if self.account is not None else None

    def get_balance(self, address: str) -> int:
        from web3 import Web3

        try:
            return int(self.w3.eth.get_balance(Web3.to_checksum_address(address)))
        except Exception as e:
            raise RpcError(f"eth_getBalance failed for {address}: {e}") from e

    def call(self, to: str, data: bytes) -> bytes:
        from web3 import Web3

        try:
            result = self.w3.eth.call(
                {"to": Web3.to_checksum_address(to), "data": "0x" + data.hex()},
                "latest",
            )
        except Exception as e:
            logger.debug("rpc_call_failed", to=to, selector=data[:4].hex(), error=str(e))
            raise RpcError(f"eth_call to {to} failed: {e}") from e
        return bytes(result)

    def send_transaction(self, to: str, data: bytes, value: int = 0) -> str:
        """Sign and broadcast a transaction.

        Fills nonce, chain id, EIP-1559 fee fields (legacy gasPrice when the
        node reports no base fee) and a gas limit from eth_estimateGas scaled
        by gas_limit_multiplier.

        Raises:
            ConfigurationError: If no private key was configured
            RpcError: If any RPC step fails
        """
        from web3 import Web3

        if self.account is None:
            raise ConfigurationError("A private key is required to send transactions")

        sender = self.account.address
        tx: dict[str, Any] = {
            "from": sender,
            "to": Web3.to_checksum_address(to),
            "data": "0x" + data.hex(),
            "value": value,
        }

        try:
            tx["nonce"] = self.w3.eth.get_transaction_count(sender, "pending")
            tx["chainId"] = self.chain_id if self.chain_id is not None else self.w3.eth.chain_id
            self._fill_fees(tx)
            tx["gas"] = int(self.w3.eth.estimate_gas(tx) * self.gas_limit_multiplier)

            signed = self.account.sign_transaction(tx)
            tx_hash = self.w3.eth.send_raw_transaction(signed.raw_transaction)
        except Exception as e:
            raise RpcError(f"Sending transaction to {to} failed: {e}") from e

        tx_hash_hex = "0x" + bytes(tx_hash).hex()
        logger.info("tx_sent", to=to, tx_hash=tx_hash_hex, nonce=tx["nonce"], gas=tx["gas"])
        return tx_hash_hex

    def _fill_fees(self, tx: dict[str, Any]) -> None:
        base_fee = self.w3.eth.get_block("latest").get("baseFeePerGas")
        if base_fee is None:
            tx["gasPrice"] = self.w3.eth.gas_price
            return

        # maxFee = 2*baseFee + priority
        priority = self.w3.eth.max_priority_fee
        tx["maxPriorityFeePerGas"] = int(priority)
        tx["maxFeePerGas"] = int(base_fee * 2 + priority)
        tx["type"] = 2

    def get_transaction_block_hash(self, tx_hash: str) -> str | None:
        from web3.exceptions import TransactionNotFound

        try:
            tx = self.w3.eth.get_transaction(tx_hash)
        except TransactionNotFound:
            return None
        except Exception as e:
            raise RpcError(f"eth_getTransactionByHash failed for {tx_hash}: {e}") from e

        block_hash = tx.get("blockHash")
        if block_hash is None:
            return None
        return "0x" + bytes(block_hash).hex()


class MockEthRpc:
    """In-memory EthRpc for tests.

    Configure call results keyed by (to, calldata) and track transactions for
    assertions. Transactions are "mined" after ``pending_polls`` inclusion checks.
    """

    def __init__(
        self,
        account: str | None = None,
        balances: dict[str, int] | None = None,
        pending_polls: int = 0,
    ):
        self._account = account
        self.balances = {normalize_address(k): v for k, v in (balances or {}).items()}
        self.results: dict[tuple[str, bytes], bytes] = {}
        self.errors: dict[tuple[str, bytes], Exception] = {}
        self.calls: list[tuple[str, bytes]] = []
        self.transactions: list[tuple[str, bytes, int]] = []
        self.pending_polls = pending_polls
        self.polls: dict[str, int] = {}

    @property
    def default_account(self) -> str | None:
        return self._account

    def set_result(self, to: str, data: bytes, result: bytes) -> None:
        self.results[(normalize_address(to), data)] = result

    def set_error(self, to: str, data: bytes, error: Exception) -> None:
        self.errors[(normalize_address(to), data)] = error

    def get_balance(self, address: str) -> int:
        return self.balances.get(normalize_address(address), 0)

    def call(self, to: str, data: bytes) -> bytes:
        key = (normalize_address(to), data)
        self.calls.append(key)
        if key in self.errors:
            raise self.errors[key]
        if key not in self.results:
            raise RpcError(f"execution reverted: no result configured for {to} 0x{data.hex()}")
        return self.results[key]

    def send_transaction(self, to: str, data: bytes, value: int = 0) -> str:
        if self._account is None:
            raise ConfigurationError("A private key is required to send transactions")
        self.transactions.append((normalize_address(to), data, value))
        return "0x" + f"{len(self.transactions):064x}"

    def get_transaction_block_hash(self, tx_hash: str) -> str | None:
        polls = self.polls.get(tx_hash, 0) + 1
        self.polls[tx_hash] = polls
        if polls <= self.pending_polls:
            return None
        return "0x" + "ab" * 32


__all__ = ["EthRpc", "Web3EthRpc", "MockEthRpc"]
