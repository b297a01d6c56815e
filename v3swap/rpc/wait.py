"""Waiting for transaction inclusion."""

from __future__ import annotations

import time
from collections.abc import Callable

import structlog

from v3swap.constants import DEFAULT_POLL_INTERVAL
from v3swap.errors import TransactionTimeout

from .client import EthRpc

logger = structlog.get_logger()


def wait_for_transaction(
    rpc: EthRpc,
    tx_hash: str,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    timeout: float | None = None,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> str:
    """Poll until a transaction is included in a block.

    Args:
        rpc: Client to poll
        tx_hash: Transaction hash to wait for
        poll_interval: Seconds between checks
        timeout: Give up after this many seconds; wait forever if None
        sleep: Sleep function (injectable for tests)
        clock: Monotonic clock (injectable for tests)

    Returns:
        Hash of the block containing the transaction

    Raises:
        TransactionTimeout: If timeout elapses before inclusion
        RpcError: If a lookup fails
    """
    deadline = None if timeout is None else clock() + timeout
    attempts = 0
    while True:
        attempts += 1
        block_hash = rpc.get_transaction_block_hash(tx_hash)
        if block_hash is not None:
            logger.info("tx_included", tx_hash=tx_hash, block_hash=block_hash, attempts=attempts)
            return block_hash

        delay = poll_interval
        if deadline is not None:
            remaining = deadline - clock()
            if remaining <= 0:
                raise TransactionTimeout(
                    f"Transaction {tx_hash} not included after {attempts} checks"
                )
            # Last sleep is cut short so the final check lands on the deadline
            delay = min(poll_interval, remaining)
        logger.debug("tx_wait_poll", tx_hash=tx_hash, attempt=attempts)
        sleep(delay)


__all__ = ["wait_for_transaction"]
