"""Historical and live balance lookups."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from balance_tracker.core.exceptions import ExplorerError, ValidationError
from balance_tracker.domain.models import LiveBalances, is_balance
from balance_tracker.providers.explorer_provider import ExplorerProvider

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 20
DEFAULT_MAX_WORKERS = 4


def chunked(items: list[str], size: int) -> list[list[str]]:
    """Split items into consecutive chunks of at most size elements."""
    return [items[i:i + size] for i in range(0, len(items), size)]


class BalanceFetcher:
    """
    Fetches balances from the explorer.

    Lookup failures never propagate: historical lookups return None and
    failed live-balance chunks contribute no entries.
    """

    def __init__(
        self,
        provider: ExplorerProvider,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        if chunk_size < 1:
            raise ValidationError(f"chunk_size must be >= 1, got {chunk_size}")
        self._provider = provider
        self._chunk_size = chunk_size
        self._max_workers = max(1, max_workers)

    def historical_balance(self, address: str, block: int) -> Optional[str]:
        """Balance of address at block, or None when no data could be obtained."""
        try:
            balance = self._provider.get_balance_at_block(address, block)
        except ExplorerError as e:
            logger.warning("No balance for %s at block %d: %s", address, block, e.message)
            return None
        if not is_balance(balance):
            logger.warning("Malformed balance for %s at block %d: %r", address, block, balance)
            return None
        return balance

    def live_balances(self, addresses: list[str]) -> LiveBalances:
        """
        Current balances for all addresses, one explorer call per chunk.

        Returns balances keyed by lower-cased address plus the raw entries.
        """
        result = LiveBalances()
        chunks = chunked(addresses, self._chunk_size)
        if not chunks:
            return result

        with ThreadPoolExecutor(max_workers=min(self._max_workers, len(chunks))) as ex:
            # map() preserves chunk order regardless of completion order
            for entries in ex.map(self._fetch_chunk, chunks):
                result.raw.extend(entries)
                for entry in entries:
                    account = entry.get("account")
                    balance = entry.get("balance")
                    if not isinstance(account, str) or not is_balance(balance):
                        continue
                    result.balances[account.lower()] = balance
        return result

    def _fetch_chunk(self, chunk: list[str]) -> list[dict]:
        try:
            return self._provider.get_balances(chunk)
        except ExplorerError as e:
            logger.warning("Live balance chunk of %d addresses failed: %s", len(chunk), e.message)
            return []
