"""Daily balance reconstruction and per-address aggregation."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Optional

from balance_tracker.core.timezone import now_utc, to_utc
from balance_tracker.domain.models import (
    AggregationResult,
    DailyBalance,
    DayEntry,
    EmployeeRecord,
)
from balance_tracker.repositories.protocols import BalanceCacheRepository
from balance_tracker.services.balance_fetcher import BalanceFetcher
from balance_tracker.services.block_resolver import BlockResolver
from balance_tracker.services.day_window import DEFAULT_WINDOW_DAYS, DayWindowPlanner
from balance_tracker.services.transaction_service import TransactionFetcher

logger = logging.getLogger(__name__)

INITIAL_BALANCE = "0"


class BalanceAggregator:
    """
    Builds one EmployeeRecord per tracked address.

    Daily balances are reconstructed oldest to newest with forward fill: a day
    whose lookup fails repeats the previous day's balance. Settled days are
    served from the cache once resolved; recent days are always recomputed
    and never cached.
    """

    def __init__(
        self,
        cache: BalanceCacheRepository,
        planner: DayWindowPlanner,
        block_resolver: BlockResolver,
        balance_fetcher: BalanceFetcher,
        transaction_fetcher: TransactionFetcher,
        window_days: int = DEFAULT_WINDOW_DAYS,
        max_workers: int = 4,
    ):
        self._cache = cache
        self._planner = planner
        self._blocks = block_resolver
        self._balances = balance_fetcher
        self._transactions = transaction_fetcher
        self._window_days = window_days
        self._max_workers = max(1, max_workers)

    def aggregate(self, addresses: list[str], now: Optional[datetime] = None) -> AggregationResult:
        """
        Run one aggregation over addresses.

        `now` is the single time snapshot for the run (defaults to the current
        UTC time), so every address sees the same window. Addresses are assumed
        unique.
        """
        today = to_utc(now).date() if now else now_utc().date()
        window = self._planner.window(today, self._window_days)

        self._cache.load()
        daily = self._reconstruct_all(addresses, window)
        self._discard_recent(window)
        self._cache.save()

        live = self._balances.live_balances(addresses)
        transfers = self._transactions.fetch_many(addresses)

        employees = [
            EmployeeRecord(
                address=address,
                live_balance=live.get(address),
                daily_balances=daily[address.lower()],
                transfers=transfers.get(address.lower(), []),
            )
            for address in addresses
        ]
        logger.info(
            "Aggregated %d addresses over %s..%s",
            len(addresses),
            window[0].key,
            window[-1].key,
        )
        return AggregationResult(employees=employees, raw_balances=live.raw)

    def _discard_recent(self, window: list[DayEntry]) -> None:
        """Remove cached entries for recent or future days, whatever wrote them."""
        recent = [entry.key for entry in window if entry.is_recent]
        if not recent:
            return
        dropped = self._cache.discard_from(recent[0])
        if dropped:
            logger.warning("Dropped %d cached balances dated %s or later", dropped, recent[0])

    def _reconstruct_all(
        self,
        addresses: list[str],
        window: list[DayEntry],
    ) -> dict[str, list[DailyBalance]]:
        """Reconstruct every address; cache writes happen on this thread."""
        daily: dict[str, list[DailyBalance]] = {}
        if not addresses:
            return daily

        workers = min(self._max_workers, len(addresses))
        with ThreadPoolExecutor(max_workers=workers) as ex:
            results = ex.map(lambda address: self.reconstruct(address, window), addresses)
            for address, (series, resolved) in zip(addresses, results):
                daily[address.lower()] = series
                for key, balance in resolved.items():
                    self._cache.set(address, key, balance)
        return daily

    def reconstruct(
        self,
        address: str,
        window: list[DayEntry],
    ) -> tuple[list[DailyBalance], dict[str, str]]:
        """
        Walk the window for one address.

        Returns the daily series and the newly resolved settled-day balances
        that belong in the cache. Days are resolved strictly in order since
        each fallback depends on the previous day.
        """
        series: list[DailyBalance] = []
        resolved: dict[str, str] = {}
        carry = INITIAL_BALANCE

        for entry in window:
            cached = None if entry.is_recent else self._cache.get(address, entry.key)
            if cached is not None:
                balance = cached
            else:
                fetched = self._lookup(address, entry)
                if fetched is not None and not entry.is_recent:
                    resolved[entry.key] = fetched
                balance = carry if fetched is None else fetched

            carry = balance
            series.append(DailyBalance(date=entry.key, balance=balance))

        return series, resolved

    def _lookup(self, address: str, entry: DayEntry) -> Optional[str]:
        block = self._blocks.resolve_end_of_day_block(entry.day)
        if block is None:
            return None
        return self._balances.historical_balance(address, block)
