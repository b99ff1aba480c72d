"""
Pytest configuration and fixtures for balance tracker tests.

This module provides:
- Time helpers for UTC calendar days
- A scripted, call-recording explorer provider
- An in-memory balance cache and address list
- Service fixtures wired to the fakes
- A FastAPI test client with dependencies overridden
"""

from datetime import date, datetime, timedelta
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from balance_tracker.main import app
from balance_tracker.api.deps import (
    get_address_repo,
    get_balance_cache,
    get_explorer_provider,
)
from balance_tracker.config.settings import reset_settings
from balance_tracker.core.exceptions import ExplorerError
from balance_tracker.core.timezone import UTC
from balance_tracker.domain.models import CacheStore
from balance_tracker.services import (
    BalanceAggregator,
    BalanceFetcher,
    BlockResolver,
    DayWindowPlanner,
    TransactionFetcher,
)


ALICE = "0xAaAa000000000000000000000000000000000001"
BOB = "0xBbBb000000000000000000000000000000000002"
ONE_SHM = "1000000000000000000"


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 12,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in UTC."""
    return UTC.localize(datetime(year, month, day, hour, minute, second))


def day_before(key: str, days: int = 1) -> str:
    """ISO day key `days` before the given key."""
    return (date.fromisoformat(key) - timedelta(days=days)).isoformat()


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' for deterministic windows: 2024-05-15 .. 2024-06-15."""
    return utc_datetime(2024, 6, 15, 14, 30, 0)


@pytest.fixture(autouse=True)
def clean_settings():
    """Settings are reloaded for every test."""
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# EXPLORER FAKES
# =============================================================================


class ScriptedExplorerProvider:
    """
    Explorer provider answering from in-memory tables.

    Blocks are looked up by the UTC day of the requested timestamp; anything
    not scripted raises ExplorerError, like a failed explorer call. Every call
    is recorded for assertions.
    """

    def __init__(self, default_block: Optional[int] = None):
        self.blocks: dict[str, int] = {}
        self.default_block = default_block
        # (lower-cased address, block) -> balance
        self.balances: dict[tuple[str, int], str] = {}
        self.default_balance: Optional[str] = None
        self.live: dict[str, str] = {}
        self.transactions: dict[str, list[dict]] = {}
        self.failing_live: set[str] = set()
        self.failing_transactions: set[str] = set()

        self.block_calls: list[str] = []
        self.balance_calls: list[tuple[str, int]] = []
        self.batch_calls: list[list[str]] = []
        self.transaction_calls: list[str] = []

    # Scripting helpers

    def script_day(self, key: str, block: int, balances: Optional[dict[str, str]] = None) -> None:
        """Resolve day `key` to `block` and give addresses a balance there."""
        self.blocks[key] = block
        for address, balance in (balances or {}).items():
            self.balances[(address.lower(), block)] = balance

    def block_calls_for(self, key: str) -> int:
        return self.block_calls.count(key)

    # ExplorerProvider protocol

    def get_block_number_before(self, timestamp: int) -> int:
        key = datetime.fromtimestamp(timestamp, UTC).date().isoformat()
        self.block_calls.append(key)
        if key in self.blocks:
            return self.blocks[key]
        if self.default_block is not None:
            return self.default_block
        raise ExplorerError(f"getblocknobytime failed for {key}")

    def get_balance_at_block(self, address: str, block: int) -> str:
        self.balance_calls.append((address, block))
        balance = self.balances.get((address.lower(), block), self.default_balance)
        if balance is None:
            raise ExplorerError(f"balance failed for {address} at {block}")
        return balance

    def get_balances(self, addresses: list[str]) -> list[dict]:
        self.batch_calls.append(list(addresses))
        if any(a.lower() in self.failing_live for a in addresses):
            raise ExplorerError("balancemulti failed")
        return [
            {"account": a.lower(), "balance": self.live[a.lower()], "stale": False}
            for a in addresses
            if a.lower() in self.live
        ]

    def get_transactions(self, address: str) -> list[dict]:
        self.transaction_calls.append(address)
        if address.lower() in self.failing_transactions:
            raise ExplorerError("txlist failed")
        return list(self.transactions.get(address.lower(), []))


class FailingExplorerProvider:
    """Explorer provider whose every call fails."""

    def get_block_number_before(self, timestamp: int) -> int:
        raise ExplorerError("Network unavailable")

    def get_balance_at_block(self, address: str, block: int) -> str:
        raise ExplorerError("Network unavailable")

    def get_balances(self, addresses: list[str]) -> list[dict]:
        raise ExplorerError("Network unavailable")

    def get_transactions(self, address: str) -> list[dict]:
        raise ExplorerError("Network unavailable")


def make_tx(
    tx_hash: str,
    sender: str,
    recipient: str,
    value: str,
    timestamp: int,
) -> dict:
    """Raw explorer txlist record."""
    return {
        "hash": tx_hash,
        "from": sender,
        "to": recipient,
        "value": value,
        "timeStamp": str(timestamp),
    }


# =============================================================================
# REPOSITORY FAKES
# =============================================================================


class InMemoryBalanceCache:
    """
    BalanceCacheRepository kept in memory.

    `persisted` plays the role of the file; load/save copy between it and the
    working store.
    """

    def __init__(self, persisted: Optional[CacheStore] = None):
        self.persisted: CacheStore = persisted or {}
        self.store: CacheStore = {}
        self.load_count = 0
        self.save_count = 0
        self.set_calls: list[tuple[str, str, str]] = []

    def load(self) -> CacheStore:
        self.load_count += 1
        self.store = {address: dict(days) for address, days in self.persisted.items()}
        return self.store

    def get(self, address: str, day: str) -> Optional[str]:
        for key, days in list(self.store.items()):
            if key.lower() == address.lower():
                return days.get(day)
        return None

    def set(self, address: str, day: str, balance: str) -> None:
        self.set_calls.append((address, day, balance))
        self.store.setdefault(address, {})[day] = balance

    def discard_from(self, day: str) -> int:
        dropped = 0
        for days in self.store.values():
            stale = [key for key in days if key >= day]
            for key in stale:
                del days[key]
            dropped += len(stale)
        return dropped

    def save(self, store: Optional[CacheStore] = None) -> None:
        self.save_count += 1
        source = self.store if store is None else store
        self.persisted = {address: dict(days) for address, days in source.items()}


class ListAddressRepository:
    """AddressRepository over a fixed list."""

    def __init__(self, addresses: list[str]):
        self._addresses = list(addresses)

    def list_addresses(self) -> list[str]:
        return list(self._addresses)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def provider() -> ScriptedExplorerProvider:
    """Provide an empty scripted explorer."""
    return ScriptedExplorerProvider()


@pytest.fixture
def failing_provider() -> FailingExplorerProvider:
    """Provide an explorer that always fails."""
    return FailingExplorerProvider()


@pytest.fixture
def balance_cache() -> InMemoryBalanceCache:
    """Provide an empty in-memory balance cache."""
    return InMemoryBalanceCache()


def build_aggregator(
    provider,
    cache,
    window_days: int = 32,
    max_workers: int = 4,
) -> BalanceAggregator:
    """Wire a BalanceAggregator to the given provider and cache."""
    return BalanceAggregator(
        cache=cache,
        planner=DayWindowPlanner(),
        block_resolver=BlockResolver(provider),
        balance_fetcher=BalanceFetcher(provider, chunk_size=20, max_workers=max_workers),
        transaction_fetcher=TransactionFetcher(provider, max_workers=max_workers),
        window_days=window_days,
        max_workers=max_workers,
    )


@pytest.fixture
def aggregator(provider, balance_cache) -> BalanceAggregator:
    """Provide a BalanceAggregator over the scripted explorer and in-memory cache."""
    return build_aggregator(provider, balance_cache)


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def api_addresses() -> list[str]:
    """Addresses served by the API test client."""
    return [ALICE, BOB]


@pytest.fixture
def client(provider, balance_cache, api_addresses) -> TestClient:
    """Provide FastAPI test client backed by the fakes."""
    app.dependency_overrides[get_explorer_provider] = lambda: provider
    app.dependency_overrides[get_balance_cache] = lambda: balance_cache
    app.dependency_overrides[get_address_repo] = lambda: ListAddressRepository(api_addresses)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
