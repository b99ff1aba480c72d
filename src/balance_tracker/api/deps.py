"""Dependency injection for FastAPI."""

from typing import Generator

from fastapi import Depends

from balance_tracker.config.settings import Settings, get_settings
from balance_tracker.providers import (
    BlockscoutExplorerProvider,
    ExplorerProvider,
    StubExplorerProvider,
)
from balance_tracker.providers.blockscout_provider import build_session
from balance_tracker.repositories.file import FileAddressRepository
from balance_tracker.repositories.json import JsonFileBalanceCache
from balance_tracker.repositories.protocols import AddressRepository, BalanceCacheRepository
from balance_tracker.services import (
    BalanceAggregator,
    BalanceFetcher,
    BlockResolver,
    DayWindowPlanner,
    EmployeeService,
    TransactionFetcher,
)


def get_app_settings() -> Settings:
    """Provide the current Settings instance."""
    return get_settings()


def get_explorer_provider(
    settings: Settings = Depends(get_app_settings),
) -> Generator[ExplorerProvider, None, None]:
    """Provide ExplorerProvider instance (stub when configured for offline use)."""
    if settings.explorer_provider == "stub":
        yield StubExplorerProvider()
        return

    provider = BlockscoutExplorerProvider(
        api_url=settings.explorer_api_url,
        timeout_seconds=settings.request_timeout_seconds,
        session=build_session(
            retries=settings.request_retries,
            backoff_seconds=settings.request_backoff_seconds,
        ),
    )
    try:
        yield provider
    finally:
        provider.close()


def get_balance_cache(settings: Settings = Depends(get_app_settings)) -> BalanceCacheRepository:
    """Provide BalanceCacheRepository instance."""
    return JsonFileBalanceCache(settings.cache_file)


def get_address_repo(settings: Settings = Depends(get_app_settings)) -> AddressRepository:
    """Provide AddressRepository instance."""
    return FileAddressRepository(settings.wallets_file)


def get_aggregator(
    settings: Settings = Depends(get_app_settings),
    provider: ExplorerProvider = Depends(get_explorer_provider),
    cache: BalanceCacheRepository = Depends(get_balance_cache),
) -> BalanceAggregator:
    """Provide BalanceAggregator instance."""
    return BalanceAggregator(
        cache=cache,
        planner=DayWindowPlanner(recent_days=settings.recent_days),
        block_resolver=BlockResolver(provider),
        balance_fetcher=BalanceFetcher(
            provider,
            chunk_size=settings.live_balance_chunk_size,
            max_workers=settings.max_workers,
        ),
        transaction_fetcher=TransactionFetcher(provider, max_workers=settings.max_workers),
        window_days=settings.window_days,
        max_workers=settings.max_workers,
    )


def get_employee_service(
    address_repo: AddressRepository = Depends(get_address_repo),
    aggregator: BalanceAggregator = Depends(get_aggregator),
) -> EmployeeService:
    """Provide EmployeeService instance."""
    return EmployeeService(
        address_repo=address_repo,
        aggregator=aggregator,
    )
