"""Balance cache repository protocol."""

from typing import Protocol, Optional

from balance_tracker.domain.models import CacheStore


class BalanceCacheRepository(Protocol):
    """
    Interface for the historical daily balance cache.

    IMPORTANT: Holds settled days only; today and yesterday are never stored.
    """

    def load(self) -> CacheStore:
        """Read persisted state into memory. Never raises; bad state loads empty."""
        ...

    def get(self, address: str, day: str) -> Optional[str]:
        """Get the cached balance for an address (case-insensitive) on a day."""
        ...

    def set(self, address: str, day: str, balance: str) -> None:
        """Record a balance in memory only."""
        ...

    def discard_from(self, day: str) -> int:
        """Drop in-memory entries dated on or after day; return how many were dropped."""
        ...

    def save(self, store: Optional[CacheStore] = None) -> None:
        """Overwrite persisted state with the full store."""
        ...
