"""Repository protocol definitions (interfaces)."""

from balance_tracker.repositories.protocols.cache_repo import BalanceCacheRepository
from balance_tracker.repositories.protocols.address_repo import AddressRepository

__all__ = [
    "BalanceCacheRepository",
    "AddressRepository",
]
