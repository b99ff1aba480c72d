"""Repository layer - data access abstractions and implementations."""

from balance_tracker.repositories.protocols import (
    BalanceCacheRepository,
    AddressRepository,
)

__all__ = [
    "BalanceCacheRepository",
    "AddressRepository",
]
