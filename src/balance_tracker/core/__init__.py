"""Core utilities and shared functionality."""

from balance_tracker.core.timezone import (
    now_utc,
    to_utc,
    day_key,
    end_of_day_timestamp,
    UTC,
)
from balance_tracker.core.exceptions import (
    AppError,
    ValidationError,
    ExplorerError,
    AggregationError,
    AddressSourceError,
    CacheWriteError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "day_key",
    "end_of_day_timestamp",
    "UTC",
    "AppError",
    "ValidationError",
    "ExplorerError",
    "AggregationError",
    "AddressSourceError",
    "CacheWriteError",
]
