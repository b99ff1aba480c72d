"""Domain layer - pure business models with no external dependencies."""

from balance_tracker.domain.models import (
    TransferDirection,
    CacheStore,
    DayEntry,
    DailyBalance,
    TransferEvent,
    LiveBalances,
    EmployeeRecord,
    AggregationResult,
)

__all__ = [
    "TransferDirection",
    "CacheStore",
    "DayEntry",
    "DailyBalance",
    "TransferEvent",
    "LiveBalances",
    "EmployeeRecord",
    "AggregationResult",
]
