"""Domain models package."""

from balance_tracker.domain.models.enums import TransferDirection
from balance_tracker.domain.models.balance import CacheStore, DayEntry, DailyBalance, is_balance
from balance_tracker.domain.models.transfer import TransferEvent
from balance_tracker.domain.models.employee import LiveBalances, EmployeeRecord, AggregationResult

__all__ = [
    "TransferDirection",
    "CacheStore",
    "DayEntry",
    "DailyBalance",
    "is_balance",
    "TransferEvent",
    "LiveBalances",
    "EmployeeRecord",
    "AggregationResult",
]
