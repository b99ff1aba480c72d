"""Service layer - business logic orchestration."""

from balance_tracker.services.day_window import DayWindowPlanner
from balance_tracker.services.block_resolver import BlockResolver
from balance_tracker.services.balance_fetcher import BalanceFetcher
from balance_tracker.services.transaction_service import TransactionFetcher, classify_transfer
from balance_tracker.services.aggregation_service import BalanceAggregator
from balance_tracker.services.employee_service import EmployeeService

__all__ = [
    "DayWindowPlanner",
    "BlockResolver",
    "BalanceFetcher",
    "TransactionFetcher",
    "classify_transfer",
    "BalanceAggregator",
    "EmployeeService",
]
