"""Aggregate per-address records."""

from dataclasses import dataclass, field
from typing import Optional

from balance_tracker.domain.models.balance import DailyBalance
from balance_tracker.domain.models.transfer import TransferEvent


@dataclass
class LiveBalances:
    """Merged result of the batched current-balance lookup."""

    # lower-cased address -> balance
    balances: dict[str, str] = field(default_factory=dict)
    # Entries exactly as returned by the explorer, in chunk order
    raw: list[dict] = field(default_factory=list)

    def get(self, address: str) -> Optional[str]:
        return self.balances.get(address.lower())


@dataclass
class EmployeeRecord:
    """Everything reported for one tracked address."""

    address: str
    live_balance: Optional[str] = None
    daily_balances: list[DailyBalance] = field(default_factory=list)
    transfers: list[TransferEvent] = field(default_factory=list)


@dataclass
class AggregationResult:
    """Output of one aggregation run."""

    employees: list[EmployeeRecord] = field(default_factory=list)
    raw_balances: list[dict] = field(default_factory=list)
