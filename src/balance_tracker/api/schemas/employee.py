"""Pydantic schemas for employee balance endpoints."""

from typing import Any, Optional

from pydantic import BaseModel

from balance_tracker.domain.models import EmployeeRecord


class DailyBalanceResponse(BaseModel):
    """Closing balance for one UTC day, in the smallest unit."""

    date: str
    balance: str


class TransferResponse(BaseModel):
    """Response schema for a transfer; value is a signed decimal string."""

    value: str
    direction: str
    hash: str
    timestamp: int


class EmployeeResponse(BaseModel):
    """Response schema for one tracked address."""

    address: str
    balance: Optional[str] = None
    daily_balances: list[DailyBalanceResponse]
    transfers: list[TransferResponse]

    @classmethod
    def from_record(cls, record: EmployeeRecord) -> "EmployeeResponse":
        return cls(
            address=record.address,
            balance=record.live_balance,
            daily_balances=[
                DailyBalanceResponse(date=d.date, balance=d.balance)
                for d in record.daily_balances
            ],
            transfers=[
                TransferResponse(
                    value=str(t.value),
                    direction=t.direction.value,
                    hash=t.hash,
                    timestamp=t.timestamp,
                )
                for t in record.transfers
            ],
        )


class EmployeesResponse(BaseModel):
    """Response schema for the employee overview."""

    employees: list[EmployeeResponse]
    raw_balances: list[dict[str, Any]]
