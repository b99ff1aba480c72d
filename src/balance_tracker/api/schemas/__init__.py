"""Pydantic schemas for API request/response."""

from balance_tracker.api.schemas.employee import (
    DailyBalanceResponse,
    TransferResponse,
    EmployeeResponse,
    EmployeesResponse,
)

__all__ = [
    "DailyBalanceResponse",
    "TransferResponse",
    "EmployeeResponse",
    "EmployeesResponse",
]
