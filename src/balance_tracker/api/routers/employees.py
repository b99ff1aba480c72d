"""Employee balance endpoints."""

from fastapi import APIRouter, Depends

from balance_tracker.api.deps import get_employee_service
from balance_tracker.api.schemas import EmployeeResponse, EmployeesResponse
from balance_tracker.services import EmployeeService

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=EmployeesResponse)
def get_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeesResponse:
    """
    Current balance, 32-day daily balance series and transfer history for
    every tracked address, plus the raw batched balance response.
    """
    result = service.get_employees()
    return EmployeesResponse(
        employees=[EmployeeResponse.from_record(r) for r in result.employees],
        raw_balances=result.raw_balances,
    )
