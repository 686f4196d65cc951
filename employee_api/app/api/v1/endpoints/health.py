"""
Health check endpoint.

Reports a static status together with the current number of employees
held by the store.
"""

from fastapi import APIRouter, Depends

from employee_api.app.api.deps import get_store
from employee_api.app.schemas.common import HealthStatus
from employee_api.app.services.employee_store import EmployeeStore


router = APIRouter()


@router.get("", response_model=HealthStatus)
async def health(store: EmployeeStore = Depends(get_store)) -> HealthStatus:
    return HealthStatus(status="OK", employee_count=store.count())
