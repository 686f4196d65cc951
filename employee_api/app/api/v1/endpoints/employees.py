"""
Employee endpoints for API v1.

These routes provide CRUD operations and paginated listing for
employees.  Request bodies and query parameters are validated by
pydantic before the store is called; invalid input is answered with
400 by the application's validation error handler.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from employee_api.app.api.deps import get_store
from employee_api.app.schemas.common import EmployeePage, ErrorResponse, MessageResponse
from employee_api.app.schemas.employee import Employee, EmployeeCreate, EmployeeUpdate
from employee_api.app.services.employee_store import (
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
    EmployeeStore,
)


logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "Employee not found"

_not_found_response = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_bad_request_response = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.get("", response_model=EmployeePage, responses=_bad_request_response)
async def list_employees(
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT, description="Page size"),
    store: EmployeeStore = Depends(get_store),
) -> EmployeePage:
    """Return one page of employees in insertion order.

    A page past the last one returns an empty ``data`` list.
    """
    return store.find_all(page=page, limit=limit)


@router.get("/{employee_id}", response_model=Employee, responses=_not_found_response)
async def get_employee(employee_id: str, store: EmployeeStore = Depends(get_store)) -> Employee:
    employee = store.find_by_id(employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return employee


@router.post(
    "",
    response_model=Employee,
    status_code=status.HTTP_201_CREATED,
    responses={**_bad_request_response, status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def create_employee(employee: EmployeeCreate, store: EmployeeStore = Depends(get_store)) -> Employee:
    """Create a new employee.

    ``id``, ``hireDate`` and ``isActive`` are assigned by the server;
    values supplied for them in the body are ignored.  Every call
    creates a new record, so clients must not retry blindly.
    """
    try:
        return store.create(employee)
    except Exception as e:
        logger.exception("Failed to create employee")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create employee",
        ) from e


@router.put(
    "/{employee_id}",
    response_model=Employee,
    responses={**_bad_request_response, **_not_found_response},
)
async def update_employee(
    employee_id: str,
    updates: EmployeeUpdate,
    store: EmployeeStore = Depends(get_store),
) -> Employee:
    """Update an existing employee.

    Partial updates are supported; any unspecified fields remain
    unchanged and the id can never be modified.
    """
    employee = store.update(employee_id, updates)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return employee


@router.delete("/{employee_id}", response_model=MessageResponse, responses=_not_found_response)
async def delete_employee(employee_id: str, store: EmployeeStore = Depends(get_store)) -> MessageResponse:
    if not store.delete(employee_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return MessageResponse(message="Employee deleted successfully")
