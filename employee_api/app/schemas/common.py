"""
Shared response envelopes.

Pagination metadata, the paginated employee list, and the small
status/error bodies returned by the API.
"""

from typing import Any, List, Optional

from pydantic import BaseModel

from .employee import CamelModel, Employee


class PaginationMeta(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class EmployeePage(CamelModel):
    """A page window of employees together with its metadata."""

    data: List[Employee]
    pagination: PaginationMeta


class HealthStatus(CamelModel):
    status: str
    employee_count: int


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Error body returned for every 4xx/5xx response."""

    error: str
    detail: Optional[Any] = None
