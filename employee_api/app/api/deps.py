"""
Shared FastAPI dependencies.

The employee store is owned by the application instance
(``app.state.store``) rather than a module global, so each app built by
``create_app`` has its own table.
"""

from fastapi import Request

from employee_api.app.services.employee_store import EmployeeStore


def get_store(request: Request) -> EmployeeStore:
    return request.app.state.store
