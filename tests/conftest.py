"""
Shared test fixtures for the Employee Directory API tests.
"""
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from employee_api.app.core.config import Settings
from employee_api.app.main import create_app
from employee_api.app.services.employee_store import EmployeeStore


SMALL_SEED = 25


@pytest.fixture
def store() -> EmployeeStore:
    """A store seeded with a small, reproducible set of employees."""
    employee_store = EmployeeStore(faker_seed=1234)
    employee_store.seed(SMALL_SEED)
    return employee_store


@pytest.fixture
def empty_store() -> EmployeeStore:
    return EmployeeStore()


@pytest.fixture
def new_employee() -> dict:
    return {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
        "position": "Software Engineer",
        "department": "Engineering",
        "salary": 75000,
    }


def build_client(**overrides) -> TestClient:
    settings = Settings(**{"seed_count": SMALL_SEED, "faker_seed": 42, **overrides})
    return TestClient(create_app(settings=settings))


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Test client for an app seeded with a handful of employees.

    Used as a context manager so that the startup event seeds the store.
    """
    with build_client() as test_client:
        yield test_client


@pytest.fixture(scope="module")
def full_client() -> Generator[TestClient, None, None]:
    """Test client for an app seeded with the default 10,000 employees."""
    with build_client(seed_count=10000) as test_client:
        yield test_client


@pytest.fixture
def client_factory():
    """Return a builder for test clients with overridden settings."""
    return build_client
