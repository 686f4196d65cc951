"""
In‑memory employee store.

``EmployeeStore`` is the single owner of the employee table.  Records
live in an insertion‑ordered ``dict`` keyed by id, which gives O(1)
lookup, insert and delete while keeping a stable enumeration order for
pagination.  Every public method runs under one re‑entrant lock, so a
single create, update or delete is atomic relative to any other store
call even when FastAPI dispatches handlers from a thread pool.

The store does not validate request payloads; that is the job of the
pydantic schemas in the API layer.  ``find_all`` is the exception: it
rejects an out‑of‑range page or limit with ``ValueError`` using the
same rule the endpoint applies.
"""

from __future__ import annotations

import itertools
import logging
import math
import threading
import uuid
from datetime import datetime, timezone
from typing import Dict, Optional, Set

from faker import Faker

from ..schemas.common import EmployeePage, PaginationMeta
from ..schemas.employee import Employee, EmployeeCreate, EmployeeUpdate


logger = logging.getLogger(__name__)

DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100

DEPARTMENTS = (
    "Engineering",
    "Product",
    "Design",
    "Data",
    "Sales",
    "Marketing",
    "Finance",
    "Human Resources",
    "Legal",
    "Operations",
    "Customer Support",
    "Research",
)

MIN_SEED_SALARY = 30_000
MAX_SEED_SALARY = 150_000


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EmployeeStore:
    """Thread-safe in-memory table of employees.

    Parameters
    ----------
    allow_hire_date_update : bool
        When false, a ``hire_date`` supplied to :meth:`update` is
        ignored and the creation timestamp is kept.
    faker_locale : str
        Locale used to generate synthetic records in :meth:`seed`.
    faker_seed : Optional[int]
        Seed for reproducible synthetic records.

    Every id the store has issued is remembered, including ids of
    deleted employees, so an id is never handed out twice.  That set
    only grows: memory use tracks the number of employees ever created,
    not the number currently stored.
    """

    def __init__(
        self,
        allow_hire_date_update: bool = True,
        faker_locale: str = "en_US",
        faker_seed: Optional[int] = None,
    ) -> None:
        self._employees: Dict[str, Employee] = {}
        # Every id ever handed out; deleted ids stay here so they are never reused.
        self._issued_ids: Set[str] = set()
        self._lock = threading.RLock()
        self._seeded = False
        self.allow_hire_date_update = allow_hire_date_update
        self._faker_locale = faker_locale
        self._faker_seed = faker_seed

    @property
    def seeded(self) -> bool:
        return self._seeded

    def _issue_id(self) -> str:
        while True:
            employee_id = str(uuid.uuid4())
            if employee_id not in self._issued_ids:
                self._issued_ids.add(employee_id)
                return employee_id

    def _fake_employee(self, fake: Faker) -> Employee:
        first_name = fake.first_name()
        last_name = fake.last_name()
        local_part = f"{first_name}.{last_name}".lower().replace(" ", "").replace("'", "")
        return Employee(
            id=self._issue_id(),
            first_name=first_name,
            last_name=last_name,
            email=f"{local_part}@{fake.free_email_domain()}",
            position=fake.job(),
            department=fake.random_element(DEPARTMENTS),
            salary=fake.random_int(min=MIN_SEED_SALARY, max=MAX_SEED_SALARY),
            hire_date=fake.date_time_between(start_date="-10y", end_date="now", tzinfo=timezone.utc),
            is_active=fake.boolean(chance_of_getting_true=90),
        )

    def seed(self, count: int) -> None:
        """Populate the empty table with ``count`` synthetic employees.

        This is a one-time initialisation step; calling it again raises
        ``RuntimeError``.
        """
        if count < 0:
            raise ValueError("Seed count must not be negative")
        with self._lock:
            if self._seeded:
                raise RuntimeError("Employee store has already been seeded")
            self._seeded = True
            fake = Faker(self._faker_locale)
            if self._faker_seed is not None:
                fake.seed_instance(self._faker_seed)
            logger.info("Generating %d employees...", count)
            for _ in range(count):
                employee = self._fake_employee(fake)
                self._employees[employee.id] = employee
            logger.info("Generated %d employees", len(self._employees))

    def create(self, data: EmployeeCreate) -> Employee:
        """Store a new employee and return it.

        The id is freshly generated, ``hire_date`` is the current UTC
        time and the employee starts out active.
        """
        with self._lock:
            employee = Employee(
                id=self._issue_id(),
                **data.model_dump(),
                hire_date=_utcnow(),
                is_active=True,
            )
            self._employees[employee.id] = employee
        logger.info("Created employee %s", employee.id)
        return employee

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return self._employees.get(employee_id)

    def find_all(self, page: int = 1, limit: int = DEFAULT_PAGE_LIMIT) -> EmployeePage:
        """Return one page window of employees in insertion order.

        A page past the end yields an empty ``data`` list, not an error.
        """
        if page < 1:
            raise ValueError("page must be >= 1")
        if limit < 1 or limit > MAX_PAGE_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_PAGE_LIMIT}")
        offset = (page - 1) * limit
        with self._lock:
            total = len(self._employees)
            if offset >= total:
                data = []
            else:
                data = list(itertools.islice(self._employees.values(), offset, offset + limit))
        total_pages = math.ceil(total / limit)
        return EmployeePage(
            data=data,
            pagination=PaginationMeta(
                page=page,
                limit=limit,
                total=total,
                total_pages=total_pages,
                has_next=page < total_pages,
                has_prev=page > 1,
            ),
        )

    def update(self, employee_id: str, patch: EmployeeUpdate) -> Optional[Employee]:
        """Merge the supplied fields of ``patch`` into an employee.

        Fields absent from the patch keep their stored value and the id
        never changes.  Returns ``None`` when the employee does not
        exist, in which case nothing is modified.
        """
        changes = patch.changes()
        changes.pop("id", None)
        if not self.allow_hire_date_update:
            changes.pop("hire_date", None)
        with self._lock:
            current = self._employees.get(employee_id)
            if current is None:
                return None
            updated = current.model_copy(update=changes)
            self._employees[employee_id] = updated
        logger.info("Updated employee %s (%s)", employee_id, ", ".join(sorted(changes)) or "no fields")
        return updated

    def delete(self, employee_id: str) -> bool:
        """Remove an employee; return whether it existed."""
        with self._lock:
            removed = self._employees.pop(employee_id, None) is not None
        if removed:
            logger.info("Deleted employee %s", employee_id)
        return removed

    def count(self) -> int:
        with self._lock:
            return len(self._employees)
