"""
Pydantic models for employee data.

These schemas define the structure of employee records exchanged via
the API.  ``EmployeeBase`` holds the client-supplied fields;
``EmployeeCreate`` is the create payload and ``Employee`` adds the
server-assigned ``id``, ``hire_date`` and ``is_active``.
``EmployeeUpdate`` is the patch type: every field is optional and only
the fields actually supplied are merged into the stored record.

JSON keys are camelCase (``firstName``, ``hireDate``); Python code uses
the snake_case attribute names.
"""

from typing import Annotated, Optional, Union

from pydantic import AwareDatetime, BaseModel, Field
from pydantic.alias_generators import to_camel


# Strict members so numeric strings and booleans are rejected; integers
# stay integers on the way back out.
Salary = Union[
    Annotated[int, Field(strict=True, ge=0)],
    Annotated[float, Field(strict=True, ge=0)],
]


class CamelModel(BaseModel):
    """Base model serialising field names as camelCase."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class EmployeeBase(CamelModel):
    first_name: str = Field(..., min_length=1, examples=["John"])
    last_name: str = Field(..., min_length=1, examples=["Doe"])
    email: str = Field(..., min_length=1, examples=["john.doe@example.com"])
    position: str = Field(..., min_length=1, examples=["Software Engineer"])
    department: str = Field(..., min_length=1, examples=["Engineering"])
    salary: Salary = Field(..., examples=[75000])


class EmployeeCreate(EmployeeBase):
    """Schema for creating an employee."""
    pass


class Employee(EmployeeBase):
    """An employee record as stored and returned by the API."""

    id: str
    hire_date: AwareDatetime
    is_active: bool = True


class EmployeeUpdate(CamelModel):
    """Schema for updating an employee.

    All fields are optional; only provided fields will be updated.
    Unknown keys (including ``id``) are ignored.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    salary: Optional[Salary] = None
    is_active: Optional[bool] = None
    # Timestamps without a UTC offset are rejected.
    hire_date: Optional[AwareDatetime] = None

    def changes(self) -> dict:
        """Return the supplied fields keyed by attribute name.

        Explicit ``null`` values are treated as absent.
        """
        return self.model_dump(exclude_unset=True, exclude_none=True)
