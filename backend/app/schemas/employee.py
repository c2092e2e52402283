"""
StaffDesk Backend — Employee Schemas
======================================

What:  Pydantic models for employee input and output.
Why:   Routes receive multipart forms, so the input models are built by the
       route from individual Form fields and then handed to EmployeeService.
       Output models describe the full table row.

Exposure note:
    EmployeeRecord intentionally includes the password hash and the raw
    category_id. The admin frontend renders the table as stored.
"""

from typing import Optional

from pydantic import BaseModel, Field


class EmployeeCreate(BaseModel):
    """
    Fields of POST /add_employee.

    All fields are optional here; EmployeeService reports the missing required
    ones (name, email, password, category_id) as a single 400.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    address: Optional[str] = None
    salary: Optional[float] = None
    category_id: Optional[int] = None


class EmployeeUpdate(BaseModel):
    """
    Fields of PUT /employee/{id}.

    A field counts as supplied only when its value is truthy: None, "", 0 and
    0.0 are all treated as "not sent" by the update builder.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    address: Optional[str] = None
    salary: Optional[float] = None
    category_id: Optional[int] = None


class EmployeeRecord(BaseModel):
    """A full `employee` row as returned by GET /auth/employee."""
    id: int
    name: str
    email: str
    password: str = Field(description="bcrypt hash of the employee password")
    address: str
    salary: float
    image: str = Field(description="Upload filename under /images, or empty")
    category_id: int

    model_config = {"from_attributes": True}


class EmployeeCount(BaseModel):
    total_employees: int = Field(description="Number of rows in the employee table")


class SalaryTotal(BaseModel):
    total_salary: Optional[float] = Field(
        description="SUM(salary) as returned by the store; null when there are no employees"
    )
