"""
StaffDesk Backend — Employee SQLAlchemy Model
===============================================

What:  ORM mapping of the pre-existing `employee` table.
Why:   Lets EmployeeService build parameterized insert/update/delete/select
       statements against typed columns instead of SQL strings.
Who:   Used by EmployeeService and SummaryService.

Column notes:
    - password: bcrypt hash, never the submitted plaintext
    - image: generated upload filename, or "" when no photo was sent
    - salary: stored as a float; SUM(salary) is NULL on an empty table
    - category_id: raw foreign key value; the API never joins category
"""

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Employee(Base):
    """A managed employee record."""

    __tablename__ = "employee"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    salary: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    image: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("category.id"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, email='{self.email}', category_id={self.category_id})>"
