"""
StaffDesk Backend — Summary Service
=====================================

What:  Read-only aggregates over the employee table for the dashboard cards.

Null handling:
    SUM over zero rows is NULL in SQL. The value is passed through as None
    (serialized as JSON null) rather than normalized to 0.
"""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError
from app.models.employee import Employee

logger = logging.getLogger(__name__)


class SummaryService:

    async def employee_count(self, db: AsyncSession) -> int:
        """SELECT COUNT(*) FROM employee"""
        try:
            result = await db.execute(select(func.count()).select_from(Employee))
            return int(result.scalar_one())
        except SQLAlchemyError as e:
            logger.error("Database error counting employees: %s", str(e))
            raise DatabaseError(context={"operation": "employee_count"}) from e

    async def total_salary(self, db: AsyncSession) -> Optional[float]:
        """SELECT SUM(salary) FROM employee; None when the table is empty."""
        try:
            result = await db.execute(select(func.sum(Employee.salary)))
            total = result.scalar_one()
        except SQLAlchemyError as e:
            logger.error("Database error summing salaries: %s", str(e))
            raise DatabaseError(context={"operation": "total_salary"}) from e

        return float(total) if total is not None else None


summary_service = SummaryService()
