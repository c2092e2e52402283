"""
StaffDesk Backend — Dashboard Summary Routes
==============================================

What:  GET /auth/employee-count and GET /auth/total-salary.
Why:   Feed the two counters on the admin dashboard.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.employee import EmployeeCount, SalaryTotal
from app.services.summary_service import summary_service

router = APIRouter(prefix="/auth", tags=["Summary"])


@router.get(
    "/employee-count",
    response_model=EmployeeCount,
    responses={500: {"description": "Query error", "model": ErrorResponse}},
    summary="Total number of employees",
)
async def employee_count(db: AsyncSession = Depends(get_db_session)) -> EmployeeCount:
    return EmployeeCount(total_employees=await summary_service.employee_count(db))


@router.get(
    "/total-salary",
    response_model=SalaryTotal,
    responses={500: {"description": "Query error", "model": ErrorResponse}},
    summary="Sum of all salaries (null when there are no employees)",
)
async def total_salary(db: AsyncSession = Depends(get_db_session)) -> SalaryTotal:
    return SalaryTotal(total_salary=await summary_service.total_salary(db))
