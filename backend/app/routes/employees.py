"""
StaffDesk Backend — Employee Route Handlers
=============================================

What:  Employee create, list, partial update and delete.
Why:   Entry points for the admin tool's employee table and edit form.
How:   Multipart form fields are collected into EmployeeCreate/EmployeeUpdate,
       the optional photo is read into an ImageUpload, and EmployeeService does
       the rest.

Request Flow (POST /add_employee, PUT /employee/{id}):
    1. FastAPI parses the multipart body; empty form values arrive as None
    2. The optional `image` part is read into memory and closed
    3. EmployeeService checks presence, hashes, stores the photo, runs the statement
    4. Errors propagate to the global handlers in main.py

Every form field is declared optional so that missing values produce this
API's 400 messages instead of FastAPI's 422 validation body.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse, MessageResponse, StatusResponse
from app.schemas.employee import EmployeeCreate, EmployeeRecord, EmployeeUpdate
from app.services.employee_service import EmployeeService
from app.services.file_service import ImageUpload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Employees"])


def get_employee_service(request: Request) -> EmployeeService:
    """The EmployeeService built by create_app from the application's Settings."""
    return request.app.state.employee_service


async def _read_image(image: Optional[UploadFile]) -> Optional[ImageUpload]:
    """
    Read an uploaded photo into memory.

    Browsers submit an empty part (no filename) when the file input is left
    blank; that counts as no upload.
    """
    if image is None or not image.filename:
        return None
    try:
        content = await image.read()
    finally:
        await image.close()
    logger.info("Received image upload: filename=%s, size=%d bytes", image.filename, len(content))
    return ImageUpload(filename=image.filename, content=content)


@router.post(
    "/add_employee",
    response_model=MessageResponse,
    responses={
        400: {"description": "Missing required fields", "model": ErrorResponse},
        500: {"description": "Query or upload error", "model": ErrorResponse},
    },
    summary="Create an employee with an optional photo",
)
async def add_employee(
    name: Optional[str] = Form(default=None),
    email: Optional[str] = Form(default=None),
    password: Optional[str] = Form(default=None),
    address: Optional[str] = Form(default=None),
    salary: Optional[float] = Form(default=None),
    category_id: Optional[int] = Form(default=None),
    image: Optional[UploadFile] = File(default=None),
    db: AsyncSession = Depends(get_db_session),
    service: EmployeeService = Depends(get_employee_service),
) -> MessageResponse:
    data = EmployeeCreate(
        name=name,
        email=email,
        password=password,
        address=address,
        salary=salary,
        category_id=category_id,
    )
    await service.create_employee(db, data, await _read_image(image))
    return MessageResponse(message="Employee added successfully.")


@router.get(
    "/auth/employee",
    response_model=List[EmployeeRecord],
    responses={500: {"description": "Query error", "model": ErrorResponse}},
    summary="List all employees",
)
async def list_employees(
    db: AsyncSession = Depends(get_db_session),
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeRecord]:
    return await service.list_employees(db)


@router.put(
    "/employee/{employee_id}",
    response_model=StatusResponse,
    responses={
        400: {"description": "No fields to update", "model": ErrorResponse},
        404: {"description": "Employee not found", "model": ErrorResponse},
        500: {"description": "Query or upload error", "model": ErrorResponse},
    },
    summary="Partially update an employee",
)
async def update_employee(
    employee_id: int,
    name: Optional[str] = Form(default=None),
    email: Optional[str] = Form(default=None),
    password: Optional[str] = Form(default=None),
    address: Optional[str] = Form(default=None),
    salary: Optional[float] = Form(default=None),
    category_id: Optional[int] = Form(default=None),
    image: Optional[UploadFile] = File(default=None),
    db: AsyncSession = Depends(get_db_session),
    service: EmployeeService = Depends(get_employee_service),
) -> StatusResponse:
    """
    Update only the supplied fields.

    Zero and empty values are ignored (see employee_service), so this endpoint
    cannot set salary to 0 or clear the address.
    """
    changes = EmployeeUpdate(
        name=name,
        email=email,
        password=password,
        address=address,
        salary=salary,
        category_id=category_id,
    )
    await service.update_employee(db, employee_id, changes, await _read_image(image))
    return StatusResponse(message="Employee updated successfully.")


@router.delete(
    "/employee/{employee_id}",
    response_model=StatusResponse,
    responses={
        404: {"description": "Employee not found", "model": ErrorResponse},
        500: {"description": "Query error", "model": ErrorResponse},
    },
    summary="Delete an employee",
)
async def delete_employee(
    employee_id: int,
    db: AsyncSession = Depends(get_db_session),
    service: EmployeeService = Depends(get_employee_service),
) -> StatusResponse:
    await service.delete_employee(db, employee_id)
    return StatusResponse(message="Employee deleted successfully.")
