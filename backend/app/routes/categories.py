"""
StaffDesk Backend — Category Route Handlers
=============================================

What:  GET /category (list) and POST /add-category (create).
How:   Thin handlers: extract the body, delegate to CategoryService, wrap the
       result in the response envelope.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.category import CategoryCreate, CategoryRecord
from app.schemas.common import ErrorResponse, StatusResponse
from app.services.category_service import category_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Categories"])


@router.get(
    "/category",
    response_model=List[CategoryRecord],
    responses={500: {"description": "Query error", "model": ErrorResponse}},
    summary="List all categories",
)
async def list_categories(
    db: AsyncSession = Depends(get_db_session),
) -> List[CategoryRecord]:
    return await category_service.list_categories(db)


@router.post(
    "/add-category",
    response_model=StatusResponse,
    responses={
        400: {"description": "Category name missing", "model": ErrorResponse},
        500: {"description": "Query error", "model": ErrorResponse},
    },
    summary="Create a category",
)
async def add_category(
    payload: Optional[CategoryCreate] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> StatusResponse:
    """
    Insert a category named by `category`.

    A missing body is handled like a missing name so the client always gets
    the same 400 message.
    """
    name = payload.category if payload else None
    await category_service.create_category(db, name)
    return StatusResponse(message="Category added successfully.")
