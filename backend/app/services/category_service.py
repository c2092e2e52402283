"""
StaffDesk Backend — Category Service
======================================

What:  Listing and creation of categories.
How:   One statement per operation against the `category` table; store errors
       are wrapped in DatabaseError so the route never sees driver exceptions.
Who:   Called by the category route handlers.
"""

import logging
from typing import List, Optional

from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, ValidationError
from app.models.category import Category
from app.schemas.category import CategoryRecord

logger = logging.getLogger(__name__)


class CategoryService:
    """Stateless business logic for categories; receives the session per call."""

    async def list_categories(self, db: AsyncSession) -> List[CategoryRecord]:
        """
        Return every category in store order.

        Query plan:
            SELECT id, name FROM category
        """
        try:
            result = await db.execute(select(Category))
            categories = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing categories: %s", str(e))
            raise DatabaseError(context={"operation": "list_categories"}) from e

        return [CategoryRecord.model_validate(c) for c in categories]

    async def create_category(self, db: AsyncSession, name: Optional[str]) -> None:
        """
        Insert a category.

        Raises:
            ValidationError: name is missing or empty (→ 400, nothing inserted)
            DatabaseError: the insert failed (→ 500)
        """
        if not name:
            raise ValidationError(message="Category name is required.", fields=["category"])

        try:
            await db.execute(insert(Category).values(name=name))
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating category: %s", str(e))
            raise DatabaseError(context={"operation": "create_category"}) from e

        logger.info("Category created: %s", name)


category_service = CategoryService()
