"""
StaffDesk Backend — Category SQLAlchemy Model
===============================================

What:  ORM mapping of the pre-existing `category` table.
Who:   Used by CategoryService to build its insert and select statements.

Lifecycle:
    Created through POST /add-category and listed through GET /category.
    Never updated or deleted by this API.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Category(Base):
    """A grouping that employees reference through category_id."""

    __tablename__ = "category"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}')>"
