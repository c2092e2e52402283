"""
StaffDesk Backend — Category Schemas
======================================

What:  Request/response models for the category endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    """
    Body of POST /add-category.

    `category` is optional at the schema level so that a missing or empty name
    reaches the service and is answered with a 400, not FastAPI's 422.
    """
    category: Optional[str] = Field(default=None, description="Name of the new category")


class CategoryRecord(BaseModel):
    id: int = Field(description="Generated category id")
    name: str = Field(description="Category name")

    model_config = {"from_attributes": True}
