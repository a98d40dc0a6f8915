"""
Pydantic schemas for Category entity.
"""
from pydantic import Field
from datetime import datetime
from taskmanager.schemas.common import CamelModel


class CategoryCreate(CamelModel):
    """Schema for category creation."""
    name: str = Field(max_length=100)


class CategoryResponse(CamelModel):
    """Schema for category response."""
    id: int
    name: str
    created_at: datetime
    updated_at: datetime


class CategoryCreated(CamelModel):
    message: str
    category: CategoryResponse


class CategoryDeleted(CamelModel):
    message: str
    deleted_tasks: int
