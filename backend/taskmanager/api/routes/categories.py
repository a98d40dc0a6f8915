"""
Category management routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from taskmanager.db.session import get_db
from taskmanager.core.timeouts import run_with_timeout
from taskmanager.models.user import User
from taskmanager.schemas.category import (
    CategoryCreate, CategoryResponse, CategoryCreated, CategoryDeleted
)
from taskmanager.services import category_service
from taskmanager.api.dependencies import get_current_user

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[CategoryResponse])
async def list_categories(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List all categories of the current user."""
    return await run_with_timeout(category_service.list_categories, current_user.id, db)


@router.post("", response_model=CategoryCreated, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: CategoryCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a new category."""
    category = await run_with_timeout(category_service.create_category, current_user.id, category_data.name, db)
    return CategoryCreated(
        message="Category created successfully",
        category=CategoryResponse.model_validate(category)
    )


@router.delete("/{category_id}", response_model=CategoryDeleted)
async def delete_category(
    category_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a category and every task filed under it."""
    deleted_tasks = await run_with_timeout(category_service.delete_category, current_user.id, category_id, db)
    return CategoryDeleted(
        message="Category and associated tasks deleted successfully",
        deleted_tasks=deleted_tasks
    )
