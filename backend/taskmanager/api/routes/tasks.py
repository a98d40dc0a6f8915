"""
Task management routes.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from taskmanager.core.config import settings
from taskmanager.db.session import get_db
from taskmanager.core.timeouts import run_with_timeout
from taskmanager.models.user import User
from taskmanager.schemas.common import MessageResponse
from taskmanager.schemas.task import TaskCreate, TaskUpdate, TaskResponse, TaskSaved
from taskmanager.services import task_service
from taskmanager.api.dependencies import get_current_user

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=List[TaskResponse])
async def list_tasks(
    search: Optional[str] = Query(None, max_length=settings.SEARCH_MAX_LENGTH),
    due_date: Optional[str] = Query(None, alias="dueDate"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    List the current user's tasks, newest first.

    ``search`` matches title or description (case-insensitive).
    ``dueDate`` is one of today, this-week, upcoming, overdue or all.
    """
    return await run_with_timeout(task_service.list_tasks, current_user.id, db, search=search, due_date=due_date)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a single task."""
    return await run_with_timeout(task_service.get_task, current_user.id, task_id, db)


@router.post("", response_model=TaskSaved, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a new task."""
    task = await run_with_timeout(task_service.create_task, current_user.id, task_data, db)
    return TaskSaved(message="Task created successfully", task=TaskResponse.model_validate(task))


@router.put("/{task_id}", response_model=TaskSaved)
async def update_task(
    task_id: int,
    task_data: TaskUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update any subset of a task's fields."""
    task = await run_with_timeout(task_service.update_task, current_user.id, task_id, task_data, db)
    return TaskSaved(message="Task updated successfully", task=TaskResponse.model_validate(task))


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a task."""
    await run_with_timeout(task_service.delete_task, current_user.id, task_id, db)
    return MessageResponse(message="Task deleted successfully")
