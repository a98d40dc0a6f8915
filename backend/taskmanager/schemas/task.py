"""
Pydantic schemas for Task entity.
"""
from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime
from taskmanager.models.task import TaskPriority
from taskmanager.core.utils import to_naive_utc
from taskmanager.schemas.common import CamelModel


class TaskCreate(CamelModel):
    """Schema for task creation. ``category`` is the category id."""
    title: str = Field(max_length=200)
    description: Optional[str] = ""
    due_date: Optional[datetime] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    category: Optional[int] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def blank_due_date_is_none(cls, v):
        # Browser date inputs submit "" when left empty
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v) if v is not None else None


class TaskUpdate(CamelModel):
    """
    Schema for partial task update.

    Only keys present in the request body are applied (see ``model_fields_set``),
    so an omitted ``dueDate`` keeps the current value and ``"dueDate": null``
    clears it.
    """
    title: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: Optional[TaskPriority] = None
    category: Optional[int] = None
    completed: Optional[bool] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def blank_due_date_is_none(cls, v):
        # Browser date inputs submit "" when left empty
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v) if v is not None else None


class TaskCategory(CamelModel):
    """Category summary embedded in a task."""
    id: int
    name: str


class TaskResponse(CamelModel):
    """Schema for task response with its category expanded."""
    id: int
    title: str
    description: str
    due_date: Optional[datetime] = None
    priority: TaskPriority
    completed: bool
    category: TaskCategory
    created_at: datetime
    updated_at: datetime


class TaskSaved(CamelModel):
    message: str
    task: TaskResponse
