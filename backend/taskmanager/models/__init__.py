"""Models package - Import all models for SQLAlchemy registration."""
from taskmanager.models.user import User
from taskmanager.models.category import Category
from taskmanager.models.task import Task, TaskPriority

__all__ = [
    "User",
    "Category",
    "Task",
    "TaskPriority",
]
