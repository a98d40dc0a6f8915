"""
Task model.
"""
from sqlalchemy import Column, String, Boolean, DateTime, Enum as SQLEnum, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from taskmanager.db.base import BaseModel
import enum


class TaskPriority(str, enum.Enum):
    """Task priority enumeration."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Task(BaseModel):
    """Task owned by a user and filed under one of that user's categories."""
    __tablename__ = "tasks"

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    due_date = Column(DateTime, nullable=True, index=True)  # Naive UTC
    priority = Column(
        SQLEnum(TaskPriority, values_callable=lambda e: [member.value for member in e]),
        default=TaskPriority.MEDIUM,
        nullable=False,
    )
    completed = Column(Boolean, default=False, nullable=False)
    # Same-owner linkage is checked by the task service, not by the database
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    category = relationship("Category", back_populates="tasks")
    user = relationship("User", back_populates="tasks")
