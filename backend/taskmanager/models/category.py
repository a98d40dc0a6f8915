"""
Category model for grouping a user's tasks.
"""
from sqlalchemy import Column, String, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from taskmanager.db.base import BaseModel


class Category(BaseModel):
    """Category owned by a single user."""
    __tablename__ = "categories"

    name = Column(String(100), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="categories")
    tasks = relationship("Task", back_populates="category", passive_deletes=True)

    # Unique constraint: category names are unique per user, not globally
    __table_args__ = (
        UniqueConstraint('name', 'user_id', name='uq_category_name_user'),
    )
