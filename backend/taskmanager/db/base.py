"""
Declarative base and shared columns for all models.
"""
from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base
from taskmanager.core.utils import utc_now

Base = declarative_base()


class BaseModel(Base):
    """Abstract model with id and UTC timestamps."""
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    created_at = Column(DateTime, default=utc_now, nullable=False, index=True)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)
