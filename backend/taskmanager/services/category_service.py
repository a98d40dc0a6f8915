"""
Category service: per-user categories and cascading deletion.
"""
import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from taskmanager.core.errors import Conflict, InvalidInput, NotFound
from taskmanager.models.category import Category
from taskmanager.models.task import Task

logger = logging.getLogger(__name__)


def get_owned_category(owner_id: int, category_id: int, db: Session) -> Optional[Category]:
    """Return the category if it exists and belongs to owner_id."""
    return db.query(Category).filter(
        Category.id == category_id,
        Category.user_id == owner_id
    ).first()


def create_category(owner_id: int, name: str, db: Session) -> Category:
    """Create a category; names are unique per owner."""
    name = (name or "").strip()
    if not name:
        raise InvalidInput("Category name is required")

    existing = db.query(Category).filter(
        Category.name == name,
        Category.user_id == owner_id
    ).first()
    if existing:
        raise Conflict("Category already exists")

    category = Category(name=name, user_id=owner_id)
    db.add(category)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("Category already exists")
    db.refresh(category)

    logger.info(f"User {owner_id} created category {category.id} '{category.name}'")
    return category


def list_categories(owner_id: int, db: Session) -> List[Category]:
    """All categories of owner_id, oldest first."""
    return db.query(Category).filter(
        Category.user_id == owner_id
    ).order_by(Category.created_at.asc(), Category.id.asc()).all()


def delete_category(owner_id: int, category_id: int, db: Session) -> int:
    """
    Delete a category together with the owner's tasks filed under it.

    Both deletes are committed as one transaction. Returns the number of
    tasks removed.
    """
    category = get_owned_category(owner_id, category_id, db)
    if not category:
        raise NotFound("Category not found")

    try:
        deleted_tasks = db.query(Task).filter(
            Task.category_id == category.id,
            Task.user_id == owner_id
        ).delete(synchronize_session=False)
        db.delete(category)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info(f"User {owner_id} deleted category {category_id} and {deleted_tasks} task(s)")
    return deleted_tasks
