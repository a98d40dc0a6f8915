"""
Task service: owner-scoped task CRUD and filtered listing.
"""
import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload
from taskmanager.core.errors import InvalidInput, NotFound
from taskmanager.core.utils import utc_now
from taskmanager.models.category import Category
from taskmanager.models.task import Task
from taskmanager.schemas.task import TaskCreate, TaskUpdate
from taskmanager.services.category_service import get_owned_category
from taskmanager.services.query_service import build_predicate

logger = logging.getLogger(__name__)

# Fields of TaskUpdate that may not be explicitly set to null
_NON_NULLABLE_FIELDS = ("title", "priority", "category", "completed")


def _require_owned_category(owner_id: int, category_id: Optional[int], db: Session) -> Category:
    if category_id is None:
        raise InvalidInput("Category is required")
    category = get_owned_category(owner_id, category_id, db)
    if not category:
        raise InvalidInput("Category not found or not owned by user")
    return category


def get_task(owner_id: int, task_id: int, db: Session) -> Task:
    """Load one task owned by owner_id, with its category."""
    task = db.query(Task).options(joinedload(Task.category)).filter(
        Task.id == task_id,
        Task.user_id == owner_id
    ).first()
    if not task:
        raise NotFound("Task not found")
    return task


def create_task(owner_id: int, task_data: TaskCreate, db: Session) -> Task:
    """Create a task under one of the owner's categories."""
    title = (task_data.title or "").strip()
    if not title:
        raise InvalidInput("Title is required")
    category = _require_owned_category(owner_id, task_data.category, db)

    task = Task(
        title=title,
        description=task_data.description or "",
        due_date=task_data.due_date,
        priority=task_data.priority,
        completed=False,
        category_id=category.id,
        user_id=owner_id
    )
    db.add(task)
    db.commit()

    logger.info(f"User {owner_id} created task {task.id} in category {category.id}")
    return get_task(owner_id, task.id, db)


def update_task(owner_id: int, task_id: int, changes: TaskUpdate, db: Session) -> Task:
    """
    Apply the fields present in ``changes`` to an owned task.

    Everything is validated before the first attribute is assigned, so a
    rejected update leaves the task untouched.
    """
    task = get_task(owner_id, task_id, db)
    fields = changes.model_dump(exclude_unset=True)

    for name in _NON_NULLABLE_FIELDS:
        if name in fields and fields[name] is None:
            raise InvalidInput(f"{name} cannot be null")

    if "title" in fields:
        fields["title"] = fields["title"].strip()
        if not fields["title"]:
            raise InvalidInput("Title is required")
    if "description" in fields and fields["description"] is None:
        fields["description"] = ""
    if "category" in fields:
        category = _require_owned_category(owner_id, fields.pop("category"), db)
        fields["category_id"] = category.id

    for name, value in fields.items():
        setattr(task, name, value)
    task.updated_at = utc_now()
    db.commit()

    logger.info(f"User {owner_id} updated task {task_id}: {sorted(fields)}")
    return get_task(owner_id, task_id, db)


def delete_task(owner_id: int, task_id: int, db: Session) -> None:
    """Delete an owned task."""
    task = db.query(Task).filter(
        Task.id == task_id,
        Task.user_id == owner_id
    ).first()
    if not task:
        raise NotFound("Task not found")

    db.delete(task)
    db.commit()
    logger.info(f"User {owner_id} deleted task {task_id}")


def list_tasks(
    owner_id: int,
    db: Session,
    search: Optional[str] = None,
    due_date: Optional[str] = None,
    now: Optional[datetime] = None
) -> List[Task]:
    """
    Owner's tasks matching the search text and due-date bucket, newest first.
    """
    predicate = build_predicate(search, due_date, now)
    tasks = db.query(Task).options(joinedload(Task.category)).filter(
        Task.user_id == owner_id,
        predicate
    ).order_by(Task.created_at.desc(), Task.id.desc()).all()

    logger.debug(f"User {owner_id} listed {len(tasks)} task(s) (search={search!r}, dueDate={due_date!r})")
    return tasks


def delete_orphan_tasks(db: Session) -> int:
    """
    Delete tasks whose category no longer exists.

    Idempotent; a second run deletes nothing.
    """
    existing_categories = select(Category.id)
    deleted = db.query(Task).filter(
        ~Task.category_id.in_(existing_categories)
    ).delete(synchronize_session=False)
    db.commit()

    if deleted:
        logger.warning(f"Removed {deleted} orphaned task(s)")
    return deleted
