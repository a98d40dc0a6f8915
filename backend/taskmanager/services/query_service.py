"""
Task query building: text search and due-date buckets.

The predicates built here know nothing about ownership. Callers must AND them
with the owner constraint, as ``task_service.list_tasks`` does.

All boundaries are naive UTC datetimes, matching what is stored in
``Task.due_date``. Weeks start on Sunday.
"""
import enum
from datetime import datetime, timedelta
from typing import Optional, Tuple, Union
from sqlalchemy import and_, or_, true
from sqlalchemy.sql.elements import ColumnElement
from taskmanager.core.errors import InvalidInput
from taskmanager.core.utils import to_naive_utc, utc_now
from taskmanager.models.task import Task


class DueDateBucket(str, enum.Enum):
    """Named due-date ranges."""
    TODAY = "today"
    THIS_WEEK = "this-week"
    UPCOMING = "upcoming"
    OVERDUE = "overdue"
    ALL = "all"


def parse_bucket(value: Union[str, DueDateBucket, None]) -> DueDateBucket:
    """Map a query-string value to a bucket. Blank means ALL."""
    if isinstance(value, DueDateBucket):
        return value
    if value is None or not value.strip():
        return DueDateBucket.ALL
    try:
        return DueDateBucket(value.strip().lower())
    except ValueError:
        allowed = ", ".join(bucket.value for bucket in DueDateBucket)
        raise InvalidInput(f"Unknown dueDate filter '{value}'. Expected one of: {allowed}")


def start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def bucket_bounds(
    bucket: DueDateBucket,
    now: Optional[datetime] = None
) -> Tuple[Optional[datetime], Optional[datetime]]:
    """
    Half-open ``[start, end)`` range for a bucket. Either side may be None
    for an open end; ALL returns ``(None, None)``.
    """
    now = to_naive_utc(now) if now is not None else utc_now()
    today = start_of_day(now)

    if bucket == DueDateBucket.TODAY:
        return today, today + timedelta(days=1)
    if bucket == DueDateBucket.THIS_WEEK:
        # weekday(): Monday is 0, Sunday is 6
        sunday = today - timedelta(days=(today.weekday() + 1) % 7)
        return sunday, sunday + timedelta(days=7)
    if bucket == DueDateBucket.UPCOMING:
        return today, None
    if bucket == DueDateBucket.OVERDUE:
        return None, today
    return None, None


def search_predicate(search_text: str) -> ColumnElement:
    """Case-insensitive substring match on title or description."""
    escaped = (
        search_text.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )
    pattern = f"%{escaped}%"
    return or_(
        Task.title.ilike(pattern, escape="\\"),
        Task.description.ilike(pattern, escape="\\"),
    )


def build_predicate(
    search_text: Optional[str] = None,
    bucket: Union[str, DueDateBucket, None] = None,
    now: Optional[datetime] = None
) -> ColumnElement:
    """Combine the search and due-date constraints with AND."""
    clauses = []

    if search_text and search_text.strip():
        clauses.append(search_predicate(search_text))

    bucket = parse_bucket(bucket)
    start, end = bucket_bounds(bucket, now)
    if start is not None:
        clauses.append(Task.due_date >= start)
    if end is not None:
        clauses.append(Task.due_date < end)
    if bucket == DueDateBucket.OVERDUE:
        # Finished work is never overdue
        clauses.append(Task.completed.is_(False))

    return and_(true(), *clauses)
