"""
Tests for the orphaned task sweep.
"""
from taskmanager.models.category import Category
from taskmanager.models.task import Task
from taskmanager.models.user import User
from taskmanager.services.task_service import delete_orphan_tasks


def test_delete_orphan_tasks(db_session):
    """Test only tasks with a missing category are removed, and a rerun is a no-op."""
    user = User(username="alice", hashed_password="x")
    db_session.add(user)
    db_session.flush()
    category = Category(name="Work", user_id=user.id)
    db_session.add(category)
    db_session.flush()

    db_session.add_all([
        Task(title="kept", category_id=category.id, user_id=user.id),
        # SQLite does not enforce foreign keys here, which lets us simulate an interrupted delete
        Task(title="orphan", category_id=category.id + 100, user_id=user.id),
    ])
    db_session.commit()

    assert delete_orphan_tasks(db_session) == 1
    assert [t.title for t in db_session.query(Task).all()] == ["kept"]
    assert delete_orphan_tasks(db_session) == 0
