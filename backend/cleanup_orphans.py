"""
Remove tasks whose category no longer exists.

Category deletion removes its tasks in the same transaction, so this only
finds work after an interrupted delete or on data written by older versions.
Safe to run repeatedly.
"""
import sys
import os

# Add the backend directory to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from taskmanager.db.session import SessionLocal
from taskmanager.services.task_service import delete_orphan_tasks


def cleanup():
    """Delete orphaned tasks and report how many were removed."""
    db = SessionLocal()
    try:
        deleted = delete_orphan_tasks(db)
        print(f"Removed {deleted} orphaned task(s)")
        return deleted
    except Exception as e:
        db.rollback()
        print(f"Cleanup failed: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    cleanup()
