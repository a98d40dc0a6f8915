"""
Database session management.
"""
from typing import Iterator
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from taskmanager.core.config import settings
from taskmanager.db.base import Base


def _engine_args(database_url: str) -> dict:
    """Connection arguments per backend."""
    if database_url.startswith("sqlite"):
        # Requests may be served from a different thread than the one that connected
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_recycle": 3600}


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    **_engine_args(settings.DATABASE_URL)
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Iterator[Session]:
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Initialize database tables."""
    # Models must be imported so their tables are registered on Base.metadata
    import taskmanager.models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
