"""
Shared route dependencies.
"""
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from taskmanager.core.errors import Unauthorized
from taskmanager.core.timeouts import run_with_timeout
from taskmanager.db.session import get_db
from taskmanager.models.user import User
from taskmanager.services.auth_service import verify_token

# auto_error=False so a missing header produces our 401 body instead of FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


def _load_user(user_id: int, db: Session) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the caller from the bearer token."""
    if credentials is None:
        raise Unauthorized("Authentication required")

    user_id = verify_token(credentials.credentials)
    user = await run_with_timeout(_load_user, user_id, db)
    if not user:
        raise Unauthorized("Invalid or expired token")
    return user
