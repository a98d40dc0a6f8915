"""
Credential store: registration, login and session token verification.
"""
import logging
from typing import Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from taskmanager.core.errors import Conflict, InvalidInput, Unauthorized
from taskmanager.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from taskmanager.models.user import User

logger = logging.getLogger(__name__)


def issue_token(user: User) -> str:
    """Create a session token carrying the user id."""
    return create_access_token(data={"sub": str(user.id), "username": user.username})


def register_user(username: str, password: str, db: Session) -> Tuple[User, str]:
    """Create a user and return it with a fresh session token."""
    username = (username or "").strip()
    if not username or not password:
        raise InvalidInput("Username and password are required")

    existing_user = db.query(User).filter(User.username == username).first()
    if existing_user:
        raise Conflict("Username already taken")

    new_user = User(username=username, hashed_password=get_password_hash(password))
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same name
        db.rollback()
        raise Conflict("Username already taken")
    db.refresh(new_user)

    logger.info(f"Registered user {new_user.id} ({new_user.username})")
    return new_user, issue_token(new_user)


def authenticate_user(username: str, password: str, db: Session) -> Tuple[User, str]:
    """Check credentials and return the user with a session token."""
    username = (username or "").strip()
    if not username or not password:
        raise InvalidInput("Username and password are required")

    user = db.query(User).filter(User.username == username).first()
    if not user or not verify_password(password, user.hashed_password):
        logger.warning(f"Failed login for username '{username}'")
        raise Unauthorized("Invalid credentials")

    return user, issue_token(user)


def verify_token(token: str) -> int:
    """Resolve a session token to the user id it was issued for."""
    if not token:
        raise Unauthorized("Authentication required")

    payload = decode_access_token(token)
    if not payload:
        raise Unauthorized("Invalid or expired token")

    try:
        return int(payload.get("sub"))
    except (TypeError, ValueError):
        raise Unauthorized("Invalid or expired token")
