"""
Authentication routes for registration and login.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from taskmanager.db.session import get_db
from taskmanager.core.timeouts import run_with_timeout
from taskmanager.schemas.user import UserCreate, UserLogin, Token
from taskmanager.services.auth_service import register_user, authenticate_user

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user and start a session."""
    user, token = await run_with_timeout(register_user, user_data.username, user_data.password, db)
    return Token(token=token, username=user.username)


@router.post("/login", response_model=Token)
async def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Login and get a session token."""
    user, token = await run_with_timeout(authenticate_user, credentials.username, credentials.password, db)
    return Token(token=token, username=user.username)
