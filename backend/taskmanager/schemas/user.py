"""
Pydantic schemas for User entity and authentication.
"""
from pydantic import field_validator
from datetime import datetime
from taskmanager.schemas.common import CamelModel


class UserCredentials(CamelModel):
    """Username and password pair."""
    username: str
    password: str

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Username is required")
        return v

    @field_validator("password")
    @classmethod
    def require_password(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v


class UserCreate(UserCredentials):
    """Schema for registration."""
    pass


class UserLogin(UserCredentials):
    """Schema for user login."""
    pass


class UserResponse(CamelModel):
    """Schema for user response."""
    id: int
    username: str
    created_at: datetime


class Token(CamelModel):
    """Schema for session token response."""
    token: str
    token_type: str = "bearer"
    username: str
