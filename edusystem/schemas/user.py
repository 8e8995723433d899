"""
Pydantic schemas for User model.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from edusystem.models.user import UserRole, UserStatus


class UserBase(BaseModel):
    """Base user schema."""

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=100)


class UserCreate(UserBase):
    """Schema for student registration."""

    password: str = Field(..., min_length=8)


class TutorCreate(UserCreate):
    """Schema for tutor registration."""

    experience: int = Field(..., ge=0)
    specialty: str = Field(..., min_length=1, max_length=100)


class AdminCreate(UserCreate):
    """Schema for admin registration."""

    access_key: str = Field(..., min_length=1, max_length=100)


class ChangePasswordRequest(BaseModel):
    """Schema for changing the current user's password."""

    old_password: str
    new_password: str = Field(..., min_length=8)


class User(UserBase):
    """Schema for user response."""

    id: int
    role: UserRole
    status: UserStatus
    experience: Optional[int] = None
    specialty: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        """Pydantic config."""

        from_attributes = True


class UserStatusChange(BaseModel):
    """Result of blocking or unblocking a user."""

    message: str
    user_id: int
    name: str
    status: UserStatus


class Token(BaseModel):
    """Schema for JWT token."""

    access_token: str
    expires_in: int
    token_type: str
