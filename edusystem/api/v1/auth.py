"""
Authentication endpoints for user registration and login.
"""
from datetime import timedelta
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from edusystem.core.config import settings
from edusystem.core.dependencies import get_current_active_user, get_db, require_roles
from edusystem.core.security import create_access_token
from edusystem.models.user import User, UserRole
from edusystem.schemas.common import Message
from edusystem.schemas.user import (
    AdminCreate,
    ChangePasswordRequest,
    Token,
    TutorCreate,
    User as UserSchema,
    UserCreate,
)
from edusystem.services.user_service import UserService

router = APIRouter()


@router.post("/register", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
def register(user_in: UserCreate, db: Session = Depends(get_db)) -> Any:
    """
    Register a new student.

    Raises:
        ConflictError: If email already exists
    """
    return UserService(db).register_student(user_in)


@router.post("/register/tutor", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
def register_tutor(tutor_in: TutorCreate, db: Session = Depends(get_db)) -> Any:
    """Register a new tutor."""
    return UserService(db).register_tutor(tutor_in)


@router.post("/register/admin", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
def register_admin(
    admin_in: AdminCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(UserRole.ADMIN)),
) -> Any:
    """Register a new admin. Only existing admins can do this."""
    return UserService(db).register_admin(admin_in)


@router.post("/login", response_model=Token)
def login(
    db: Session = Depends(get_db), form_data: OAuth2PasswordRequestForm = Depends()
) -> Any:
    """
    Login user and return JWT token.

    Args:
        db: Database session
        form_data: OAuth2 form data (username is the email)

    Returns:
        JWT access token

    Raises:
        HTTPException: If credentials are invalid or the user is blocked
    """
    user = UserService(db).authenticate(form_data.username, form_data.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if user.is_blocked:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User is blocked",
        )

    expires_in = settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    access_token = create_access_token(
        subject=user.id,
        role=user.role,
        expires_delta=timedelta(seconds=expires_in),
    )

    return {"access_token": access_token, "token_type": "bearer", "expires_in": expires_in}


@router.get("/me", response_model=UserSchema)
def read_current_user(current_user: User = Depends(get_current_active_user)) -> Any:
    """Get current authenticated user."""
    return current_user


@router.post("/change-password", response_model=Message)
def change_password(
    request: ChangePasswordRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    UserService(db).change_password(current_user, request.old_password, request.new_password)
    return {"message": "Password changed successfully"}
