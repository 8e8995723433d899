"""
Dependency injection for FastAPI endpoints.
"""
from typing import Callable, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from edusystem.core.config import settings
from edusystem.core.security import decode_token
from edusystem.db.base import get_db
from edusystem.models.user import User, UserRole

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_PREFIX}/auth/login")
optional_oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_PREFIX}/auth/login", auto_error=False
)


def get_current_user(
    db: Session = Depends(get_db), token: str = Depends(oauth2_scheme)
) -> User:
    """
    Get current authenticated user from JWT token.

    Args:
        db: Database session
        token: JWT token

    Returns:
        Current user

    Raises:
        HTTPException: If token is invalid or user not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    payload = decode_token(token)
    if payload is None:
        raise credentials_exception

    user_id: Optional[str] = payload.get("sub")
    if user_id is None or not user_id.isdigit():
        raise credentials_exception

    user = db.query(User).filter(User.id == int(user_id)).first()
    if user is None:
        raise credentials_exception

    return user


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """
    Get current active user.

    Raises:
        HTTPException: If the user has been blocked
    """
    if current_user.is_blocked:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User is blocked")
    return current_user


def require_roles(*roles: UserRole) -> Callable[..., User]:
    """
    Build a dependency that only lets users with one of ``roles`` through.

    Example usage:
        ```python
        @router.post("")
        def create(current_user: User = Depends(require_roles(UserRole.TUTOR, UserRole.ADMIN))):
            ...
        ```
    """
    allowed = {role.value for role in roles}

    def role_checker(current_user: User = Depends(get_current_active_user)) -> User:
        if current_user.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not enough permissions",
            )
        return current_user

    return role_checker


def is_staff(user: User) -> bool:
    """Tutors and admins may manage materials and tests and read every result."""
    return user.role in (UserRole.TUTOR.value, UserRole.ADMIN.value)


def get_optional_user(
    db: Session = Depends(get_db), token: Optional[str] = Depends(optional_oauth2_scheme)
) -> Optional[User]:
    """
    Resolve the caller on endpoints that anonymous users may also read.

    Missing or invalid tokens and blocked users resolve to None.
    """
    if not token:
        return None

    payload = decode_token(token)
    user_id = payload.get("sub") if payload else None
    if user_id is None or not user_id.isdigit():
        return None

    user = db.query(User).filter(User.id == int(user_id)).first()
    if user is None or user.is_blocked:
        return None
    return user
