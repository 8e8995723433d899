"""
User administration endpoints (admin only).
"""
from typing import Any, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from edusystem.core.dependencies import get_db, require_roles
from edusystem.models.user import User, UserRole
from edusystem.schemas.common import Message
from edusystem.schemas.user import User as UserSchema, UserStatusChange
from edusystem.services.user_service import UserService

router = APIRouter()

require_admin = require_roles(UserRole.ADMIN)


@router.get("", response_model=List[UserSchema])
def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> Any:
    return UserService(db).list_users()


@router.get("/{user_id}", response_model=UserSchema)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> Any:
    return UserService(db).get_user(user_id)


@router.patch("/{user_id}/block", response_model=UserStatusChange)
def block_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> Any:
    """Block a user; blocked users can no longer log in or call the API."""
    user = UserService(db).block_user(current_user.id, user_id)
    return {
        "message": "User has been blocked successfully",
        "user_id": user.id,
        "name": user.name,
        "status": user.status,
    }


@router.patch("/{user_id}/unblock", response_model=UserStatusChange)
def unblock_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> Any:
    user = UserService(db).unblock_user(current_user.id, user_id)
    return {
        "message": "User has been unblocked successfully",
        "user_id": user.id,
        "name": user.name,
        "status": user.status,
    }


@router.delete("/{user_id}", response_model=Message)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> Any:
    UserService(db).delete_user(current_user.id, user_id)
    return {"message": f"User {user_id} has been deleted successfully"}
