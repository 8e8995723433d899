"""
User registration, authentication and account administration.

Also serves as the identity contract other services rely on: whether a user
exists, whether they are blocked and which role they hold.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from edusystem.core.exceptions import ValidationFailureError
from edusystem.core.security import get_password_hash, verify_password
from edusystem.db.base import transaction
from edusystem.models.user import User, UserRole, UserStatus
from edusystem.repositories.users_repository import UsersRepository
from edusystem.schemas.user import AdminCreate, TutorCreate, UserCreate

logger = logging.getLogger(__name__)


class UserService:
    """Service for users of every role."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UsersRepository(db)

    def _register(self, user_in: UserCreate, role: UserRole, **extra) -> User:
        with transaction(self.db):
            user = self.users.create_user(
                email=user_in.email,
                name=user_in.name,
                hashed_password=get_password_hash(user_in.password),
                role=role.value,
                status=UserStatus.ACTIVE.value,
                **extra,
            )
        logger.info(f"Registered {role.value} {user.email} (id={user.id})")
        return user

    def register_student(self, user_in: UserCreate) -> User:
        return self._register(user_in, UserRole.STUDENT)

    def register_tutor(self, tutor_in: TutorCreate) -> User:
        return self._register(
            tutor_in,
            UserRole.TUTOR,
            experience=tutor_in.experience,
            specialty=tutor_in.specialty,
        )

    def register_admin(self, admin_in: AdminCreate) -> User:
        return self._register(admin_in, UserRole.ADMIN, access_key=admin_in.access_key)

    def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return the user if the credentials are valid, otherwise None."""
        user = self.users.find_by_email(email)
        if not user or not verify_password(password, user.hashed_password):
            return None
        return user

    def change_password(self, user: User, old_password: str, new_password: str) -> None:
        if not verify_password(old_password, user.hashed_password):
            raise ValidationFailureError("Old password is incorrect")
        with transaction(self.db):
            self.users.set_password_hash(user, get_password_hash(new_password))
        logger.info(f"Password changed for user {user.id}")

    def list_users(self) -> List[User]:
        return self.users.list_users()

    def get_user(self, user_id: int) -> User:
        return self.users.find_by_id(user_id)

    def block_user(self, acting_user_id: int, user_id: int) -> User:
        if acting_user_id == user_id:
            raise ValidationFailureError("Admins cannot block themselves")
        with transaction(self.db):
            user = self.users.set_status(user_id, UserStatus.BLOCKED.value)
        logger.info(f"User {user_id} blocked by admin {acting_user_id}")
        return user

    def unblock_user(self, acting_user_id: int, user_id: int) -> User:
        with transaction(self.db):
            user = self.users.set_status(user_id, UserStatus.ACTIVE.value)
        logger.info(f"User {user_id} unblocked by admin {acting_user_id}")
        return user

    def delete_user(self, acting_user_id: int, user_id: int) -> None:
        if acting_user_id == user_id:
            raise ValidationFailureError("Admins cannot delete themselves")
        with transaction(self.db):
            self.users.delete_user(user_id)
        logger.info(f"User {user_id} deleted by admin {acting_user_id}")

    def user_exists(self, user_id: int) -> bool:
        return self.users.user_exists(user_id)

    def is_blocked(self, user_id: int) -> bool:
        return self.users.find_by_id(user_id).is_blocked

    def get_role(self, user_id: int) -> UserRole:
        return UserRole(self.users.find_by_id(user_id).role)
