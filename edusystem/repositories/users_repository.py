"""
Persistence operations over users.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from edusystem.core.exceptions import ConflictError, NotFoundError
from edusystem.models.material import Material
from edusystem.models.test import Test
from edusystem.models.user import User


class UsersRepository:
    """Repository for users of every role."""

    def __init__(self, db: Session):
        self.db = db

    def create_user(self, **fields) -> User:
        """
        Insert a user.

        Raises:
            ConflictError: If the email is already registered
        """
        if self.find_by_email(fields["email"]):
            raise ConflictError("Email already registered")

        user = User(**fields)
        self.db.add(user)
        self.db.flush()
        self.db.refresh(user)
        return user

    def find_by_id(self, user_id: int) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if not user:
            raise NotFoundError(f"User with ID {user_id} not found")
        return user

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def list_users(self) -> List[User]:
        return self.db.query(User).order_by(User.id).all()

    def user_exists(self, user_id: int) -> bool:
        return self.db.query(User.id).filter(User.id == user_id).first() is not None

    def set_status(self, user_id: int, status: str) -> User:
        user = self.find_by_id(user_id)
        user.status = status
        self.db.flush()
        self.db.refresh(user)
        return user

    def set_password_hash(self, user: User, hashed_password: str) -> User:
        user.hashed_password = hashed_password
        self.db.flush()
        return user

    def delete_user(self, user_id: int) -> None:
        """
        Delete a user together with their reviews and test results.

        Raises:
            NotFoundError: If the user does not exist
            ConflictError: If the user still authors materials or tests
        """
        user = self.find_by_id(user_id)

        owns_material = self.db.query(Material.id).filter(Material.user_id == user_id).first()
        owns_test = self.db.query(Test.id).filter(Test.created_by_user_id == user_id).first()
        if owns_material or owns_test:
            raise ConflictError(
                f"User {user_id} still authors materials or tests and cannot be deleted"
            )

        contents = [review.content for review in user.reviews if review.content is not None]
        self.db.delete(user)
        self.db.flush()
        for content in contents:
            self.db.delete(content)
        self.db.flush()
