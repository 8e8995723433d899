"""
User model for authentication and authorization.
"""
import enum

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from edusystem.db.base import Base


class UserRole(str, enum.Enum):
    """Roles a user can hold."""

    STUDENT = "student"
    TUTOR = "tutor"
    ADMIN = "admin"


class UserStatus(str, enum.Enum):
    """Account status controlled by admins."""

    ACTIVE = "active"
    BLOCKED = "blocked"


class User(Base):
    """User model.

    One table for every role; ``access_key`` is only set for admins and
    ``experience``/``specialty`` only for tutors.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=UserRole.STUDENT.value)
    status = Column(String(20), nullable=False, default=UserStatus.ACTIVE.value)

    access_key = Column(String(100), nullable=True)  # admin only
    experience = Column(Integer, nullable=True)  # tutor only, years
    specialty = Column(String(100), nullable=True)  # tutor only

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    materials = relationship("Material", back_populates="author")
    reviews = relationship("Review", back_populates="author", cascade="all, delete-orphan")
    test_results = relationship("TestResult", back_populates="user", cascade="all, delete-orphan")

    @property
    def is_blocked(self) -> bool:
        return self.status == UserStatus.BLOCKED.value

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
