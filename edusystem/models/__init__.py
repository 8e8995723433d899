"""Models module - Import all models here for Alembic."""
from edusystem.db.base import Base
from edusystem.models.user import User, UserRole, UserStatus
from edusystem.models.material import Content, ContentCategory, Material
from edusystem.models.test import Question, Test, TestResult
from edusystem.models.review import Review, ReviewType

__all__ = [
    "Base",
    "User",
    "UserRole",
    "UserStatus",
    "Content",
    "ContentCategory",
    "Material",
    "Question",
    "Test",
    "TestResult",
    "Review",
    "ReviewType",
]
