"""Schemas module - Import all schemas."""
from edusystem.schemas.user import (
    AdminCreate,
    ChangePasswordRequest,
    Token,
    TutorCreate,
    User,
    UserCreate,
    UserStatusChange,
)
from edusystem.schemas.material import Content, Material, MaterialCreate, MaterialUpdate
from edusystem.schemas.test import (
    Question,
    QuestionCreate,
    Test,
    TestCreate,
    TestResult,
    TestSubmit,
)
from edusystem.schemas.review import Review, ReviewCreate, ReviewUpdate
from edusystem.schemas.common import Message, ErrorResponse

__all__ = [
    "AdminCreate",
    "ChangePasswordRequest",
    "Token",
    "TutorCreate",
    "User",
    "UserCreate",
    "UserStatusChange",
    "Content",
    "Material",
    "MaterialCreate",
    "MaterialUpdate",
    "Question",
    "QuestionCreate",
    "Test",
    "TestCreate",
    "TestResult",
    "TestSubmit",
    "Review",
    "ReviewCreate",
    "ReviewUpdate",
    "Message",
    "ErrorResponse",
]
