"""
Pydantic schemas for Test, Question and TestResult models.
"""
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from edusystem.schemas.material import Material


class QuestionBase(BaseModel):
    """Base question schema."""

    question_text: str
    options: List[str] = Field(default_factory=list)
    answer_text: str


class QuestionCreate(QuestionBase):
    """Schema for question creation."""

    pass


class Question(QuestionBase):
    """Schema for question response. The answer is hidden from students and anonymous readers."""

    id: int
    test_id: int
    answer_text: Optional[str] = None

    class Config:
        """Pydantic config."""

        from_attributes = True


class TestCreate(BaseModel):
    """Schema for test creation."""

    material_id: int
    questions: List[QuestionCreate]


class Test(BaseModel):
    """Schema for test response."""

    id: int
    material_id: int
    created_by_user_id: int
    passing_score: int
    created_at: datetime
    questions: List[Question]
    material: Optional[Material] = None

    class Config:
        """Pydantic config."""

        from_attributes = True


class TestSubmit(BaseModel):
    """Schema for submitting answers, keyed by question id."""

    answers: Dict[int, str]


class TestResult(BaseModel):
    """Schema for test result response."""

    id: int
    test_id: int
    user_id: int
    score: int
    total_questions: int
    passing_score: int
    passed: bool
    user_answers: Dict[int, str]
    submitted_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True
