"""
Pydantic schemas for Review model.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from edusystem.models.review import ReviewType
from edusystem.schemas.material import Content


class ReviewCreate(BaseModel):
    """Schema for review creation."""

    text: str
    media_files: List[str] = Field(default_factory=list)
    type: ReviewType


class ReviewUpdate(BaseModel):
    """Schema for review content update."""

    text: Optional[str] = None
    media_files: Optional[List[str]] = None


class Review(BaseModel):
    """Schema for review response."""

    id: int
    user_id: int
    type: ReviewType
    created_at: Optional[datetime] = None
    content: Content

    class Config:
        """Pydantic config."""

        from_attributes = True
