"""
Pydantic schemas for Material and Content models.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from edusystem.models.material import ContentCategory


class ContentBase(BaseModel):
    """Base content schema."""

    text: str
    media_files: List[str] = Field(default_factory=list)


class Content(ContentBase):
    """Schema for content response."""

    id: int

    class Config:
        """Pydantic config."""

        from_attributes = True


class MaterialCreate(ContentBase):
    """Schema for material creation."""

    category: ContentCategory


class MaterialUpdate(BaseModel):
    """Schema for material content update. Only supplied fields change."""

    text: Optional[str] = None
    media_files: Optional[List[str]] = None
    category: Optional[ContentCategory] = None


class Material(BaseModel):
    """Schema for material response."""

    id: int
    user_id: int
    category: ContentCategory
    creation_date: datetime
    content: Content

    class Config:
        """Pydantic config."""

        from_attributes = True
