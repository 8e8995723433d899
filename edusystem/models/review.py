"""
Review model.
"""
import enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from edusystem.db.base import Base


class ReviewType(str, enum.Enum):
    FEEDBACK = "Feedback"
    RATING = "Rating"
    COMMENT = "Comment"
    SUGGESTION = "Suggestion"
    CRITIQUE = "Critique"


class Review(Base):
    """User review of the platform or its materials."""

    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    content_id = Column(Integer, ForeignKey("contents.id"), nullable=False)
    type = Column(String(50), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    author = relationship("User", back_populates="reviews")
    content = relationship("Content", lazy="joined")
