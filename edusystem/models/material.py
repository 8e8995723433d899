"""
Material and content models.
"""
import enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship

from edusystem.db.base import Base


class ContentCategory(str, enum.Enum):
    """Subject area of a material."""

    SCIENCE = "Science"
    ART = "Art"
    TECHNOLOGY = "Technology"
    BUSINESS = "Business"
    HEALTH = "Health"


class Content(Base):
    """Text plus media links, shared by materials and reviews."""

    __tablename__ = "contents"

    id = Column(Integer, primary_key=True, index=True)
    text = Column(Text, nullable=False)
    media_files = Column(JSON, nullable=False, default=list)  # List of URLs


class Material(Base):
    """Educational material authored by a tutor or admin."""

    __tablename__ = "materials"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content_id = Column(Integer, ForeignKey("contents.id"), nullable=False)
    category = Column(String(50), nullable=False)
    creation_date = Column(DateTime(timezone=True), nullable=False)

    # Relationships
    author = relationship("User", back_populates="materials")
    content = relationship("Content", lazy="joined")
    test = relationship("Test", back_populates="material", uselist=False, cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Material(id={self.id}, category={self.category})>"
