"""
Test, question and test result models for knowledge testing.
"""
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from edusystem.db.base import Base


class Test(Base):
    """Assessment attached to exactly one material."""

    __tablename__ = "tests"
    # Ids are never reused after deletes
    __table_args__ = {"sqlite_autoincrement": True}
    __test__ = False

    id = Column(Integer, primary_key=True, index=True)
    material_id = Column(
        Integer, ForeignKey("materials.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    created_by_user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    passing_score = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    material = relationship("Material", back_populates="test")
    created_by = relationship("User")
    questions = relationship(
        "Question",
        back_populates="test",
        cascade="all, delete-orphan",
        order_by="Question.id",
    )
    # Deletion is restricted while results exist; never null out their test_id
    results = relationship("TestResult", back_populates="test", passive_deletes="all")

    def __repr__(self):
        return f"<Test(id={self.id}, material_id={self.material_id}, passing_score={self.passing_score})>"


class Question(Base):
    """One question owned by a test."""

    __tablename__ = "questions"
    # Result answer maps are keyed by question id
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    test_id = Column(Integer, ForeignKey("tests.id", ondelete="CASCADE"), nullable=False, index=True)
    question_text = Column(String(500), nullable=False)
    options = Column(JSON, nullable=False, default=list)  # Empty for open-text questions
    answer_text = Column(String(500), nullable=False)

    # Relationships
    test = relationship("Test", back_populates="questions")


class TestResult(Base):
    """One scored submission. Append-only."""

    __tablename__ = "test_results"
    __table_args__ = {"sqlite_autoincrement": True}
    __test__ = False

    id = Column(Integer, primary_key=True, index=True)
    test_id = Column(Integer, ForeignKey("tests.id", ondelete="RESTRICT"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    score = Column(Integer, nullable=False)
    total_questions = Column(Integer, nullable=False)
    passing_score = Column(Integer, nullable=False)  # Snapshot at submission time
    passed = Column(Boolean, nullable=False)
    user_answers = Column(JSON, nullable=False, default=dict)  # {question_id: answer}
    submitted_at = Column(DateTime(timezone=True), nullable=False)

    # Relationships
    test = relationship("Test", back_populates="results")
    user = relationship("User", back_populates="test_results")

    def __repr__(self):
        return f"<TestResult(test_id={self.test_id}, user_id={self.user_id}, score={self.score})>"
