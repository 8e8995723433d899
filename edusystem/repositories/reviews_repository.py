"""
Persistence operations over reviews.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from edusystem.core.exceptions import InvalidReferenceError, NotFoundError
from edusystem.models.material import Content
from edusystem.models.review import Review
from edusystem.models.user import User


class ReviewsRepository:
    """Repository for reviews."""

    def __init__(self, db: Session):
        self.db = db

    def create_review(
        self, user_id: int, review_type: str, text: str, media_files: Optional[List[str]]
    ) -> Review:
        if not self.db.query(User.id).filter(User.id == user_id).first():
            raise InvalidReferenceError("User not found")

        review = Review(
            user_id=user_id,
            type=review_type,
            content=Content(text=text, media_files=list(media_files or [])),
        )
        self.db.add(review)
        self.db.flush()
        self.db.refresh(review)
        return review

    def get_review_by_id(self, review_id: int) -> Review:
        review = self.db.query(Review).filter(Review.id == review_id).first()
        if not review:
            raise NotFoundError("Review not found")
        return review

    def list_reviews(self) -> List[Review]:
        return self.db.query(Review).order_by(Review.id.desc()).all()

    def update_content(
        self, review_id: int, text: Optional[str] = None, media_files: Optional[List[str]] = None
    ) -> Review:
        review = self.get_review_by_id(review_id)

        if text is not None:
            review.content.text = text
        if media_files is not None:
            review.content.media_files = list(media_files)

        self.db.flush()
        self.db.refresh(review)
        return review

    def delete_review(self, review_id: int) -> None:
        review = self.get_review_by_id(review_id)
        content = review.content
        self.db.delete(review)
        self.db.flush()
        if content is not None:
            self.db.delete(content)
            self.db.flush()
