"""
Review management.
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from edusystem.core.exceptions import ValidationFailureError
from edusystem.db.base import transaction
from edusystem.models.review import Review
from edusystem.repositories.reviews_repository import ReviewsRepository
from edusystem.schemas.review import ReviewCreate, ReviewUpdate

logger = logging.getLogger(__name__)


class ReviewService:
    def __init__(self, db: Session):
        self.db = db
        self.reviews = ReviewsRepository(db)

    def create_review(self, user_id: int, review_in: ReviewCreate) -> Review:
        if not review_in.text.strip():
            raise ValidationFailureError("Review text must not be empty")

        with transaction(self.db):
            review = self.reviews.create_review(
                user_id, review_in.type.value, review_in.text, review_in.media_files
            )
        logger.info(f"Review {review.id} created by user {user_id}")
        return review

    def get_review(self, review_id: int) -> Review:
        return self.reviews.get_review_by_id(review_id)

    def list_reviews(self) -> List[Review]:
        return self.reviews.list_reviews()

    def update_content(self, review_id: int, review_in: ReviewUpdate) -> Review:
        if review_in.text is not None and not review_in.text.strip():
            raise ValidationFailureError("Review text must not be empty")

        with transaction(self.db):
            review = self.reviews.update_content(
                review_id, text=review_in.text, media_files=review_in.media_files
            )
        return review

    def delete_review(self, review_id: int) -> None:
        with transaction(self.db):
            self.reviews.delete_review(review_id)
        logger.info(f"Review {review_id} deleted")
