"""
Review endpoints.
"""
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from edusystem.core.dependencies import get_current_active_user, get_db, require_roles
from edusystem.models.user import User, UserRole
from edusystem.schemas.common import Message
from edusystem.schemas.review import Review as ReviewSchema, ReviewCreate, ReviewUpdate
from edusystem.services.review_service import ReviewService

router = APIRouter()


@router.post("", response_model=ReviewSchema, status_code=status.HTTP_201_CREATED)
def create_review(
    review_in: ReviewCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    return ReviewService(db).create_review(current_user.id, review_in)


@router.get("", response_model=List[ReviewSchema])
def list_reviews(db: Session = Depends(get_db)) -> Any:
    return ReviewService(db).list_reviews()


@router.get("/{review_id}", response_model=ReviewSchema)
def get_review(review_id: int, db: Session = Depends(get_db)) -> Any:
    return ReviewService(db).get_review(review_id)


@router.put("/{review_id}/content", response_model=ReviewSchema)
def update_review_content(
    review_id: int,
    review_in: ReviewUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    """Update a review's text or media files. Author or admin only."""
    service = ReviewService(db)
    review = service.get_review(review_id)

    if review.user_id != current_user.id and current_user.role != UserRole.ADMIN.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions",
        )

    return service.update_content(review_id, review_in)


@router.delete("/{review_id}", response_model=Message)
def delete_review(
    review_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(UserRole.ADMIN)),
) -> Any:
    ReviewService(db).delete_review(review_id)
    return {"message": f"Review {review_id} deleted successfully"}
