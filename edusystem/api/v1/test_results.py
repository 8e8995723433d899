"""
Test result endpoints.

Students only see their own results; tutors and admins see everything.
"""
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from edusystem.core.dependencies import get_current_active_user, get_db, is_staff, require_roles
from edusystem.models.user import User, UserRole
from edusystem.schemas.test import TestResult as TestResultSchema
from edusystem.services.test_service import TestService

router = APIRouter()


@router.get("", response_model=List[TestResultSchema])
def list_results(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    service = TestService(db)
    if is_staff(current_user):
        return service.get_all_results()
    return service.get_results_by_user(current_user.id)


@router.get("/me", response_model=List[TestResultSchema])
def list_my_results(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    return TestService(db).get_results_by_user(current_user.id)


@router.get("/user/{user_id}", response_model=List[TestResultSchema])
def list_user_results(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    if current_user.id != user_id and not is_staff(current_user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions",
        )
    return TestService(db).get_results_by_user(user_id)


@router.get("/test/{test_id}", response_model=List[TestResultSchema])
def list_test_results(
    test_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(UserRole.TUTOR, UserRole.ADMIN)),
) -> Any:
    return TestService(db).get_results_by_test(test_id)


@router.get("/{result_id}", response_model=TestResultSchema)
def get_result(
    result_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    result = TestService(db).get_result_by_id(result_id)

    if result.user_id != current_user.id and not is_staff(current_user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions",
        )

    return result
