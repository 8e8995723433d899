"""
Knowledge testing endpoints.
"""
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from edusystem.core.dependencies import (
    get_current_active_user,
    get_db,
    get_optional_user,
    is_staff,
    require_roles,
)
from edusystem.models.test import Test
from edusystem.models.user import User, UserRole
from edusystem.schemas.common import Message
from edusystem.schemas.test import (
    QuestionCreate,
    Test as TestSchema,
    TestCreate,
    TestResult as TestResultSchema,
    TestSubmit,
)
from edusystem.services.test_service import TestService

router = APIRouter()

require_staff = require_roles(UserRole.TUTOR, UserRole.ADMIN)


def _present(test: Test, viewer: Optional[User]) -> TestSchema:
    """Serialize a test, hiding the answers from anyone but tutors and admins."""
    test_out = TestSchema.model_validate(test)
    if viewer is None or not is_staff(viewer):
        for question in test_out.questions:
            question.answer_text = None
    return test_out


@router.post("", response_model=TestSchema, status_code=status.HTTP_201_CREATED)
def create_test(
    test_in: TestCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
) -> Any:
    """
    Create a test for a material.

    The passing score is derived from the number of questions.

    Raises:
        NotFoundError: If the material does not exist
        ConflictError: If the material already has a test
        ValidationFailureError: If a question is invalid
    """
    return TestService(db).create_test(test_in.material_id, test_in.questions, current_user.id)


@router.get("", response_model=List[TestSchema])
def list_tests(
    db: Session = Depends(get_db),
    viewer: Optional[User] = Depends(get_optional_user),
) -> Any:
    """List all tests with their questions and material."""
    return [_present(test, viewer) for test in TestService(db).get_all_tests()]


@router.get("/material/{material_id}", response_model=TestSchema)
def get_test_by_material(
    material_id: int,
    db: Session = Depends(get_db),
    viewer: Optional[User] = Depends(get_optional_user),
) -> Any:
    return _present(TestService(db).get_test_by_material_id(material_id), viewer)


@router.get("/{test_id}", response_model=TestSchema)
def get_test(
    test_id: int,
    db: Session = Depends(get_db),
    viewer: Optional[User] = Depends(get_optional_user),
) -> Any:
    """Get a test. Answers are only included for tutors and admins."""
    return _present(TestService(db).get_test_by_id(test_id), viewer)


@router.put("/{test_id}/questions", response_model=TestSchema)
def update_questions(
    test_id: int,
    questions: List[QuestionCreate],
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
) -> Any:
    """Replace every question of the test with the given list."""
    return TestService(db).update_questions(test_id, questions)


@router.delete("/{test_id}", response_model=Message)
def delete_test(
    test_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
) -> Any:
    TestService(db).delete_test(test_id)
    return {"message": f"Test {test_id} deleted successfully"}


@router.post("/{test_id}/submit", response_model=TestResultSchema, status_code=status.HTTP_201_CREATED)
def submit_test(
    test_id: int,
    submission: TestSubmit,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    """
    Submit answers for a test and get the scored result.

    Args:
        test_id: Test ID
        submission: Answers keyed by question ID
        db: Database session
        current_user: Current authenticated user

    Returns:
        The stored result, including whether the user passed
    """
    return TestService(db).submit_test(test_id, current_user.id, submission.answers)
