"""
Persistence operations over tests, questions and test results.

Methods only flush; the calling service owns the transaction boundary.
"""
from typing import Iterable, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from edusystem.core.exceptions import ConflictError, InvalidReferenceError, NotFoundError
from edusystem.models.material import Material
from edusystem.models.test import Question, Test, TestResult


def _build_questions(questions: Iterable) -> List[Question]:
    return [
        Question(
            question_text=q.question_text,
            options=list(q.options or []),
            answer_text=q.answer_text,
        )
        for q in questions
    ]


class TestsRepository:
    """Repository for the test aggregate (a Test owns its Questions)."""

    __test__ = False

    def __init__(self, db: Session):
        self.db = db

    def create_test(
        self,
        material_id: int,
        questions: Iterable,
        created_by_user_id: int,
        passing_score: int,
    ) -> Test:
        """
        Persist a test and its questions for an existing material.

        Raises:
            InvalidReferenceError: If the material does not exist
            ConflictError: If the material already has a test
        """
        material = self.db.query(Material).filter(Material.id == material_id).first()
        if not material:
            raise InvalidReferenceError("Material not found")

        if self.material_has_test(material_id):
            raise ConflictError(f"Material {material_id} already has a test")

        test = Test(
            material_id=material_id,
            created_by_user_id=created_by_user_id,
            passing_score=passing_score,
        )
        self.db.add(test)
        try:
            self.db.flush()
        except IntegrityError as e:
            # A concurrent request attached a test to the same material first
            raise ConflictError(f"Material {material_id} already has a test") from e

        test.questions.extend(_build_questions(questions))
        self.db.flush()
        self.db.refresh(test)
        return test

    def material_has_test(self, material_id: int) -> bool:
        return self.db.query(Test.id).filter(Test.material_id == material_id).first() is not None

    def delete_test(self, test_id: int) -> None:
        """
        Delete a test and cascade its questions.

        Raises:
            NotFoundError: If the test does not exist
            ConflictError: If results still reference the test
        """
        test = self.find_test_by_id(test_id)

        if self.count_results_for_test(test_id):
            raise ConflictError(f"Test {test_id} has submitted results and cannot be deleted")

        self.db.delete(test)
        self.db.flush()

    def replace_questions(self, test_id: int, questions: Iterable, passing_score: int) -> Test:
        """Delete every question of the test, then insert the new set."""
        test = self.find_test_by_id(test_id)

        test.questions.clear()
        self.db.flush()

        test.questions.extend(_build_questions(questions))
        test.passing_score = passing_score
        self.db.flush()
        self.db.refresh(test)
        return test

    def find_test_by_id(self, test_id: int) -> Test:
        test = (
            self.db.query(Test)
            .options(selectinload(Test.questions))
            .filter(Test.id == test_id)
            .first()
        )
        if not test:
            raise NotFoundError("Test not found")
        return test

    def find_test_by_material_id(self, material_id: int) -> Test:
        test = (
            self.db.query(Test)
            .options(selectinload(Test.questions))
            .filter(Test.material_id == material_id)
            .first()
        )
        if not test:
            raise NotFoundError("Test not found for this material")
        return test

    def list_all_tests(self) -> List[Test]:
        """All tests ordered by id, with questions and material content loaded."""
        return (
            self.db.query(Test)
            .options(
                selectinload(Test.questions),
                joinedload(Test.material).joinedload(Material.content),
            )
            .order_by(Test.id)
            .all()
        )

    def insert_test_result(self, result: TestResult) -> TestResult:
        self.db.add(result)
        self.db.flush()
        self.db.refresh(result)
        return result

    def find_result_by_id(self, result_id: int) -> TestResult:
        result = self.db.query(TestResult).filter(TestResult.id == result_id).first()
        if not result:
            raise NotFoundError("Test result not found")
        return result

    def list_results_by_user(self, user_id: int) -> List[TestResult]:
        return (
            self.db.query(TestResult)
            .filter(TestResult.user_id == user_id)
            .order_by(TestResult.submitted_at.desc(), TestResult.id.desc())
            .all()
        )

    def list_results_by_test(self, test_id: int) -> List[TestResult]:
        return (
            self.db.query(TestResult)
            .filter(TestResult.test_id == test_id)
            .order_by(TestResult.submitted_at.desc(), TestResult.id.desc())
            .all()
        )

    def list_all_results(self) -> List[TestResult]:
        return (
            self.db.query(TestResult)
            .order_by(TestResult.submitted_at.desc(), TestResult.id.desc())
            .all()
        )

    def count_results_for_test(self, test_id: int) -> int:
        return self.db.query(TestResult).filter(TestResult.test_id == test_id).count()
