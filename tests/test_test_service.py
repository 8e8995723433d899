"""Service-level tests for test creation, question replacement and submissions."""
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import IntegrityError

from edusystem.core.exceptions import (
    ConflictError,
    InvalidReferenceError,
    NotFoundError,
    ValidationFailureError,
)
from edusystem.repositories import tests_repository
from edusystem.schemas.test import QuestionCreate
from edusystem.services import test_service

from conftest import make_questions


@pytest.fixture
def service(db_session):
    return test_service.TestService(db_session)


@pytest.fixture
def created_test(service, material, tutor):
    return service.create_test(material.id, make_questions(4), tutor.id)


class TestCreateTest:
    def test_create_persists_questions_and_passing_score(self, service, material, tutor):
        test = service.create_test(material.id, make_questions(10), tutor.id)

        assert test.id is not None
        assert test.material_id == material.id
        assert test.created_by_user_id == tutor.id
        assert len(test.questions) == 10
        assert test.passing_score == 7

    def test_round_trip_preserves_question_fields(self, service, material, tutor):
        question = QuestionCreate(question_text="Pick A", options=["A", "B", "C"], answer_text="A")
        created = service.create_test(material.id, [question], tutor.id)

        fetched = service.get_test_by_id(created.id)

        assert fetched.passing_score == 1
        assert len(fetched.questions) == 1
        stored = fetched.questions[0]
        assert stored.question_text == "Pick A"
        assert stored.options == ["A", "B", "C"]
        assert stored.answer_text == "A"
        assert stored.test_id == created.id

    def test_lookup_by_material(self, service, created_test, material):
        assert service.get_test_by_material_id(material.id).id == created_test.id

    def test_missing_material_is_invalid_reference(self, service, tutor):
        with pytest.raises(InvalidReferenceError) as exc_info:
            service.create_test(9999, make_questions(2), tutor.id)

        assert isinstance(exc_info.value, NotFoundError)

    def test_second_test_for_material_conflicts(self, service, created_test, material, tutor):
        with pytest.raises(ConflictError):
            service.create_test(material.id, make_questions(2), tutor.id)

    def test_empty_question_set_is_rejected(self, service, material, tutor):
        with pytest.raises(ValidationFailureError):
            service.create_test(material.id, [], tutor.id)

        with pytest.raises(NotFoundError):
            service.get_test_by_material_id(material.id)

    def test_concurrent_duplicate_is_reported_as_conflict(
        self, service, created_test, material, tutor, monkeypatch
    ):
        # Both requests pass the existence check; the unique constraint decides
        monkeypatch.setattr(
            tests_repository.TestsRepository, "material_has_test", lambda self, material_id: False
        )

        with pytest.raises(ConflictError):
            service.create_test(material.id, make_questions(2), tutor.id)

        assert service.get_test_by_material_id(material.id).id == created_test.id

    def test_storage_failure_leaves_no_test_behind(
        self, service, material, tutor, db_session, monkeypatch
    ):
        monkeypatch.setattr(test_service, "validate_questions", lambda questions: None)
        questions = [
            QuestionCreate(question_text="Valid", answer_text="A"),
            SimpleNamespace(question_text="Broken", options=[], answer_text=None),
        ]

        with pytest.raises(IntegrityError):
            service.create_test(material.id, questions, tutor.id)

        assert db_session.query(test_service.Test).count() == 0
        assert db_session.query(test_service.Question).count() == 0

    def test_list_all_tests_ordered_by_id(self, service, create_material, tutor):
        first = service.create_test(create_material(tutor).id, make_questions(1), tutor.id)
        second = service.create_test(create_material(tutor).id, make_questions(2), tutor.id)

        assert [test.id for test in service.get_all_tests()] == [first.id, second.id]


class TestUpdateQuestions:
    def test_replaces_the_whole_question_set(self, service, created_test):
        old_ids = {question.id for question in created_test.questions}
        new_questions = [
            QuestionCreate(question_text="New 1", answer_text="x"),
            QuestionCreate(question_text="New 2", answer_text="y"),
        ]

        updated = service.update_questions(created_test.id, new_questions)

        assert [q.question_text for q in updated.questions] == ["New 1", "New 2"]
        assert old_ids.isdisjoint({q.id for q in updated.questions})
        assert updated.passing_score == 2

    def test_unknown_test_is_not_found(self, service):
        with pytest.raises(NotFoundError):
            service.update_questions(9999, make_questions(1))

    def test_invalid_replacement_keeps_existing_questions(self, service, created_test):
        with pytest.raises(ValidationFailureError):
            service.update_questions(
                created_test.id,
                [QuestionCreate(question_text="Q", options=["A"], answer_text="B")],
            )

        assert len(service.get_test_by_id(created_test.id).questions) == 4


    def test_storage_failure_keeps_existing_questions(self, service, created_test, monkeypatch):
        monkeypatch.setattr(test_service, "validate_questions", lambda questions: None)
        broken = [SimpleNamespace(question_text="Broken", options=[], answer_text=None)]

        with pytest.raises(IntegrityError):
            service.update_questions(created_test.id, broken)

        test = service.get_test_by_id(created_test.id)
        assert len(test.questions) == 4
        assert test.passing_score == 3

    def test_replaced_question_ids_are_never_reused(self, service, created_test, student):
        stale_answers = {question.id: "correctanswer" for question in created_test.questions}

        service.update_questions(created_test.id, make_questions(4))
        result = service.submit_test(created_test.id, student.id, stale_answers)

        assert result.score == 0


class TestDeleteTest:
    def test_delete_removes_test_and_questions(self, service, created_test, db_session):
        test_id = created_test.id

        service.delete_test(test_id)

        with pytest.raises(NotFoundError):
            service.get_test_by_id(test_id)
        remaining = db_session.query(test_service.Question).filter_by(test_id=test_id).count()
        assert remaining == 0

    def test_delete_unknown_test_is_not_found(self, service):
        with pytest.raises(NotFoundError):
            service.delete_test(9999)

    def test_delete_with_results_conflicts(self, service, created_test, student):
        service.submit_test(created_test.id, student.id, {})

        with pytest.raises(ConflictError):
            service.delete_test(created_test.id)

        assert service.get_test_by_id(created_test.id).id == created_test.id


class TestSubmitTest:
    def test_half_correct_submission_fails(self, service, created_test, student):
        questions = created_test.questions
        answers = {
            questions[0].id: "CORRECTANSWER",
            questions[1].id: "correctanswer",
            questions[2].id: "wrong",
        }

        result = service.submit_test(created_test.id, student.id, answers)

        assert result.score == 2
        assert result.total_questions == 4
        assert result.passing_score == 3
        assert result.passed is False
        assert result.user_id == student.id
        assert result.submitted_at is not None

    def test_reaching_passing_score_passes(self, service, created_test, student):
        answers = {question.id: "correctanswer" for question in created_test.questions[:3]}

        result = service.submit_test(created_test.id, student.id, answers)

        assert result.score == 3
        assert result.passed is True

    def test_answers_are_stored_verbatim(self, service, created_test, student):
        question_id = created_test.questions[0].id

        result = service.submit_test(created_test.id, student.id, {question_id: "CorrectAnswer"})

        assert result.user_answers == {str(question_id): "CorrectAnswer"}

    def test_every_submission_appends_a_result(self, service, created_test, student):
        for _ in range(3):
            service.submit_test(created_test.id, student.id, {})

        assert len(service.get_results_by_user(student.id)) == 3
        assert len(service.get_results_by_test(created_test.id)) == 3

    def test_result_keeps_its_totals_after_questions_change(self, service, created_test, student):
        result = service.submit_test(created_test.id, student.id, {})

        service.update_questions(created_test.id, make_questions(10))

        stored = service.get_result_by_id(result.id)
        assert stored.total_questions == 4
        assert stored.passing_score == 3

    def test_unknown_test_is_not_found(self, service, student):
        with pytest.raises(NotFoundError):
            service.submit_test(9999, student.id, {})

    def test_unknown_user_is_invalid_reference(self, service, created_test):
        with pytest.raises(InvalidReferenceError):
            service.submit_test(created_test.id, 9999, {})

        assert service.get_results_by_test(created_test.id) == []

    def test_results_are_filtered_by_user(self, service, created_test, student, tutor):
        service.submit_test(created_test.id, student.id, {})
        service.submit_test(created_test.id, tutor.id, {})

        assert [r.user_id for r in service.get_results_by_user(student.id)] == [student.id]
        assert len(service.get_all_results()) == 2

    def test_unknown_result_is_not_found(self, service):
        with pytest.raises(NotFoundError):
            service.get_result_by_id(9999)
