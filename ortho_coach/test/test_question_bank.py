"""
Test Question Bank Service Module

Author: @kcaparas1630
"""

import pytest
from ortho_coach.errors.exceptions import QuestionNotFound
from ortho_coach.schemas.questions.question import QuestionCategory, QuestionCreate, QuestionUpdate
from ortho_coach.services.question_bank.question_bank_service import QuestionBankService


class TestListQuestions:

    def test_seed_questions(self, question_bank):
        questions = question_bank.list_questions()

        assert [q.id for q in questions] == [f"q{i}" for i in range(1, 10)]

    @pytest.mark.parametrize("category, expected", [
        ("behavioral", ["q1", "q2", "q3"]),
        ("clinical", ["q4", "q5", "q6", "q7", "q8", "q9"]),
        ("all", [f"q{i}" for i in range(1, 10)]),
        (None, [f"q{i}" for i in range(1, 10)]),
        ("surgical", []),
    ])
    def test_category_filter(self, question_bank, category, expected):
        assert [q.id for q in question_bank.list_questions(category=category)] == expected

    def test_search_matches_question_text_case_insensitively(self, question_bank):
        assert [q.id for q in question_bank.list_questions(search="GUSTILO")] == ["q4"]

    def test_search_matches_subcategory(self, question_bank):
        assert [q.id for q in question_bank.list_questions(search="motivation")] == ["q2"]

    def test_search_and_category_combine(self, question_bank):
        result = question_bank.list_questions(category="behavioral", search="orthopedic")

        assert [q.id for q in result] == ["q2", "q3"]

    def test_returned_questions_are_copies(self, question_bank):
        question = question_bank.get_question("q1")
        question.question_text = "Changed"

        assert question_bank.get_question("q1").question_text == "Tell me about yourself."


class TestQuestionAdmin:

    def test_create_assigns_next_id(self, question_bank):
        created = question_bank.create_question(QuestionCreate(
            category=QuestionCategory.CLINICAL,
            subcategory="sports",
            question_text="How would you examine a suspected ACL tear?",
            difficulty=2,
        ))

        assert created.id == "q10"
        assert question_bank.get_question("q10") == created
        assert len(question_bank) == 10

    def test_create_in_empty_bank(self):
        created = QuestionBankService().create_question(QuestionCreate(question_text="Why this program?"))

        assert created.id == "q1"
        assert created.category == QuestionCategory.BEHAVIORAL
        assert created.difficulty == 3

    def test_update_changes_only_given_fields(self, question_bank):
        updated = question_bank.update_question("q2", QuestionUpdate(difficulty=5))

        assert updated.difficulty == 5
        assert updated.question_text == "Why orthopedics?"
        assert updated.category == QuestionCategory.BEHAVIORAL

    def test_update_unknown_question(self, question_bank):
        with pytest.raises(QuestionNotFound):
            question_bank.update_question("q99", QuestionUpdate(difficulty=1))

    def test_delete(self, question_bank):
        question_bank.delete_question("q9")

        assert question_bank.find_question("q9") is None
        with pytest.raises(QuestionNotFound):
            question_bank.get_question("q9")

    def test_delete_unknown_question(self, question_bank):
        with pytest.raises(QuestionNotFound) as exc_info:
            question_bank.delete_question("q99")

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Question 'q99' not found."

    def test_ids_are_not_reused_below_the_maximum(self, question_bank):
        question_bank.delete_question("q3")

        created = question_bank.create_question(QuestionCreate(question_text="Where do you see yourself in ten years?"))

        assert created.id == "q10"
