"""
Question Bank Service Module

This module keeps the interview question bank in process memory. It is seeded
with the reference questions at start-up and supports the admin screen's
create, update and delete operations. Nothing is persisted; a restart restores
the seed questions.

Dependencies:
- threading: For guarding mutations made from concurrent requests.
- loguru: For logging admin changes.
- ortho_coach.schemas.questions: For question data models.

Author: @kcaparas1630
"""

import re
import threading
from typing import Dict, Iterable, List, Optional
from loguru import logger
from ortho_coach.errors.exceptions import QuestionNotFound
from ortho_coach.schemas.questions.question import Question, QuestionCategory, QuestionCreate, QuestionUpdate

SEED_QUESTIONS = [
    Question(id="q1", category=QuestionCategory.BEHAVIORAL, subcategory="general",
             question_text="Tell me about yourself.", difficulty=1),
    Question(id="q2", category=QuestionCategory.BEHAVIORAL, subcategory="motivation",
             question_text="Why orthopedics?", difficulty=2),
    Question(id="q3", category=QuestionCategory.BEHAVIORAL, subcategory="future",
             question_text="How do you view yourself as a practicing orthopedic surgeon?", difficulty=2),
    Question(id="q4", category=QuestionCategory.CLINICAL, subcategory="fractures",
             question_text="Describe the Gustilo classification for open fractures.", difficulty=3),
    Question(id="q5", category=QuestionCategory.CLINICAL, subcategory="fractures",
             question_text="How would you manage a mangled extremity?", difficulty=4),
    Question(id="q6", category=QuestionCategory.CLINICAL, subcategory="fractures",
             question_text="Describe your surgical planning approach for a hip fracture.", difficulty=3),
    Question(id="q7", category=QuestionCategory.CLINICAL, subcategory="fractures",
             question_text="What is your approach to a supracondylar fracture?", difficulty=3),
    Question(id="q8", category=QuestionCategory.CLINICAL, subcategory="fractures",
             question_text="How would you manage a distal radius fracture?", difficulty=2),
    Question(id="q9", category=QuestionCategory.CLINICAL, subcategory="fractures",
             question_text="Describe the classification and management of tibial plateau fractures.", difficulty=4),
]

_QUESTION_ID = re.compile(r"^q(\d+)$")


class QuestionBankService:
    """
    In-memory question bank.

    Questions are kept in insertion order. Returned questions are copies, so
    callers cannot change the bank without going through this service.
    """

    def __init__(self, questions: Optional[Iterable[Question]] = None):
        self._questions: Dict[str, Question] = {}
        self._lock = threading.Lock()
        for question in questions or []:
            self._questions[question.id] = question.model_copy()

    @classmethod
    def with_seed_questions(cls) -> "QuestionBankService":
        return cls(SEED_QUESTIONS)

    def list_questions(self, category: Optional[str] = None, search: Optional[str] = None) -> List[Question]:
        """
        List questions, optionally filtered.

        Args:
            category (Optional[str]): Only questions in this category ("all" or None for every category).
            search (Optional[str]): Case-insensitive text matched against the question text,
                category and subcategory.
        """
        with self._lock:
            questions = list(self._questions.values())

        if category and category != "all":
            questions = [q for q in questions if q.category.value == category]

        if search:
            needle = search.lower()
            questions = [
                q for q in questions
                if needle in q.question_text.lower()
                or needle in q.category.value.lower()
                or needle in q.subcategory.lower()
            ]

        return [q.model_copy() for q in questions]

    def get_question(self, question_id: str) -> Question:
        with self._lock:
            question = self._questions.get(question_id)
        if question is None:
            raise QuestionNotFound(question_id)
        return question.model_copy()

    def find_question(self, question_id: str) -> Optional[Question]:
        with self._lock:
            question = self._questions.get(question_id)
        return question.model_copy() if question else None

    def create_question(self, data: QuestionCreate) -> Question:
        with self._lock:
            question = Question(id=self._next_id(), **data.model_dump())
            self._questions[question.id] = question
        logger.info(f"Question {question.id} added to the question bank")
        return question.model_copy()

    def update_question(self, question_id: str, data: QuestionUpdate) -> Question:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        with self._lock:
            current = self._questions.get(question_id)
            if current is None:
                raise QuestionNotFound(question_id)
            updated = Question(**{**current.model_dump(), **changes})
            self._questions[question_id] = updated
        logger.info(f"Question {question_id} updated: {sorted(changes)}")
        return updated.model_copy()

    def delete_question(self, question_id: str) -> None:
        with self._lock:
            if self._questions.pop(question_id, None) is None:
                raise QuestionNotFound(question_id)
        logger.info(f"Question {question_id} deleted from the question bank")

    def __len__(self) -> int:
        return len(self._questions)

    def _next_id(self) -> str:
        # Caller holds the lock
        numbers = [int(m.group(1)) for m in (_QUESTION_ID.match(qid) for qid in self._questions) if m]
        return f"q{max(numbers, default=0) + 1}"
