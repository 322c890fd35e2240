"""
Interview Session Service Module

This module tracks mock interview sessions in process memory: which questions
were asked in a session, the candidate's answers, the feedback each answer
received, and the overall session result. It also computes the dashboard
summary across a user's sessions.

Dependencies:
- threading: For guarding mutations made from concurrent requests.
- uuid: For session and session question identifiers.
- loguru: For logging session lifecycle events.
- ortho_coach.schemas.sessions: For session data models.
- ortho_coach.services.question_bank: For resolving session questions.

Author: @kcaparas1630
"""

import threading
import uuid
from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, List, Optional
from loguru import logger
from ortho_coach.errors.exceptions import BadRequest, SessionNotFound, SessionQuestionNotFound
from ortho_coach.schemas.sessions.session import (
    Session,
    SessionQuestion,
    SessionQuestionDetail,
    SessionSummary,
    WeakArea,
)
from ortho_coach.services.feedback.heuristic_engine import round_half_up
from ortho_coach.services.question_bank.question_bank_service import QuestionBankService

WEAK_AREA_LIMIT = 3


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _mean(values: List[int]) -> Optional[int]:
    if not values:
        return None
    return round_half_up(sum(values) / len(values))


class SessionService:
    """
    In-memory store of interview sessions and their questions.

    Attributes:
        question_bank (QuestionBankService): Used to validate and resolve question ids.
    """

    def __init__(self, question_bank: QuestionBankService):
        self.question_bank = question_bank
        self._sessions: Dict[str, Session] = {}
        self._session_questions: Dict[str, SessionQuestion] = {}
        self._lock = threading.Lock()

    def create_session(self, user_id: str) -> Session:
        session = Session(id=uuid.uuid4().hex, user_id=user_id, start_time=_now())
        with self._lock:
            self._sessions[session.id] = session
        logger.info(f"Session {session.id} started for user {user_id}")
        return session.model_copy()

    def get_session(self, session_id: str) -> Session:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session.model_copy()

    def add_question_to_session(self, session_id: str, question_id: str) -> SessionQuestion:
        # Raises QuestionNotFound for unknown questions
        self.question_bank.get_question(question_id)
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                raise SessionNotFound(session_id)
            if session.is_ended:
                raise BadRequest(f"Session '{session_id}' has already ended.")
            session_question = SessionQuestion(id=uuid.uuid4().hex, session_id=session_id, question_id=question_id)
            self._session_questions[session_question.id] = session_question
        return session_question.model_copy()

    def get_session_question(self, session_question_id: str) -> SessionQuestion:
        with self._lock:
            session_question = self._session_questions.get(session_question_id)
        if session_question is None:
            raise SessionQuestionNotFound(session_question_id)
        return session_question.model_copy()

    def save_response(self, session_question_id: str, response: str) -> SessionQuestion:
        return self._update_session_question(session_question_id, user_response=response)

    def save_feedback(
        self,
        session_question_id: str,
        feedback: str,
        content_score: int,
        presentation_score: int,
    ) -> SessionQuestion:
        return self._update_session_question(
            session_question_id,
            feedback=feedback,
            content_score=content_score,
            presentation_score=presentation_score,
        )

    def end_session(
        self,
        session_id: str,
        feedback: Optional[str] = None,
        content_score: Optional[int] = None,
        presentation_score: Optional[int] = None,
    ) -> Session:
        """
        End a session and record its overall result.

        Scores that are not supplied are the rounded mean of the session's
        scored answers (None when nothing was scored).
        """
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                raise SessionNotFound(session_id)
            scored = [sq for sq in self._session_questions.values() if sq.session_id == session_id and sq.is_scored]

            if content_score is None:
                content_score = _mean([sq.content_score for sq in scored])
            if presentation_score is None:
                presentation_score = _mean([sq.presentation_score for sq in scored])
            if feedback is None:
                feedback = f"Completed {len(scored)} scored question(s)."

            ended = session.model_copy(update={
                "end_time": _now(),
                "feedback_summary": feedback,
                "content_score": content_score,
                "presentation_score": presentation_score,
            })
            self._sessions[session_id] = ended
        logger.info(f"Session {session_id} ended (content={content_score}, presentation={presentation_score})")
        return ended.model_copy()

    def get_session_questions(self, session_id: str) -> List[SessionQuestionDetail]:
        with self._lock:
            if session_id not in self._sessions:
                raise SessionNotFound(session_id)
            session_questions = [sq for sq in self._session_questions.values() if sq.session_id == session_id]

        details = []
        for sq in session_questions:
            question = self.question_bank.find_question(sq.question_id)
            if question is None:
                # Question was deleted from the bank after being asked
                logger.warning(f"Session question {sq.id} refers to missing question {sq.question_id}")
                continue
            details.append(SessionQuestionDetail(**sq.model_dump(), question=question))
        return details

    def list_sessions(self, user_id: Optional[str] = None) -> List[Session]:
        with self._lock:
            sessions = list(self._sessions.values())
        if user_id:
            sessions = [s for s in sessions if s.user_id == user_id]
        return sorted((s.model_copy() for s in sessions), key=lambda s: s.start_time, reverse=True)

    def summarize(self, user_id: Optional[str] = None) -> SessionSummary:
        """
        Compute the dashboard summary over ended sessions.

        Weak areas are the questions with the lowest average content score
        across the user's scored answers.
        """
        sessions = [s for s in self.list_sessions(user_id) if s.is_ended and s.content_score is not None]
        if not sessions:
            return SessionSummary()

        average_content = _mean([s.content_score for s in sessions])
        average_presentation = _mean([s.presentation_score for s in sessions if s.presentation_score is not None]) or 0

        return SessionSummary(
            total_sessions=len(sessions),
            average_content_score=average_content,
            average_presentation_score=average_presentation,
            average_score=round_half_up((average_content + average_presentation) / 2),
            last_session=sessions[0],
            weak_areas=self._weak_areas({s.id for s in sessions}),
        )

    def _weak_areas(self, session_ids) -> List[WeakArea]:
        with self._lock:
            scored = [
                sq for sq in self._session_questions.values()
                if sq.session_id in session_ids and sq.is_scored
            ]

        scores_by_topic = defaultdict(list)
        for sq in scored:
            question = self.question_bank.find_question(sq.question_id)
            if question is not None:
                scores_by_topic[question.question_text].append(sq.content_score)

        areas = [WeakArea(topic=topic, score=_mean(scores)) for topic, scores in scores_by_topic.items()]
        areas.sort(key=lambda area: area.score)
        return areas[:WEAK_AREA_LIMIT]

    def _update_session_question(self, session_question_id: str, **changes) -> SessionQuestion:
        with self._lock:
            current = self._session_questions.get(session_question_id)
            if current is None:
                raise SessionQuestionNotFound(session_question_id)
            updated = current.model_copy(update=changes)
            self._session_questions[session_question_id] = updated
        return updated.model_copy()
