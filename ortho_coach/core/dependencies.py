"""
Description:
FastAPI dependencies exposing the services built at start-up.

The lifespan handler in ortho_coach.main stores the feedback engine, question
bank and session service on app.state; route handlers receive them through
these functions so tests can swap them with app.dependency_overrides.

Author: @kcaparas1630
"""
from fastapi import Request
from ortho_coach.services.feedback.feedback_engine import FeedbackEngine
from ortho_coach.services.interview_session.session_service import SessionService
from ortho_coach.services.question_bank.question_bank_service import QuestionBankService


def get_feedback_engine(request: Request) -> FeedbackEngine:
    return request.app.state.feedback_engine


def get_question_bank(request: Request) -> QuestionBankService:
    return request.app.state.question_bank


def get_session_service(request: Request) -> SessionService:
    return request.app.state.session_service
