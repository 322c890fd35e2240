"""
Interview Session API Routes

Description:
This module defines FastAPI routes for running a mock interview session:
starting a session, adding questions, saving answers, scoring them with the
configured feedback engine, ending the session and reading the dashboard
summary.

Dependencies:
- fastapi: For creating the FastAPI application and defining routes.
- ortho_coach.schemas.sessions: For the session schemas.
- ortho_coach.services.interview_session: For the in-memory session store.
- ortho_coach.services.feedback: For scoring saved answers.
- loguru: For logging session requests.

Author: @kcaparas1630

"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request
from starlette.status import HTTP_201_CREATED
from loguru import logger
from ortho_coach.core.dependencies import get_feedback_engine, get_question_bank, get_session_service
from ortho_coach.core.route_limiters import limiter, FEEDBACK_RATE_LIMIT
from ortho_coach.schemas.feedback import AnswerFeedbackResponse
from ortho_coach.schemas.sessions.session import (
    AddSessionQuestionRequest,
    CreateSessionRequest,
    EndSessionRequest,
    SaveResponseRequest,
    Session,
    SessionQuestion,
    SessionQuestionDetail,
    SessionSummary,
)
from ortho_coach.services.feedback.feedback_engine import FeedbackEngine
from ortho_coach.services.interview_session.session_service import SessionService
from ortho_coach.services.question_bank.question_bank_service import QuestionBankService

router = APIRouter(
    prefix="/api",
    tags=["sessions"],
    responses={404: {"description": "Not found"}}
)


@router.post("/sessions", response_model=Session, status_code=HTTP_201_CREATED)
async def create_session(data: CreateSessionRequest, sessions: SessionService = Depends(get_session_service)):
    return sessions.create_session(data.user_id)


@router.get("/sessions/summary", response_model=SessionSummary)
async def get_session_summary(
    user_id: Optional[str] = Query(default=None),
    sessions: SessionService = Depends(get_session_service),
):
    return sessions.summarize(user_id)


@router.get("/sessions/{session_id}", response_model=Session)
async def get_session(session_id: str, sessions: SessionService = Depends(get_session_service)):
    return sessions.get_session(session_id)


@router.post("/sessions/{session_id}/questions", response_model=SessionQuestion, status_code=HTTP_201_CREATED)
async def add_session_question(
    session_id: str,
    data: AddSessionQuestionRequest,
    sessions: SessionService = Depends(get_session_service),
):
    return sessions.add_question_to_session(session_id, data.question_id)


@router.get("/sessions/{session_id}/questions", response_model=List[SessionQuestionDetail])
async def get_session_questions(session_id: str, sessions: SessionService = Depends(get_session_service)):
    return sessions.get_session_questions(session_id)


@router.post("/sessions/{session_id}/end", response_model=Session)
async def end_session(
    session_id: str,
    data: Optional[EndSessionRequest] = None,
    sessions: SessionService = Depends(get_session_service),
):
    data = data or EndSessionRequest()
    return sessions.end_session(
        session_id,
        feedback=data.feedback,
        content_score=data.content_score,
        presentation_score=data.presentation_score,
    )


@router.put("/session-questions/{session_question_id}/response", response_model=SessionQuestion)
async def save_response(
    session_question_id: str,
    data: SaveResponseRequest,
    sessions: SessionService = Depends(get_session_service),
):
    return sessions.save_response(session_question_id, data.response)


@router.post("/session-questions/{session_question_id}/feedback", response_model=AnswerFeedbackResponse)
@limiter.limit(FEEDBACK_RATE_LIMIT)
async def score_session_answer(
    request: Request,
    session_question_id: str,
    sessions: SessionService = Depends(get_session_service),
    question_bank: QuestionBankService = Depends(get_question_bank),
    engine: FeedbackEngine = Depends(get_feedback_engine),
):
    """
    Score the saved answer for a session question, store the result, and
    return it with the next follow-up question.
    Request parameter is required for rate limiting.
    """
    session_question = sessions.get_session_question(session_question_id)
    question = question_bank.get_question(session_question.question_id)
    response = session_question.user_response or ""

    result = await engine.generate_feedback(question.question_text, response)
    follow_up_question = await engine.generate_follow_up(question.question_text, response)

    sessions.save_feedback(
        session_question_id,
        feedback=result.feedback,
        content_score=result.contentScore,
        presentation_score=result.presentationScore,
    )
    logger.info(
        f"Scored session question {session_question_id}: "
        f"content={result.contentScore}, presentation={result.presentationScore}"
    )
    return AnswerFeedbackResponse(
        sessionQuestionId=session_question_id,
        result=result,
        followUpQuestion=follow_up_question,
    )
