"""
Interview Feedback API Route

Description:
This module defines FastAPI routes for scoring a candidate's answer and for
generating the next follow-up question.

Arguments:
- payload: An instance of FeedbackRequest containing the question and the candidate's response.

Returns:
- FeedbackResult with scores, strengths and improvements, or FollowUpResponse.

Dependencies:
- fastapi: For creating the FastAPI application and defining routes.
- ortho_coach.schemas.feedback: For the request and response schemas.
- ortho_coach.services.feedback: For the configured feedback engine.
- loguru: For logging information about the request and any errors that occur.

Author: @kcaparas1630

"""
from fastapi import APIRouter, Depends, Request
from loguru import logger
from ortho_coach.core.dependencies import get_feedback_engine
from ortho_coach.core.route_limiters import limiter, FEEDBACK_RATE_LIMIT
from ortho_coach.errors.exceptions import InternalServerError
from ortho_coach.schemas.feedback import FeedbackRequest, FeedbackResult, FollowUpResponse
from ortho_coach.services.feedback.feedback_engine import FeedbackEngine

router = APIRouter(
    prefix="/api",
    tags=["interview-feedback"],
    responses={404: {"description": "Not found"}}
)


@router.post("/interview-feedback", response_model=FeedbackResult)
@limiter.limit(FEEDBACK_RATE_LIMIT)
async def get_interview_feedback(
    request: Request,
    payload: FeedbackRequest,
    engine: FeedbackEngine = Depends(get_feedback_engine),
):
    """
    Get feedback for a candidate's response to an interview question.
    Request parameter is required for rate limiting.
    """
    try:
        return await engine.generate_feedback(payload.question, payload.response)
    except Exception as e:
        logger.error(f"Error getting interview feedback: {e}")
        raise InternalServerError("Failed to analyze interview feedback.") from e


@router.post("/follow-up-question", response_model=FollowUpResponse)
@limiter.limit(FEEDBACK_RATE_LIMIT)
async def get_follow_up_question(
    request: Request,
    payload: FeedbackRequest,
    engine: FeedbackEngine = Depends(get_feedback_engine),
):
    """
    Get the next follow-up question for a question and the candidate's response.
    """
    try:
        follow_up_question = await engine.generate_follow_up(payload.question, payload.response)
        return FollowUpResponse(followUpQuestion=follow_up_question)
    except Exception as e:
        logger.error(f"Error generating follow-up question: {e}")
        raise InternalServerError("Failed to generate follow-up question.") from e
