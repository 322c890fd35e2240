from pydantic import BaseModel, Field
from ortho_coach.schemas.feedback.feedback_result import FeedbackResult


class FollowUpResponse(BaseModel):
    followUpQuestion: str = Field(..., description="Next question to continue the mock interview")


class AnswerFeedbackResponse(BaseModel):
    """Feedback for a saved session answer together with the next question."""
    sessionQuestionId: str
    result: FeedbackResult
    followUpQuestion: str
