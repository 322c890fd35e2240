"""
Interview Session Schemas

This module defines typed schemas for mock interview sessions, the questions
answered within a session, and the dashboard summary computed over sessions.

Dependencies:
- pydantic: For data validation and serialization
- typing: For type hints

Author: @kcaparas1630
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from ortho_coach.schemas.questions.question import Question


class Session(BaseModel):
    """A single mock interview session."""
    id: str = Field(..., description="Session identifier")
    user_id: str = Field(..., description="Candidate identifier supplied by the caller")
    start_time: str = Field(..., description="ISO-8601 start timestamp")
    end_time: Optional[str] = Field(default=None, description="ISO-8601 end timestamp")
    feedback_summary: Optional[str] = Field(default=None, description="Overall session feedback")
    content_score: Optional[int] = Field(default=None, ge=0, le=100, description="Session content score")
    presentation_score: Optional[int] = Field(default=None, ge=0, le=100, description="Session presentation score")

    @property
    def is_ended(self) -> bool:
        return self.end_time is not None


class SessionQuestion(BaseModel):
    """A question asked within a session, with the candidate's answer and its feedback."""
    id: str = Field(..., description="Session question identifier")
    session_id: str = Field(..., description="Owning session")
    question_id: str = Field(..., description="Question from the question bank")
    user_response: Optional[str] = Field(default=None, description="Candidate's answer")
    feedback: Optional[str] = Field(default=None, description="Feedback text for the answer")
    content_score: Optional[int] = Field(default=None, ge=0, le=100)
    presentation_score: Optional[int] = Field(default=None, ge=0, le=100)

    @property
    def is_scored(self) -> bool:
        return self.content_score is not None and self.presentation_score is not None


class SessionQuestionDetail(SessionQuestion):
    """Session question joined with the question it refers to."""
    question: Question


class CreateSessionRequest(BaseModel):
    user_id: str = Field(default="anonymous", min_length=1)


class AddSessionQuestionRequest(BaseModel):
    question_id: str = Field(..., min_length=1)


class SaveResponseRequest(BaseModel):
    response: str = Field(default="")


class EndSessionRequest(BaseModel):
    """Overrides for the session result; omitted scores are averaged from the session's answers."""
    feedback: Optional[str] = None
    content_score: Optional[int] = Field(default=None, ge=0, le=100)
    presentation_score: Optional[int] = Field(default=None, ge=0, le=100)


class WeakArea(BaseModel):
    topic: str
    score: int = Field(ge=0, le=100)


class SessionSummary(BaseModel):
    """Dashboard view over completed sessions."""
    total_sessions: int = 0
    average_content_score: int = Field(default=0, ge=0, le=100)
    average_presentation_score: int = Field(default=0, ge=0, le=100)
    average_score: int = Field(default=0, ge=0, le=100)
    last_session: Optional[Session] = None
    weak_areas: List[WeakArea] = Field(default_factory=list)
