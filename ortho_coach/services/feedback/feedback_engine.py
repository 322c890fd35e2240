"""
Feedback Engine Interface Module

This module defines the strategy interface shared by all feedback engines and
the fallback composition used to pair the remote engine with the heuristic one.

Every engine applies the same hard floor: answers shorter than 10 characters
after trimming get the fixed zero-score result without being analysed.

Dependencies:
- abc: For the abstract engine interface.
- loguru: For logging fallbacks.
- ortho_coach.schemas.feedback: For the FeedbackResult value object.

Author: @kcaparas1630
"""

from abc import ABC, abstractmethod
from typing import Optional
from loguru import logger
from ortho_coach.constants import feedback_messages as messages
from ortho_coach.schemas.feedback.feedback_result import FeedbackResult


def is_too_brief(response: Optional[str]) -> bool:
    return len((response or "").strip()) < messages.MIN_RESPONSE_LENGTH


def too_brief_result() -> FeedbackResult:
    return FeedbackResult(
        feedback=messages.TOO_BRIEF_FEEDBACK,
        contentScore=0,
        presentationScore=0,
        strengths=[],
        improvements=[messages.TOO_BRIEF_IMPROVEMENT],
    )


class FeedbackEngine(ABC):
    """Produces feedback and a follow-up question for a (question, response) pair."""

    name: str = "engine"

    @abstractmethod
    async def generate_feedback(self, question: str, response: str) -> FeedbackResult:
        ...

    @abstractmethod
    async def generate_follow_up(self, question: str, response: str) -> str:
        ...


class FallbackFeedbackEngine(FeedbackEngine):
    """
    Try a primary engine and use a fallback engine when the primary fails.

    The fallback engine is expected to be total (the heuristic engine is), so
    its errors are not caught here.

    Attributes:
        primary (FeedbackEngine): Engine tried first, usually the remote engine.
        fallback (FeedbackEngine): Engine used when the primary raises.
    """

    def __init__(self, primary: FeedbackEngine, fallback: FeedbackEngine):
        self.primary = primary
        self.fallback = fallback
        self.name = f"{primary.name}+{fallback.name}"

    async def generate_feedback(self, question: str, response: str) -> FeedbackResult:
        try:
            return await self.primary.generate_feedback(question, response)
        except Exception as e:
            logger.warning(f"{self.primary.name} feedback failed, falling back to {self.fallback.name}: {e}")
            return await self.fallback.generate_feedback(question, response)

    async def generate_follow_up(self, question: str, response: str) -> str:
        try:
            return await self.primary.generate_follow_up(question, response)
        except Exception as e:
            logger.warning(f"{self.primary.name} follow-up failed, falling back to {self.fallback.name}: {e}")
            return await self.fallback.generate_follow_up(question, response)
