from .feedback_request import FeedbackRequest
from .feedback_result import FeedbackResult
from .follow_up_response import FollowUpResponse, AnswerFeedbackResponse

__all__ = [
    "FeedbackRequest",
    "FeedbackResult",
    "FollowUpResponse",
    "AnswerFeedbackResponse",
]
