from fastapi import HTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR


class BadRequest(HTTPException):
    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=HTTP_400_BAD_REQUEST, detail=detail)

class NotFound(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=HTTP_404_NOT_FOUND, detail=detail)

class InternalServerError(HTTPException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)

class QuestionNotFound(NotFound):
    def __init__(self, identifier: str = None):
        detail = f"Question '{identifier}' not found." if identifier else "Question not found."
        super().__init__(detail=detail)
class SessionNotFound(NotFound):
    def __init__(self, identifier: str = None):
        detail = f"Session '{identifier}' not found." if identifier else "Session not found."
        super().__init__(detail=detail)
class SessionQuestionNotFound(NotFound):
    def __init__(self, identifier: str = None):
        detail = f"Session question '{identifier}' not found." if identifier else "Session question not found."
        super().__init__(detail=detail)


class RemoteFeedbackError(Exception):
    """Raised when the remote completion API cannot produce usable feedback."""


class KnowledgeBaseError(Exception):
    """Raised when a keyword table cannot be loaded."""
