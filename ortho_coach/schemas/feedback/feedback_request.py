"""
Description:
Schema for a feedback or follow-up request.

Missing or null fields are coerced to empty strings so the engines always
receive text.

Dependencies:
- pydantic: For data validation and settings management.

Author: @kcaparas1630
"""
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class FeedbackRequest(BaseModel):
    question: Optional[str] = Field(default="", description="Interview question that was asked")
    response: Optional[str] = Field(default="", description="Candidate's free-text answer")

    @field_validator("question", "response", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return "" if value is None else value
