"""
Description:
This module defines the schema for the feedback produced for a candidate's answer.

FeedbackResult is immutable once produced; engines build a new instance for
every call.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.

Author: @kcaparas1630
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List


class FeedbackResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    feedback: str = Field(default="", description="Overall assessment of the answer")
    contentScore: int = Field(ge=0, le=100, description="Content score between 0 and 100")
    presentationScore: int = Field(ge=0, le=100, description="Presentation score between 0 and 100")
    strengths: List[str] = Field(default_factory=list, description="Strengths of the answer")
    improvements: List[str] = Field(default_factory=list, description="Areas for improvement")
