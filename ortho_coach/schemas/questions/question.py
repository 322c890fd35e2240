"""
Question Bank Schemas

This module defines the schemas for interview questions held in the question
bank and the payloads used to create and update them from the admin screen.

Dependencies:
- pydantic: For data validation and serialization
- typing: For type hints

Author: @kcaparas1630
"""

from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class QuestionCategory(str, Enum):
    """Top-level grouping of interview questions."""
    BEHAVIORAL = "behavioral"
    CLINICAL = "clinical"


class QuestionBase(BaseModel):
    category: QuestionCategory = Field(default=QuestionCategory.BEHAVIORAL, description="Question category")
    subcategory: str = Field(default="", description="Finer grouping, e.g. fractures or motivation")
    question_text: str = Field(..., min_length=1, description="The interview question as asked")
    difficulty: int = Field(default=3, ge=1, le=5, description="Difficulty from 1 (easy) to 5 (hard)")


class Question(QuestionBase):
    """A question stored in the question bank."""
    id: str = Field(..., description="Question identifier, e.g. q1")


class QuestionCreate(QuestionBase):
    """Payload for adding a question."""


class QuestionUpdate(BaseModel):
    """Partial update payload; omitted fields keep their current value."""
    category: Optional[QuestionCategory] = None
    subcategory: Optional[str] = None
    question_text: Optional[str] = Field(default=None, min_length=1)
    difficulty: Optional[int] = Field(default=None, ge=1, le=5)
