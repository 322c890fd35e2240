"""
Question Bank API Routes

Description:
This module defines FastAPI routes for browsing the question bank and for the
admin screen's create, update and delete operations. Changes live in memory
only.

Returns:
- Question objects or lists of them.

Dependencies:
- fastapi: For creating the FastAPI application and defining routes.
- ortho_coach.schemas.questions: For the question schemas.
- ortho_coach.services.question_bank: For the in-memory question bank.
- loguru: For logging admin requests.

Author: @kcaparas1630

"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT
from loguru import logger
from ortho_coach.core.dependencies import get_question_bank
from ortho_coach.schemas.questions.question import Question, QuestionCreate, QuestionUpdate
from ortho_coach.services.question_bank.question_bank_service import QuestionBankService

router = APIRouter(
    prefix="/api/questions",
    tags=["questions"],
    responses={404: {"description": "Not found"}}
)


@router.get("", response_model=List[Question])
async def list_questions(
    category: Optional[str] = Query(default=None, description="Category filter, or 'all'"),
    search: Optional[str] = Query(default=None, description="Text matched against question, category and subcategory"),
    question_bank: QuestionBankService = Depends(get_question_bank),
):
    return question_bank.list_questions(category=category, search=search)


@router.get("/{question_id}", response_model=Question)
async def get_question(question_id: str, question_bank: QuestionBankService = Depends(get_question_bank)):
    return question_bank.get_question(question_id)


@router.post("", response_model=Question, status_code=HTTP_201_CREATED)
async def create_question(data: QuestionCreate, question_bank: QuestionBankService = Depends(get_question_bank)):
    logger.info("Admin request to add a question")
    return question_bank.create_question(data)


@router.put("/{question_id}", response_model=Question)
async def update_question(
    question_id: str,
    data: QuestionUpdate,
    question_bank: QuestionBankService = Depends(get_question_bank),
):
    logger.info(f"Admin request to update question {question_id}")
    return question_bank.update_question(question_id, data)


@router.delete("/{question_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_question(question_id: str, question_bank: QuestionBankService = Depends(get_question_bank)):
    logger.info(f"Admin request to delete question {question_id}")
    question_bank.delete_question(question_id)
