"""
Question API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from core.params import QuestionId

from . import schemas, service
from .dependencies import get_question_repository
from .repository import QuestionRepository

router = APIRouter()


@router.get("/questions", response_model=list[schemas.QuestionResponse])
async def list_questions(
    questions: QuestionRepository = Depends(get_question_repository),
) -> list[schemas.QuestionResponse]:
    return await service.list_questions(questions=questions)


@router.post("/questions", response_model=schemas.QuestionResponse)
async def create_question(
    request: schemas.QuestionRequest,
    questions: QuestionRepository = Depends(get_question_repository),
) -> schemas.QuestionResponse:
    return await service.create_question(request, questions=questions)


@router.get("/questions/{question_id}", response_model=schemas.QuestionResponse)
async def get_question(
    question_id: QuestionId,
    questions: QuestionRepository = Depends(get_question_repository),
) -> schemas.QuestionResponse:
    return await service.get_question(question_id, questions=questions)


@router.put("/questions/{question_id}", response_model=schemas.QuestionResponse)
async def update_question(
    question_id: QuestionId,
    request: schemas.QuestionRequest,
    questions: QuestionRepository = Depends(get_question_repository),
) -> schemas.QuestionResponse:
    return await service.update_question(question_id, request, questions=questions)


@router.delete("/questions/{question_id}")
async def delete_question(
    question_id: QuestionId,
    questions: QuestionRepository = Depends(get_question_repository),
) -> Response:
    """
    Delete a question. Its answers are removed with it.
    """
    await service.delete_question(question_id, questions=questions)
    return Response(status_code=200)
