"""
Answer API endpoints, nested under their question.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from core.params import AnswerId, QuestionId
from questions.dependencies import get_question_repository
from questions.repository import QuestionRepository

from . import schemas, service
from .dependencies import get_answer_repository
from .repository import AnswerRepository

router = APIRouter()


@router.get("/questions/{question_id}/answers", response_model=list[schemas.AnswerResponse])
async def get_answers_by_question_id(
    question_id: QuestionId,
    answers: AnswerRepository = Depends(get_answer_repository),
) -> list[schemas.AnswerResponse]:
    return await service.list_answers(question_id, answers=answers)


@router.post("/questions/{question_id}/answers", response_model=schemas.AnswerResponse)
async def add_answer(
    question_id: QuestionId,
    request: schemas.AnswerRequest,
    questions: QuestionRepository = Depends(get_question_repository),
    answers: AnswerRepository = Depends(get_answer_repository),
) -> schemas.AnswerResponse:
    return await service.add_answer(question_id, request, questions=questions, answers=answers)


@router.put("/questions/{question_id}/answers/{answer_id}", response_model=schemas.AnswerResponse)
async def update_answer(
    question_id: QuestionId,
    answer_id: AnswerId,
    request: schemas.AnswerRequest,
    questions: QuestionRepository = Depends(get_question_repository),
    answers: AnswerRepository = Depends(get_answer_repository),
) -> schemas.AnswerResponse:
    return await service.update_answer(
        question_id,
        answer_id,
        request,
        questions=questions,
        answers=answers,
    )


@router.delete("/questions/{question_id}/answers/{answer_id}")
async def delete_answer(
    question_id: QuestionId,
    answer_id: AnswerId,
    questions: QuestionRepository = Depends(get_question_repository),
    answers: AnswerRepository = Depends(get_answer_repository),
) -> Response:
    await service.delete_answer(question_id, answer_id, questions=questions, answers=answers)
    return Response(status_code=200)
