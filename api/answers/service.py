"""
Answer business logic.

Every write is nested under a question and verifies the parent first, so a
request against a missing question always reports the question, never the
answer. Reads do not check the parent: an unknown question simply has no
answers.

Ownership is not checked on update/delete: the answer id is looked up on its
own, whichever question it belongs to.
"""

from __future__ import annotations

import logging

from core.errors import ResourceNotFoundError
from questions.repository import QuestionRepository

from . import schemas
from .repository import AnswerRepository

logger = logging.getLogger(__name__)


def to_answer_response(row: dict) -> schemas.AnswerResponse:
    return schemas.AnswerResponse(
        id=int(row["id"]),
        text=str(row["text"]),
        question_id=int(row["question_id"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


async def _require_question(question_id: int, *, questions: QuestionRepository) -> None:
    if not await questions.exists(question_id):
        raise ResourceNotFoundError("Question", question_id)


async def _require_answer(answer_id: int, *, answers: AnswerRepository) -> dict:
    row = await answers.get(answer_id)
    if row is None:
        raise ResourceNotFoundError("Answer", answer_id)
    return row


async def list_answers(question_id: int, *, answers: AnswerRepository) -> list[schemas.AnswerResponse]:
    rows = await answers.list_by_question(question_id)
    return [to_answer_response(row) for row in rows]


async def add_answer(
    question_id: int,
    payload: schemas.AnswerRequest,
    *,
    questions: QuestionRepository,
    answers: AnswerRepository,
) -> schemas.AnswerResponse:
    question = await questions.get(question_id)
    if question is None:
        raise ResourceNotFoundError("Question", question_id)

    row = await answers.save({"question_id": int(question["id"]), "text": payload.text})
    logger.info("answer_created answer_id=%s question_id=%s", row["id"], question_id)
    return to_answer_response(row)


async def update_answer(
    question_id: int,
    answer_id: int,
    payload: schemas.AnswerRequest,
    *,
    questions: QuestionRepository,
    answers: AnswerRepository,
) -> schemas.AnswerResponse:
    await _require_question(question_id, questions=questions)
    answer = await _require_answer(answer_id, answers=answers)

    row = await answers.save({**answer, "text": payload.text})
    logger.info("answer_updated answer_id=%s question_id=%s", answer_id, question_id)
    return to_answer_response(row)


async def delete_answer(
    question_id: int,
    answer_id: int,
    *,
    questions: QuestionRepository,
    answers: AnswerRepository,
) -> None:
    await _require_question(question_id, questions=questions)
    answer = await _require_answer(answer_id, answers=answers)

    await answers.delete(answer)
    logger.info("answer_deleted answer_id=%s question_id=%s", answer_id, question_id)
