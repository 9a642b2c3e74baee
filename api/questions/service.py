"""
Question business logic.
"""

from __future__ import annotations

import logging

from core.errors import ResourceNotFoundError

from . import schemas
from .repository import QuestionRepository

logger = logging.getLogger(__name__)


def to_question_response(row: dict) -> schemas.QuestionResponse:
    return schemas.QuestionResponse(
        id=int(row["id"]),
        title=str(row["title"]),
        description=str(row.get("description") or ""),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


async def list_questions(*, questions: QuestionRepository) -> list[schemas.QuestionResponse]:
    rows = await questions.list_all()
    return [to_question_response(row) for row in rows]


async def get_question(question_id: int, *, questions: QuestionRepository) -> schemas.QuestionResponse:
    row = await questions.get(question_id)
    if row is None:
        raise ResourceNotFoundError("Question", question_id)
    return to_question_response(row)


async def create_question(
    payload: schemas.QuestionRequest,
    *,
    questions: QuestionRepository,
) -> schemas.QuestionResponse:
    row = await questions.create(title=payload.title, description=payload.description)
    logger.info("question_created question_id=%s", row["id"])
    return to_question_response(row)


async def update_question(
    question_id: int,
    payload: schemas.QuestionRequest,
    *,
    questions: QuestionRepository,
) -> schemas.QuestionResponse:
    row = await questions.update(question_id, title=payload.title, description=payload.description)
    if row is None:
        raise ResourceNotFoundError("Question", question_id)
    logger.info("question_updated question_id=%s", question_id)
    return to_question_response(row)


async def delete_question(question_id: int, *, questions: QuestionRepository) -> None:
    deleted = await questions.delete(question_id)
    if not deleted:
        raise ResourceNotFoundError("Question", question_id)
    logger.info("question_deleted question_id=%s", question_id)
