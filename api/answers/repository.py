"""
Answer persistence (raw SQL).

`created_at` / `updated_at` are assigned here, in the insert and update
statements, never by callers.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core.db import Database, affected_rows
from core.errors import ResourceNotFoundError

_COLUMNS = "id, question_id, text, created_at, updated_at"


class AnswerRepository:
    def __init__(self, db: Database) -> None:
        self._db = db

    async def list_by_question(self, question_id: int) -> list[dict[str, Any]]:
        """
        Answers whose parent is `question_id`. Empty when the question has no
        answers or does not exist.
        """
        return await self._db.fetch_all(
            f"""
            SELECT {_COLUMNS}
            FROM answers
            WHERE question_id = $1
            ORDER BY id
            """,
            question_id,
        )

    async def get(self, answer_id: int) -> dict[str, Any] | None:
        return await self._db.fetch_one(
            f"""
            SELECT {_COLUMNS}
            FROM answers
            WHERE id = $1
            """,
            answer_id,
        )

    async def save(self, answer: dict[str, Any]) -> dict[str, Any]:
        """
        Insert when `answer` has no id, otherwise update its text.

        Only `text` is written on update; the parent link is fixed at insert.
        """
        if answer.get("id") is None:
            question_id = int(answer["question_id"])
            try:
                row = await self._db.fetch_one(
                    f"""
                    INSERT INTO answers (question_id, text)
                    VALUES ($1, $2)
                    RETURNING {_COLUMNS}
                    """,
                    question_id,
                    str(answer["text"]),
                )
            except asyncpg.ForeignKeyViolationError as exc:
                # Parent deleted concurrently between lookup and insert.
                raise ResourceNotFoundError("Question", question_id) from exc
            if row is None:
                raise RuntimeError("Failed to insert answer.")
            return row

        row = await self._db.fetch_one(
            f"""
            UPDATE answers
            SET text = $2,
                updated_at = now()
            WHERE id = $1
            RETURNING {_COLUMNS}
            """,
            int(answer["id"]),
            str(answer["text"]),
        )
        if row is None:
            # Deleted concurrently between lookup and update.
            raise ResourceNotFoundError("Answer", int(answer["id"]))
        return row

    async def delete(self, answer: dict[str, Any]) -> bool:
        status = await self._db.execute(
            """
            DELETE FROM answers
            WHERE id = $1
            """,
            int(answer["id"]),
        )
        return affected_rows(status) > 0
