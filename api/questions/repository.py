"""
Question persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database, affected_rows

_COLUMNS = "id, title, description, created_at, updated_at"


class QuestionRepository:
    def __init__(self, db: Database) -> None:
        self._db = db

    async def exists(self, question_id: int) -> bool:
        row = await self._db.fetch_one(
            """
            SELECT 1 AS ok
            FROM questions
            WHERE id = $1
            LIMIT 1
            """,
            question_id,
        )
        return row is not None

    async def get(self, question_id: int) -> dict[str, Any] | None:
        return await self._db.fetch_one(
            f"""
            SELECT {_COLUMNS}
            FROM questions
            WHERE id = $1
            """,
            question_id,
        )

    async def list_all(self) -> list[dict[str, Any]]:
        return await self._db.fetch_all(
            f"""
            SELECT {_COLUMNS}
            FROM questions
            ORDER BY id
            """
        )

    async def create(self, *, title: str, description: str) -> dict[str, Any]:
        row = await self._db.fetch_one(
            f"""
            INSERT INTO questions (title, description)
            VALUES ($1, $2)
            RETURNING {_COLUMNS}
            """,
            title,
            description,
        )
        if row is None:
            raise RuntimeError("Failed to insert question.")
        return row

    async def update(self, question_id: int, *, title: str, description: str) -> dict[str, Any] | None:
        """
        Replace the mutable fields. Returns None when the row does not exist.
        """
        return await self._db.fetch_one(
            f"""
            UPDATE questions
            SET title = $2,
                description = $3,
                updated_at = now()
            WHERE id = $1
            RETURNING {_COLUMNS}
            """,
            question_id,
            title,
            description,
        )

    async def delete(self, question_id: int) -> bool:
        # Answers go with it through ON DELETE CASCADE.
        status = await self._db.execute(
            """
            DELETE FROM questions
            WHERE id = $1
            """,
            question_id,
        )
        return affected_rows(status) > 0
