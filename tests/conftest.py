"""
Test bootstrap.

HTTP tests run the real app through TestClient with the repository
dependencies overridden by an in-memory store, so no PostgreSQL is needed.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from fastapi.testclient import TestClient

from answers.dependencies import get_answer_repository
from core.errors import ResourceNotFoundError
from main import create_app
from questions.dependencies import get_question_repository


class InMemoryStore:
    """
    Rows for both tables plus a clock that never repeats a timestamp.
    """

    def __init__(self) -> None:
        self.questions: dict[int, dict[str, Any]] = {}
        self.answers: dict[int, dict[str, Any]] = {}
        self._next_question_id = 1
        self._next_answer_id = 1
        self._last_ts: datetime | None = None
        self.calls: list[str] = []

    def now(self) -> datetime:
        ts = datetime.now(timezone.utc)
        if self._last_ts is not None and ts <= self._last_ts:
            ts = self._last_ts + timedelta(microseconds=1)
        self._last_ts = ts
        return ts

    def add_question(self, title: str = "What?", description: str = "") -> dict[str, Any]:
        ts = self.now()
        row = {
            "id": self._next_question_id,
            "title": title,
            "description": description,
            "created_at": ts,
            "updated_at": ts,
        }
        self.questions[row["id"]] = row
        self._next_question_id += 1
        return dict(row)

    def add_answer(self, question_id: int, text: str) -> dict[str, Any]:
        ts = self.now()
        row = {
            "id": self._next_answer_id,
            "question_id": question_id,
            "text": text,
            "created_at": ts,
            "updated_at": ts,
        }
        self.answers[row["id"]] = row
        self._next_answer_id += 1
        return dict(row)


class InMemoryQuestionRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def exists(self, question_id: int) -> bool:
        self._store.calls.append("questions.exists")
        return question_id in self._store.questions

    async def get(self, question_id: int) -> dict[str, Any] | None:
        self._store.calls.append("questions.get")
        row = self._store.questions.get(question_id)
        return dict(row) if row is not None else None

    async def list_all(self) -> list[dict[str, Any]]:
        return [dict(self._store.questions[k]) for k in sorted(self._store.questions)]

    async def create(self, *, title: str, description: str) -> dict[str, Any]:
        return self._store.add_question(title, description)

    async def update(self, question_id: int, *, title: str, description: str) -> dict[str, Any] | None:
        row = self._store.questions.get(question_id)
        if row is None:
            return None
        row.update(title=title, description=description, updated_at=self._store.now())
        return dict(row)

    async def delete(self, question_id: int) -> bool:
        if self._store.questions.pop(question_id, None) is None:
            return False
        for answer_id in [a["id"] for a in self._store.answers.values() if a["question_id"] == question_id]:
            del self._store.answers[answer_id]
        return True


class InMemoryAnswerRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def list_by_question(self, question_id: int) -> list[dict[str, Any]]:
        self._store.calls.append("answers.list_by_question")
        return [
            dict(row)
            for _, row in sorted(self._store.answers.items())
            if row["question_id"] == question_id
        ]

    async def get(self, answer_id: int) -> dict[str, Any] | None:
        self._store.calls.append("answers.get")
        row = self._store.answers.get(answer_id)
        return dict(row) if row is not None else None

    async def save(self, answer: dict[str, Any]) -> dict[str, Any]:
        self._store.calls.append("answers.save")
        if answer.get("id") is None:
            return self._store.add_answer(int(answer["question_id"]), str(answer["text"]))
        row = self._store.answers.get(int(answer["id"]))
        if row is None:
            raise ResourceNotFoundError("Answer", int(answer["id"]))
        row.update(text=str(answer["text"]), updated_at=self._store.now())
        return dict(row)

    async def delete(self, answer: dict[str, Any]) -> bool:
        self._store.calls.append("answers.delete")
        return self._store.answers.pop(int(answer["id"]), None) is not None


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def question_repo(store: InMemoryStore) -> InMemoryQuestionRepository:
    return InMemoryQuestionRepository(store)


@pytest.fixture
def answer_repo(store: InMemoryStore) -> InMemoryAnswerRepository:
    return InMemoryAnswerRepository(store)


@pytest.fixture
def app(question_repo: InMemoryQuestionRepository, answer_repo: InMemoryAnswerRepository):
    app = create_app(use_lifespan=False)
    app.dependency_overrides[get_question_repository] = lambda: question_repo
    app.dependency_overrides[get_answer_repository] = lambda: answer_repo
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
