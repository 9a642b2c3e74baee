"""
Repository providers for answer routes.
"""

from __future__ import annotations

from fastapi import Depends

from core.db import Database
from core.dependencies import get_db

from .repository import AnswerRepository


def get_answer_repository(db: Database = Depends(get_db)) -> AnswerRepository:
    return AnswerRepository(db)
