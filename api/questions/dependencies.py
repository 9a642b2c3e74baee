"""
Repository providers for routes that touch questions.
"""

from __future__ import annotations

from fastapi import Depends

from core.db import Database
from core.dependencies import get_db

from .repository import QuestionRepository


def get_question_repository(db: Database = Depends(get_db)) -> QuestionRepository:
    return QuestionRepository(db)
