"""
Answer API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from core import config


class AnswerRequest(BaseModel):
    # Any other field in the body (id, question, timestamps) is ignored.
    text: str = Field(..., min_length=1)

    @field_validator("text")
    @classmethod
    def _text_within_cap(cls, value: str) -> str:
        limit = config.answer_text_max_length()
        if len(value) > limit:
            raise ValueError(f"text must be at most {limit} characters")
        return value


class AnswerResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    text: str
    question_id: int
    created_at: datetime
    updated_at: datetime
