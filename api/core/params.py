"""
Path parameter types shared by the routers.

Ids are positive decimal integers that fit in a signed 64-bit column.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Path

MAX_ID = 2**63 - 1

QuestionId = Annotated[int, Path(ge=1, le=MAX_ID)]
AnswerId = Annotated[int, Path(ge=1, le=MAX_ID)]
