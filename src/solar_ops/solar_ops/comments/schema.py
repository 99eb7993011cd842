from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.schemas import PayloadSchema


class CommentCreate(PayloadSchema):
    author: str = Field(min_length=1)
    company: Optional[str] = None
    text: str = Field(min_length=1)
