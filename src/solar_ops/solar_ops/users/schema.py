from __future__ import annotations

from pydantic import Field

from ..common.schemas import PayloadSchema


class UserCreate(PayloadSchema):
    username: str = Field(min_length=1)
    password: str = Field(min_length=6)
