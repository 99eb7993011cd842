from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.schemas import PayloadSchema


class ClientCreate(PayloadSchema):
    company_name: str = Field(min_length=1)
    contact_person: str = Field(min_length=1)
    email: str = Field(min_length=3)
    phone: Optional[str] = None
    status: str = Field(default="active", min_length=1)
    notes: Optional[str] = None
