from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.schemas import PayloadSchema


class EmployeeCreate(PayloadSchema):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    role: str = Field(min_length=1)
    status: str = Field(default="active", min_length=1)
    profile_image: Optional[str] = None


class DepartmentCreate(PayloadSchema):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    manager_id: Optional[str] = None
    budget: int = Field(default=0, ge=0)
    status: str = Field(default="active", min_length=1)
