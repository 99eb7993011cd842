from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.schemas import PayloadSchema
from ..core.enums import ProjectStatus


class ProjectCreate(PayloadSchema):
    name: str = Field(min_length=1)
    status: ProjectStatus
    client_id: Optional[str] = None
