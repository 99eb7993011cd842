from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import ProjectStatus


@dataclass(frozen=True)
class Project:
    id: str
    name: str
    status: ProjectStatus
    created_at: datetime
    client_id: Optional[str] = None
