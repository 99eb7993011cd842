from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_RECORD_STATUS


@dataclass(frozen=True)
class Department:
    id: str
    name: str
    created_at: datetime
    description: Optional[str] = None
    manager_id: Optional[str] = None
    budget: int = 0
    status: str = DEFAULT_RECORD_STATUS
