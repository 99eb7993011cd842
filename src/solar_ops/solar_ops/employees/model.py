from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_RECORD_STATUS


@dataclass(frozen=True)
class Employee:
    """Staff member. Referenced by attendance, leave and payroll rows."""

    id: str
    name: str
    email: str
    role: str
    created_at: datetime
    status: str = DEFAULT_RECORD_STATUS
    profile_image: Optional[str] = None
