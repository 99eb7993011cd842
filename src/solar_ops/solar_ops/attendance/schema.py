from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import Field

from ..common.schemas import PayloadSchema
from ..core.enums import AttendanceStatus


class AttendanceCreate(PayloadSchema):
    employee_id: str = Field(min_length=1)
    date: dt.date
    punch_in: Optional[dt.time] = None
    punch_out: Optional[dt.time] = None
    status: AttendanceStatus
    working_hours: int = 0
    notes: Optional[str] = None
