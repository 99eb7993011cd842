from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Attendance:
    """One row per employee per calendar day.

    ``working_hours`` is stored in minutes (punch_out - punch_in, minute precision).
    """

    id: str
    employee_id: str
    date: date
    status: AttendanceStatus
    created_at: datetime
    updated_at: datetime
    punch_in: Optional[time] = None
    punch_out: Optional[time] = None
    working_hours: int = 0
    notes: Optional[str] = None
