from __future__ import annotations

from enum import Enum


class ProjectStatus(str, Enum):
    """Closed set of project pipeline states."""

    NEW = "new"
    HOLD = "hold"
    COMPLETED = "completed"
    REVISION = "revision"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HALF_DAY = "half-day"


class LeaveStatus(str, Enum):
    """Leave approval flow: pending -> approved | rejected."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PayrollStatus(str, Enum):
    PENDING = "pending"
    PROCESSED = "processed"
    PAID = "paid"
