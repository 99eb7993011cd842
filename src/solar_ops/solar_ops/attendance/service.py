from __future__ import annotations

import threading
from datetime import date, datetime
from typing import Any, Callable, Mapping, Optional, Sequence

from ..common.datetime_utils import minutes_since_midnight, now_local, to_minute
from ..common.schemas import parse_patch, parse_payload
from ..core.enums import AttendanceStatus
from ..core.exceptions import ConflictError, InvariantViolation
from .model import Attendance
from .repository import AttendanceRepository
from .schema import AttendanceCreate


class AttendanceService:
    """Attendance records and the daily punch-in / punch-out flow.

    Per employee and server-local calendar day the states are
    no record -> punched in -> punched out. There is no second punch-in on the
    same day, even after punching out. Manual create/update share the lock and
    refuse a second record for the same employee and day.
    """

    def __init__(self, attendance: AttendanceRepository, *, clock: Callable[[], datetime] = now_local):
        self._attendance = attendance
        self._clock = clock
        # check-then-act on "today's record" must not interleave
        self._lock = threading.Lock()

    def list_all(self) -> Sequence[Attendance]:
        return self._attendance.list_all()

    def list_by_employee(self, employee_id: str) -> Sequence[Attendance]:
        return self._attendance.list_by_employee(employee_id)

    def list_by_date(self, work_date: date) -> Sequence[Attendance]:
        return self._attendance.list_by_date(work_date)

    def get(self, attendance_id: str) -> Optional[Attendance]:
        return self._attendance.get_by_id(attendance_id)

    def get_today(self, employee_id: str, *, now: Optional[datetime] = None) -> Optional[Attendance]:
        now = now or self._clock()
        return self._attendance.get_for_employee_and_date(employee_id, now.date())

    def create(self, payload: Mapping[str, Any]) -> Attendance:
        data = parse_payload(AttendanceCreate, payload, message="Invalid attendance data")
        with self._lock:
            if self._attendance.get_for_employee_and_date(data["employee_id"], data["date"]):
                raise ConflictError("Attendance already recorded for this employee and date")
            return self._attendance.create(data)

    def update(self, attendance_id: str, payload: Mapping[str, Any]) -> Optional[Attendance]:
        changes = parse_patch(AttendanceCreate, payload, message="Invalid attendance data")
        with self._lock:
            current = self._attendance.get_by_id(attendance_id)
            if current is None:
                return None
            if "employee_id" in changes or "date" in changes:
                other = self._attendance.get_for_employee_and_date(
                    changes.get("employee_id", current.employee_id),
                    changes.get("date", current.date),
                )
                if other and other.id != attendance_id:
                    raise ConflictError("Attendance already recorded for this employee and date")
            return self._attendance.update(attendance_id, changes)

    def punch_in(self, employee_id: str, *, now: Optional[datetime] = None) -> Attendance:
        now = now or self._clock()
        today = now.date()

        with self._lock:
            if self._attendance.get_for_employee_and_date(employee_id, today):
                raise InvariantViolation("Already punched in today")

            return self._attendance.create(
                {
                    "employee_id": employee_id,
                    "date": today,
                    "punch_in": to_minute(now),
                    "status": AttendanceStatus.PRESENT,
                    "working_hours": 0,
                }
            )

    def punch_out(self, employee_id: str, *, now: Optional[datetime] = None) -> Attendance:
        now = now or self._clock()
        today = now.date()

        with self._lock:
            record = self._attendance.get_for_employee_and_date(employee_id, today)
            if not record or record.punch_in is None:
                raise InvariantViolation("No punch-in record found for today")

            punch_out = to_minute(now)
            # Not clamped: a shift that crosses midnight yields a negative value.
            worked = minutes_since_midnight(punch_out) - minutes_since_midnight(record.punch_in)

            updated = self._attendance.update(
                record.id,
                {"punch_out": punch_out, "working_hours": worked},
            )
        if updated is None:
            # Deleted between lookup and update.
            raise InvariantViolation("No punch-in record found for today")
        return updated
