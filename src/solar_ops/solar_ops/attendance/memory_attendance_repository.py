from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..storage.memory import InMemoryRepository
from .model import Attendance
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(InMemoryRepository[Attendance], AttendanceRepository):
    model = Attendance
    recent_first = True

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[Attendance]:
        return self.find_first(lambda a: a.employee_id == employee_id and a.date == work_date)

    def list_by_employee(self, employee_id: str) -> Sequence[Attendance]:
        return self.filter(lambda a: a.employee_id == employee_id)

    def list_by_date(self, work_date: date) -> Sequence[Attendance]:
        return self.filter(lambda a: a.date == work_date)
