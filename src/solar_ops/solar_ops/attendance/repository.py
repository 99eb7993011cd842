from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..storage.repository import Repository
from .model import Attendance


class AttendanceRepository(Repository[Attendance], Protocol):
    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[Attendance]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: str) -> Sequence[Attendance]:
        raise NotImplementedError

    def list_by_date(self, work_date: date) -> Sequence[Attendance]:
        raise NotImplementedError
