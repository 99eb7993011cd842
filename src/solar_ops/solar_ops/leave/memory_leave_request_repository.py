from __future__ import annotations

from typing import Sequence

from ..storage.memory import InMemoryRepository
from .model import LeaveRequest
from .repository import LeaveRequestRepository


class InMemoryLeaveRequestRepository(InMemoryRepository[LeaveRequest], LeaveRequestRepository):
    model = LeaveRequest
    recent_first = True

    def list_by_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        return self.filter(lambda r: r.employee_id == employee_id)
