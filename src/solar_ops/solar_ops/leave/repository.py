from __future__ import annotations

from typing import Protocol, Sequence

from ..storage.repository import Repository
from .model import LeaveRequest


class LeaveRequestRepository(Repository[LeaveRequest], Protocol):
    def list_by_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        raise NotImplementedError
