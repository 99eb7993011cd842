from __future__ import annotations

from typing import Sequence

from ..storage.memory import InMemoryRepository
from .model import Payroll
from .repository import PayrollRepository


class InMemoryPayrollRepository(InMemoryRepository[Payroll], PayrollRepository):
    model = Payroll
    recent_first = True

    def list_by_employee(self, employee_id: str) -> Sequence[Payroll]:
        return self.filter(lambda p: p.employee_id == employee_id)
