from __future__ import annotations

from typing import Protocol, Sequence

from ..storage.repository import Repository
from .model import Payroll


class PayrollRepository(Repository[Payroll], Protocol):
    def list_by_employee(self, employee_id: str) -> Sequence[Payroll]:
        raise NotImplementedError
