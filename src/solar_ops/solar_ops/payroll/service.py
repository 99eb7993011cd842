from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.schemas import parse_patch, parse_payload
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import Payroll
from .repository import PayrollRepository
from .schema import PayrollCreate


class PayrollService:
    """Payroll rows; one per employee per month by convention (not enforced)."""

    def __init__(self, payroll: PayrollRepository, *, calculator: Optional[PayrollCalculator] = None):
        self._payroll = payroll
        self._calculator = calculator or StandardPayrollCalculator()

    def list_all(self) -> Sequence[Payroll]:
        return self._payroll.list_all()

    def list_by_employee(self, employee_id: str) -> Sequence[Payroll]:
        return self._payroll.list_by_employee(employee_id)

    def get(self, payroll_id: str) -> Optional[Payroll]:
        return self._payroll.get_by_id(payroll_id)

    def create(self, payload: Mapping[str, Any]) -> Payroll:
        data = parse_payload(PayrollCreate, payload, message="Invalid payroll data")

        if data.get("gross_salary") is None:
            data["gross_salary"] = self._calculator.gross_salary(data)
        if data.get("net_salary") is None:
            data["net_salary"] = self._calculator.net_salary(data, data["gross_salary"])

        return self._payroll.create(data)

    def update(self, payroll_id: str, payload: Mapping[str, Any]) -> Optional[Payroll]:
        changes = parse_patch(PayrollCreate, payload, message="Invalid payroll data")
        return self._payroll.update(payroll_id, changes)
