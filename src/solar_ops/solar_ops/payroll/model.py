from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import PayrollStatus


@dataclass(frozen=True)
class Payroll:
    """Monthly salary slip. Amounts are whole currency units."""

    id: str
    employee_id: str
    month: str
    basic_salary: int
    gross_salary: int
    net_salary: int
    created_at: datetime
    allowances: int = 0
    deductions: int = 0
    bonus: int = 0
    overtime: int = 0
    status: PayrollStatus = PayrollStatus.PENDING
    processed_at: Optional[datetime] = None
