from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from ..common.schemas import PayloadSchema
from ..core.constants import MONTH_PATTERN
from ..core.enums import PayrollStatus


class PayrollCreate(PayloadSchema):
    employee_id: str = Field(min_length=1)
    month: str = Field(pattern=MONTH_PATTERN)
    basic_salary: int = Field(ge=0)
    allowances: int = Field(default=0, ge=0)
    deductions: int = Field(default=0, ge=0)
    bonus: int = Field(default=0, ge=0)
    overtime: int = Field(default=0, ge=0)
    # Derived by the payroll calculator when omitted.
    gross_salary: Optional[int] = None
    net_salary: Optional[int] = None
    status: PayrollStatus = PayrollStatus.PENDING
    processed_at: Optional[datetime] = None
