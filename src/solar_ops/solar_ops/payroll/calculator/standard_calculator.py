from __future__ import annotations

from typing import Any, Mapping

from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: gross = basic + allowances + bonus + overtime; net = gross - deductions."""

    def gross_salary(self, data: Mapping[str, Any]) -> int:
        return int(
            (data.get("basic_salary") or 0)
            + (data.get("allowances") or 0)
            + (data.get("bonus") or 0)
            + (data.get("overtime") or 0)
        )

    def net_salary(self, data: Mapping[str, Any], gross: int) -> int:
        return int(gross - (data.get("deductions") or 0))
