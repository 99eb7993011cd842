from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def gross_salary(self, data: Mapping[str, Any]) -> int:
        raise NotImplementedError

    @abstractmethod
    def net_salary(self, data: Mapping[str, Any], gross: int) -> int:
        raise NotImplementedError
