from __future__ import annotations

from typing import Optional, Sequence

from ..storage.memory import InMemoryRepository
from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(InMemoryRepository[Employee], EmployeeRepository):
    model = Employee

    def get_by_email(self, email: str) -> Optional[Employee]:
        needle = email.lower()
        return self.find_first(lambda e: e.email.lower() == needle)

    def search(self, query: str) -> Sequence[Employee]:
        needle = query.lower()
        return self.filter(lambda e: needle in e.name.lower() or needle in e.email.lower())
