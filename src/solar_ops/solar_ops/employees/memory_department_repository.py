from __future__ import annotations

from typing import Optional

from ..storage.memory import InMemoryRepository
from .department_model import Department
from .department_repository import DepartmentRepository


class InMemoryDepartmentRepository(InMemoryRepository[Department], DepartmentRepository):
    model = Department

    def get_by_name(self, name: str) -> Optional[Department]:
        return self.find_first(lambda d: d.name == name)
