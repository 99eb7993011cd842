from __future__ import annotations

from typing import Optional, Protocol

from ..storage.repository import Repository
from .department_model import Department


class DepartmentRepository(Repository[Department], Protocol):
    def get_by_name(self, name: str) -> Optional[Department]:
        raise NotImplementedError
