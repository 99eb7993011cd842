from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..storage.repository import Repository
from .model import Employee


class EmployeeRepository(Repository[Employee], Protocol):
    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def search(self, query: str) -> Sequence[Employee]:
        """Case-insensitive substring match on name and email."""

        raise NotImplementedError
