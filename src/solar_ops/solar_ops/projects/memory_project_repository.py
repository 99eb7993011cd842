from __future__ import annotations

from typing import Sequence

from ..storage.memory import InMemoryRepository
from .model import Project
from .repository import ProjectRepository


class InMemoryProjectRepository(InMemoryRepository[Project], ProjectRepository):
    model = Project

    def list_by_status(self, status: str) -> Sequence[Project]:
        # ProjectStatus is a str enum, so an unknown status simply matches nothing.
        return self.filter(lambda p: p.status == status)
