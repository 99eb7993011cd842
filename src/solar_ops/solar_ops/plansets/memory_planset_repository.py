from __future__ import annotations

from typing import Sequence

from ..storage.memory import InMemoryRepository
from .model import Planset
from .repository import PlansetRepository


class InMemoryPlansetRepository(InMemoryRepository[Planset], PlansetRepository):
    model = Planset
    recent_first = True

    def list_by_project(self, project_id: str) -> Sequence[Planset]:
        return self.filter(lambda p: p.project_id == project_id)
