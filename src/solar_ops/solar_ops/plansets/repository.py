from __future__ import annotations

from typing import Protocol, Sequence

from ..storage.repository import Repository
from .model import Planset


class PlansetRepository(Repository[Planset], Protocol):
    def list_by_project(self, project_id: str) -> Sequence[Planset]:
        raise NotImplementedError
