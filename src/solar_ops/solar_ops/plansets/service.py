from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.schemas import parse_patch, parse_payload
from .model import Planset
from .repository import PlansetRepository
from .schema import PlansetCreate


class PlansetService:
    def __init__(self, plansets: PlansetRepository):
        self._plansets = plansets

    def list_all(self) -> Sequence[Planset]:
        return self._plansets.list_all()

    def list_by_project(self, project_id: str) -> Sequence[Planset]:
        return self._plansets.list_by_project(project_id)

    def get(self, planset_id: str) -> Optional[Planset]:
        return self._plansets.get_by_id(planset_id)

    def create(self, payload: Mapping[str, Any]) -> Planset:
        data = parse_payload(PlansetCreate, payload, message="Invalid planset data")
        return self._plansets.create(data)

    def update(self, planset_id: str, payload: Mapping[str, Any]) -> Optional[Planset]:
        changes = parse_patch(PlansetCreate, payload, message="Invalid planset data")
        return self._plansets.update(planset_id, changes)

    def delete(self, planset_id: str) -> bool:
        return self._plansets.delete_by_id(planset_id)
