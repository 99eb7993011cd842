from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.schemas import parse_patch, parse_payload
from .model import Project
from .repository import ProjectRepository
from .schema import ProjectCreate
from .stats import build_project_stats


class ProjectService:
    def __init__(self, projects: ProjectRepository):
        self._projects = projects

    def list_all(self) -> Sequence[Project]:
        return self._projects.list_all()

    def list_by_status(self, status: str) -> Sequence[Project]:
        return self._projects.list_by_status(status)

    def get(self, project_id: str) -> Optional[Project]:
        return self._projects.get_by_id(project_id)

    def create(self, payload: Mapping[str, Any]) -> Project:
        data = parse_payload(ProjectCreate, payload, message="Invalid project data")
        return self._projects.create(data)

    def update(self, project_id: str, payload: Mapping[str, Any]) -> Optional[Project]:
        changes = parse_patch(ProjectCreate, payload, message="Invalid project data")
        return self._projects.update(project_id, changes)

    def delete(self, project_id: str) -> bool:
        return self._projects.delete_by_id(project_id)

    def stats(self) -> dict:
        return build_project_stats(self._projects.list_all())
