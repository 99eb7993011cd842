from __future__ import annotations

from typing import Protocol, Sequence

from ..storage.repository import Repository
from .model import Project


class ProjectRepository(Repository[Project], Protocol):
    def list_by_status(self, status: str) -> Sequence[Project]:
        raise NotImplementedError
