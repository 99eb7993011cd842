from __future__ import annotations

from typing import Protocol, Sequence

from ..storage.repository import Repository
from .model import Client


class ClientRepository(Repository[Client], Protocol):
    def search(self, query: str) -> Sequence[Client]:
        """Case-insensitive substring match on company, contact person and email."""

        raise NotImplementedError
