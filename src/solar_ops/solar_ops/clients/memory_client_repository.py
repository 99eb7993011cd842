from __future__ import annotations

from typing import Sequence

from ..storage.memory import InMemoryRepository
from .model import Client
from .repository import ClientRepository


class InMemoryClientRepository(InMemoryRepository[Client], ClientRepository):
    model = Client

    def search(self, query: str) -> Sequence[Client]:
        needle = query.lower()
        return self.filter(
            lambda c: needle in c.company_name.lower()
            or needle in c.contact_person.lower()
            or needle in c.email.lower()
        )
