from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.schemas import parse_patch, parse_payload
from ..common.validators import require_non_empty
from .model import Client
from .repository import ClientRepository
from .schema import ClientCreate


class ClientService:
    def __init__(self, clients: ClientRepository):
        self._clients = clients

    def list_all(self) -> Sequence[Client]:
        return self._clients.list_all()

    def get(self, client_id: str) -> Optional[Client]:
        return self._clients.get_by_id(client_id)

    def create(self, payload: Mapping[str, Any]) -> Client:
        data = parse_payload(ClientCreate, payload, message="Invalid client data")
        return self._clients.create(data)

    def update(self, client_id: str, payload: Mapping[str, Any]) -> Optional[Client]:
        changes = parse_patch(ClientCreate, payload, message="Invalid client data")
        return self._clients.update(client_id, changes)

    def delete(self, client_id: str) -> bool:
        return self._clients.delete_by_id(client_id)

    def search(self, query: Optional[str]) -> Sequence[Client]:
        query = require_non_empty(query, "Query parameter")
        return self._clients.search(query)
