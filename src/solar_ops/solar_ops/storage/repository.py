from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class Repository(Protocol[T]):
    """CRUD contract shared by every record collection."""

    def create(self, data: Mapping[str, Any]) -> T:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[T]:
        raise NotImplementedError

    def update(self, record_id: str, changes: Mapping[str, Any]) -> Optional[T]:
        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[T]:
        raise NotImplementedError
