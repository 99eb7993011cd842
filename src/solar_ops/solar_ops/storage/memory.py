from __future__ import annotations

import itertools
import threading
import uuid
from dataclasses import fields, replace
from datetime import datetime, timedelta
from typing import Any, Callable, ClassVar, Generic, Mapping, Optional, Protocol, TypeVar

from ..common.datetime_utils import now_local

IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at"})


class Record(Protocol):
    id: str
    created_at: datetime


T = TypeVar("T", bound=Record)


def new_record_id() -> str:
    return str(uuid.uuid4())


class InMemoryRepository(Generic[T]):
    """Keyed in-memory collection of frozen dataclass records.

    Subclasses set ``model`` to the record dataclass and ``recent_first`` for
    kinds listed newest-first. Records carrying an ``updated_at`` field get it
    refreshed on every update. Nothing here raises for a missing key: reads
    return ``None`` and deletes return ``False``.
    """

    model: ClassVar[type]
    recent_first: ClassVar[bool] = False

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = now_local,
        id_factory: Callable[[], str] = new_record_id,
    ):
        self._clock = clock
        self._id_factory = id_factory
        self._records: dict[str, T] = {}
        self._sequence: dict[str, int] = {}
        self._counter = itertools.count()
        self._lock = threading.RLock()
        self._tracks_updates = any(f.name == "updated_at" for f in fields(self.model))

    def __len__(self) -> int:
        return len(self._records)

    def create(self, data: Mapping[str, Any]) -> T:
        # None means "not provided": the record's declared default applies.
        values = {k: v for k, v in data.items() if v is not None and k not in IMMUTABLE_FIELDS}
        now = self._clock()
        values["created_at"] = now
        if self._tracks_updates:
            values["updated_at"] = now

        with self._lock:
            record_id = self._id_factory()
            while record_id in self._records:
                record_id = self._id_factory()
            record = self.model(id=record_id, **values)
            self._records[record_id] = record
            self._sequence[record_id] = next(self._counter)
        return record

    def get_by_id(self, record_id: str) -> Optional[T]:
        return self._records.get(record_id)

    def update(self, record_id: str, changes: Mapping[str, Any]) -> Optional[T]:
        patch = {k: v for k, v in changes.items() if k not in IMMUTABLE_FIELDS}
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            if self._tracks_updates:
                patch["updated_at"] = self._next_update_stamp(current.updated_at)
            updated = replace(current, **patch)
            self._records[record_id] = updated
        return updated

    def delete_by_id(self, record_id: str) -> bool:
        with self._lock:
            removed = self._records.pop(record_id, None)
            self._sequence.pop(record_id, None)
        return removed is not None

    def list_all(self) -> list[T]:
        return self._ordered(self._snapshot())

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        return self._ordered(r for r in self._snapshot() if predicate(r))

    def find_first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for record in self._snapshot():
            if predicate(record):
                return record
        return None

    def _snapshot(self) -> list[T]:
        with self._lock:
            return list(self._records.values())

    def _ordered(self, records) -> list[T]:
        items = list(records)
        if self.recent_first:
            # Equal timestamps: the later insertion counts as more recent.
            items.sort(key=lambda r: (r.created_at, self._sequence.get(r.id, -1)), reverse=True)
        return items

    def _next_update_stamp(self, previous: datetime) -> datetime:
        now = self._clock()
        if now <= previous:
            return previous + timedelta(microseconds=1)
        return now
