from __future__ import annotations

from dataclasses import fields
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Iterable, Optional

from ..core.constants import TIME_FORMAT


def _to_json_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, time):
        return value.strftime(TIME_FORMAT)
    if isinstance(value, (list, tuple)):
        return [_to_json_value(v) for v in value]
    return value


def to_json(record: Optional[Any]) -> Optional[dict]:
    """Flatten a record dataclass into JSON-safe primitives."""
    if record is None:
        return None
    return {f.name: _to_json_value(getattr(record, f.name)) for f in fields(record)}


def to_json_list(records: Iterable[Any]) -> list[dict]:
    return [to_json(r) for r in records]
