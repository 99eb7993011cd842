from __future__ import annotations

from datetime import date, datetime, time

from ..core.constants import DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_minute(value: datetime) -> time:
    """Wall-clock time of ``value`` truncated to the minute."""
    return value.time().replace(second=0, microsecond=0)


def minutes_since_midnight(value: time) -> int:
    return value.hour * 60 + value.minute
