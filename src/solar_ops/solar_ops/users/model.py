from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    """Login account. Holds only the password hash, never the raw password."""

    id: str
    username: str
    password_hash: str
    created_at: datetime
