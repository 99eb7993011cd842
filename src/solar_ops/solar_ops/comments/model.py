from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Comment:
    id: str
    author: str
    text: str
    created_at: datetime
    company: Optional[str] = None
