from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_RECORD_STATUS


@dataclass(frozen=True)
class Client:
    """Customer company; projects may point at it through ``client_id``."""

    id: str
    company_name: str
    contact_person: str
    email: str
    created_at: datetime
    phone: Optional[str] = None
    status: str = DEFAULT_RECORD_STATUS
    notes: Optional[str] = None
