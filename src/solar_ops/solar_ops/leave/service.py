from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.schemas import parse_patch, parse_payload
from ..common.validators import require_non_empty
from ..core.enums import LeaveStatus
from ..core.exceptions import ValidationError
from .model import LeaveRequest
from .repository import LeaveRequestRepository
from .schema import DATE_RANGE_MESSAGE, LeaveRequestCreate


class LeaveService:
    """Leave requests and their approval flow.

    approve/reject do not check the current status: deciding an already
    decided request overwrites the previous decision.
    """

    def __init__(self, requests: LeaveRequestRepository, *, clock: Callable[[], datetime] = now_local):
        self._requests = requests
        self._clock = clock

    def list_all(self) -> Sequence[LeaveRequest]:
        return self._requests.list_all()

    def list_by_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        return self._requests.list_by_employee(employee_id)

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        return self._requests.get_by_id(request_id)

    def create(self, payload: Mapping[str, Any]) -> LeaveRequest:
        data = parse_payload(LeaveRequestCreate, payload, message="Invalid leave request data")
        return self._requests.create(data)

    def update(self, request_id: str, payload: Mapping[str, Any]) -> Optional[LeaveRequest]:
        changes = parse_patch(LeaveRequestCreate, payload, message="Invalid leave request data")
        if "start_date" in changes or "end_date" in changes:
            current = self._requests.get_by_id(request_id)
            if current is None:
                return None
            start = changes.get("start_date", current.start_date)
            end = changes.get("end_date", current.end_date)
            if end < start:
                raise ValidationError(
                    "Invalid leave request data",
                    [{"field": "end_date", "message": DATE_RANGE_MESSAGE}],
                )
        return self._requests.update(request_id, changes)

    def approve(
        self,
        request_id: str,
        approved_by: Optional[str],
        *,
        now: Optional[datetime] = None,
    ) -> Optional[LeaveRequest]:
        approved_by = require_non_empty(approved_by, "Approved by field")
        return self._requests.update(
            request_id,
            {
                "status": LeaveStatus.APPROVED,
                "approved_by": approved_by,
                "approved_at": now or self._clock(),
            },
        )

    def reject(
        self,
        request_id: str,
        approved_by: Optional[str],
        comments: Optional[str] = None,
        *,
        now: Optional[datetime] = None,
    ) -> Optional[LeaveRequest]:
        approved_by = require_non_empty(approved_by, "Approved by field")
        return self._requests.update(
            request_id,
            {
                "status": LeaveStatus.REJECTED,
                "approved_by": approved_by,
                "approved_at": now or self._clock(),
                "comments": comments,
            },
        )
