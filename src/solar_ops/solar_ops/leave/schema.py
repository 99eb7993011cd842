from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import Field, model_validator

from ..common.schemas import PayloadSchema
from ..core.enums import LeaveStatus


DATE_RANGE_MESSAGE = "end_date must be on or after start_date"


class LeaveRequestCreate(PayloadSchema):
    employee_id: str = Field(min_length=1)
    # vacation | sick | personal | emergency
    leave_type: str = Field(min_length=1)
    start_date: date
    end_date: date
    days: int = Field(ge=0)
    reason: str = Field(min_length=1)
    status: LeaveStatus = LeaveStatus.PENDING
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    comments: Optional[str] = None

    @model_validator(mode="after")
    def _end_not_before_start(self) -> "LeaveRequestCreate":
        if self.end_date < self.start_date:
            raise ValueError(DATE_RANGE_MESSAGE)
        return self
