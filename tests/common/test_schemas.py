from __future__ import annotations

from datetime import date, datetime, time

import pytest

from solar_ops.attendance.schema import AttendanceCreate
from solar_ops.common.schemas import parse_patch, parse_payload
from solar_ops.common.serializers import to_json
from solar_ops.core.enums import AttendanceStatus
from solar_ops.core.exceptions import ValidationError
from solar_ops.employees.schema import EmployeeCreate
from solar_ops.payroll.schema import PayrollCreate
from solar_ops.attendance.model import Attendance


def test_parse_payload_drops_unknown_keys_and_unset_defaults():
    data = parse_payload(
        EmployeeCreate,
        {"name": " John ", "email": "j@x.com", "role": "PM", "salary": 10},
        message="bad",
    )

    assert data == {"name": "John", "email": "j@x.com", "role": "PM"}


def test_parse_payload_rejects_non_object():
    with pytest.raises(ValidationError, match="bad"):
        parse_payload(EmployeeCreate, ["not", "a", "dict"], message="bad")


def test_parse_patch_validates_only_present_keys():
    assert parse_patch(EmployeeCreate, {"role": "Designer", "nope": 1}, message="bad") == {"role": "Designer"}


def test_parse_patch_keeps_field_constraints():
    with pytest.raises(ValidationError) as excinfo:
        parse_patch(PayrollCreate, {"month": "2026-13", "bonus": -5}, message="bad")

    assert {e["field"] for e in excinfo.value.errors} == {"month", "bonus"}


def test_parse_patch_coerces_types():
    data = parse_patch(AttendanceCreate, {"punch_in": "09:15", "status": "late"}, message="bad")

    assert data == {"punch_in": time(9, 15), "status": AttendanceStatus.LATE}


def test_to_json_formats_dates_times_and_enums():
    record = Attendance(
        id="a1",
        employee_id="e1",
        date=date(2026, 2, 2),
        status=AttendanceStatus.PRESENT,
        created_at=datetime(2026, 2, 2, 9, 0),
        updated_at=datetime(2026, 2, 2, 9, 0),
        punch_in=time(9, 0),
    )

    data = to_json(record)

    assert data["date"] == "2026-02-02"
    assert data["punch_in"] == "09:00"
    assert data["punch_out"] is None
    assert data["status"] == "present"
    assert data["created_at"] == "2026-02-02T09:00:00"
