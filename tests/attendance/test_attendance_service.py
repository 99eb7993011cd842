from __future__ import annotations

import threading
from datetime import date, datetime, time

import pytest

from solar_ops.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from solar_ops.attendance.service import AttendanceService
from solar_ops.core.enums import AttendanceStatus
from solar_ops.core.exceptions import ConflictError, InvariantViolation, ValidationError


@pytest.fixture
def service(frozen_clock):
    return AttendanceService(InMemoryAttendanceRepository(clock=frozen_clock), clock=frozen_clock)


def test_punch_in_creates_present_record_for_today(service, fixed_now):
    record = service.punch_in("e1", now=fixed_now)

    assert record.employee_id == "e1"
    assert record.date == fixed_now.date()
    assert record.punch_in == time(9, 0)
    assert record.punch_out is None
    assert record.status == AttendanceStatus.PRESENT
    assert record.working_hours == 0
    assert service.get_today("e1", now=fixed_now) == record


def test_punch_in_truncates_seconds():
    clock_value = datetime(2026, 2, 2, 8, 59, 59)
    repo = InMemoryAttendanceRepository(clock=lambda: clock_value)
    svc = AttendanceService(repo, clock=lambda: clock_value)

    record = svc.punch_in("e1")

    assert record.punch_in == time(8, 59)


def test_full_day_working_minutes(service):
    service.punch_in("e1", now=datetime(2026, 2, 2, 9, 0))

    record = service.punch_out("e1", now=datetime(2026, 2, 2, 17, 30))

    assert record.punch_out == time(17, 30)
    assert record.working_hours == 510


def test_working_minutes_ignore_seconds(service):
    service.punch_in("e1", now=datetime(2026, 2, 2, 9, 0, 45))

    record = service.punch_out("e1", now=datetime(2026, 2, 2, 9, 1, 10))

    assert record.working_hours == 1


def test_second_punch_in_same_day_is_rejected(service, fixed_now):
    service.punch_in("e1", now=fixed_now)

    with pytest.raises(InvariantViolation, match="Already punched in today"):
        service.punch_in("e1", now=fixed_now.replace(hour=10))


def test_punch_in_after_punch_out_is_still_rejected(service, fixed_now):
    service.punch_in("e1", now=fixed_now)
    service.punch_out("e1", now=fixed_now.replace(hour=12))

    with pytest.raises(InvariantViolation, match="Already punched in today"):
        service.punch_in("e1", now=fixed_now.replace(hour=13))

    assert len(service.list_by_employee("e1")) == 1


def test_punch_in_next_day_opens_a_new_record(service, fixed_now):
    service.punch_in("e1", now=fixed_now)

    record = service.punch_in("e1", now=datetime(2026, 2, 3, 9, 0))

    assert record.date == date(2026, 2, 3)
    assert len(service.list_by_employee("e1")) == 2


def test_punch_out_without_punch_in_is_rejected(service, fixed_now):
    with pytest.raises(InvariantViolation, match="No punch-in record found for today"):
        service.punch_out("e1", now=fixed_now)


def test_punch_out_on_record_without_punch_in_is_rejected(service, fixed_now):
    service.create({"employee_id": "e1", "date": "2026-02-02", "status": "absent"})

    with pytest.raises(InvariantViolation, match="No punch-in record found for today"):
        service.punch_out("e1", now=fixed_now)


def test_punch_out_on_following_day_finds_nothing(service, fixed_now):
    service.punch_in("e1", now=fixed_now.replace(hour=22))

    with pytest.raises(InvariantViolation):
        service.punch_out("e1", now=datetime(2026, 2, 3, 6, 0))


def test_working_minutes_are_not_clamped(service):
    service.punch_in("e1", now=datetime(2026, 2, 2, 23, 50))

    record = service.punch_out("e1", now=datetime(2026, 2, 2, 8, 0))

    assert record.working_hours == 8 * 60 - (23 * 60 + 50)


def test_repeated_punch_out_overwrites(service):
    service.punch_in("e1", now=datetime(2026, 2, 2, 9, 0))
    service.punch_out("e1", now=datetime(2026, 2, 2, 12, 0))

    record = service.punch_out("e1", now=datetime(2026, 2, 2, 17, 0))

    assert record.punch_out == time(17, 0)
    assert record.working_hours == 480


def test_punch_out_refreshes_updated_at(service, fixed_now):
    created = service.punch_in("e1", now=fixed_now)

    updated = service.punch_out("e1", now=fixed_now.replace(hour=17))

    assert updated.updated_at > created.updated_at
    assert updated.created_at == created.created_at


def test_employees_are_tracked_independently(service, fixed_now):
    service.punch_in("e1", now=fixed_now)
    service.punch_in("e2", now=fixed_now)

    assert {r.employee_id for r in service.list_by_date(fixed_now.date())} == {"e1", "e2"}


def test_concurrent_punch_in_creates_one_record(service, fixed_now):
    barrier = threading.Barrier(8)
    outcomes: list[str] = []
    outcomes_lock = threading.Lock()

    def worker():
        barrier.wait()
        try:
            service.punch_in("e1", now=fixed_now)
            result = "ok"
        except InvariantViolation:
            result = "rejected"
        with outcomes_lock:
            outcomes.append(result)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outcomes.count("ok") == 1
    assert outcomes.count("rejected") == 7
    assert len(service.list_by_employee("e1")) == 1


def test_create_validates_payload(service):
    with pytest.raises(ValidationError) as excinfo:
        service.create({"employee_id": "e1", "date": "not-a-date", "status": "present"})

    assert any(e["field"] == "date" for e in excinfo.value.errors)


def test_update_patches_notes_only(service, fixed_now):
    created = service.punch_in("e1", now=fixed_now)

    updated = service.update(created.id, {"notes": "left early", "unknown": 1})

    assert updated.notes == "left early"
    assert updated.punch_in == created.punch_in
    assert updated.status == AttendanceStatus.PRESENT


def test_update_unknown_id_returns_none(service):
    assert service.update("missing", {"notes": "x"}) is None


def test_create_refuses_second_record_for_same_day(service, fixed_now):
    service.punch_in("e1", now=fixed_now)

    with pytest.raises(ConflictError):
        service.create({"employee_id": "e1", "date": fixed_now.date().isoformat(), "status": "late"})

    assert len(service.list_by_employee("e1")) == 1


def test_create_allows_other_day_or_employee(service, fixed_now):
    service.punch_in("e1", now=fixed_now)

    service.create({"employee_id": "e1", "date": "2026-02-03", "status": "absent"})
    service.create({"employee_id": "e2", "date": "2026-02-02", "status": "absent"})

    assert len(service.list_all()) == 3


def test_update_cannot_move_record_onto_occupied_day(service, fixed_now):
    service.punch_in("e1", now=fixed_now)
    other = service.punch_in("e2", now=fixed_now)

    with pytest.raises(ConflictError):
        service.update(other.id, {"employee_id": "e1"})

    assert len(service.list_by_employee("e1")) == 1
    assert service.get(other.id).employee_id == "e2"


def test_update_may_restate_own_employee_and_date(service, fixed_now):
    record = service.punch_in("e1", now=fixed_now)

    updated = service.update(record.id, {"employee_id": "e1", "date": "2026-02-02", "notes": "ok"})

    assert updated.notes == "ok"


def test_update_may_move_record_to_free_day(service, fixed_now):
    record = service.punch_in("e1", now=fixed_now)

    updated = service.update(record.id, {"date": "2026-02-03"})

    assert updated.date == date(2026, 2, 3)
