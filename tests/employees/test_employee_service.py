from __future__ import annotations

import threading

import pytest

from solar_ops.core.exceptions import ConflictError, ValidationError


def test_create_employee_applies_defaults(container):
    emp = container.employee_service.create(
        {"name": "John Smith", "email": "john.smith@prootly.com", "role": "Project Manager"}
    )

    assert emp.status == "active"
    assert emp.profile_image is None
    assert container.employee_service.get(emp.id) == emp


def test_duplicate_email_is_a_conflict(container):
    svc = container.employee_service
    svc.create({"name": "John Smith", "email": "john@prootly.com", "role": "PM"})

    with pytest.raises(ConflictError):
        svc.create({"name": "Johnny", "email": "JOHN@prootly.com", "role": "PM"})

    assert len(svc.list_all()) == 1


def test_create_requires_name(container):
    with pytest.raises(ValidationError) as excinfo:
        container.employee_service.create({"email": "x@y.com", "role": "PM"})

    assert str(excinfo.value) == "Invalid employee data"
    assert [e["field"] for e in excinfo.value.errors] == ["name"]


def test_search_matches_name_and_email_case_insensitively(container):
    svc = container.employee_service
    john = svc.create({"name": "John Smith", "email": "john@prootly.com", "role": "PM"})
    sarah = svc.create({"name": "Sarah Johnson", "email": "sarah@prootly.com", "role": "Engineer"})
    svc.create({"name": "Ann Lee", "email": "ann@other.com", "role": "Designer"})

    assert [e.id for e in svc.search("JOHN")] == [john.id, sarah.id]
    assert [e.id for e in svc.search("prootly")] == [john.id, sarah.id]
    assert svc.search("nobody") == []


@pytest.mark.parametrize("query", [None, "", "   "])
def test_search_rejects_blank_query(container, query):
    with pytest.raises(ValidationError, match="Query parameter required"):
        container.employee_service.search(query)


def test_update_and_delete_employee(container):
    svc = container.employee_service
    emp = svc.create({"name": "John Smith", "email": "john@prootly.com", "role": "PM"})

    updated = svc.update(emp.id, {"status": "inactive"})

    assert updated.status == "inactive"
    assert updated.role == "PM"
    assert svc.delete(emp.id) is True
    assert svc.delete(emp.id) is False
    assert svc.update(emp.id, {"status": "active"}) is None


def test_department_defaults_and_unique_name(container):
    svc = container.department_service
    dept = svc.create({"name": "Engineering"})

    assert dept.budget == 0
    assert dept.status == "active"
    with pytest.raises(ConflictError):
        svc.create({"name": "Engineering", "budget": 10})


def test_department_budget_cannot_be_negative(container):
    with pytest.raises(ValidationError):
        container.department_service.create({"name": "Sales", "budget": -1})


def _race(target, workers: int = 8) -> list[str]:
    barrier = threading.Barrier(workers)
    outcomes: list[str] = []
    outcomes_lock = threading.Lock()

    def worker(n: int):
        barrier.wait()
        try:
            target(n)
            result = "ok"
        except ConflictError:
            result = "conflict"
        with outcomes_lock:
            outcomes.append(result)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return outcomes


def test_concurrent_creates_with_same_email_keep_one(container):
    svc = container.employee_service

    outcomes = _race(lambda n: svc.create({"name": f"John {n}", "email": "john@prootly.com", "role": "PM"}))

    assert outcomes.count("ok") == 1
    assert outcomes.count("conflict") == 7
    assert len(svc.list_all()) == 1


def test_concurrent_creates_with_same_department_name_keep_one(container):
    svc = container.department_service

    outcomes = _race(lambda n: svc.create({"name": "Engineering", "budget": n}))

    assert outcomes.count("ok") == 1
    assert len(svc.list_all()) == 1
