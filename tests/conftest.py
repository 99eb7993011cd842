from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from solar_ops.container import build_container
from solar_ops.main import create_app


class StepClock:
    """Deterministic clock: every call returns the previous value plus ``step``."""

    def __init__(self, start: datetime, step: timedelta = timedelta(minutes=1)):
        self._current = start
        self._step = step

    def __call__(self) -> datetime:
        value = self._current
        self._current += self._step
        return value


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 0, 0)


@pytest.fixture
def frozen_clock(fixed_now):
    return lambda: fixed_now


@pytest.fixture
def step_clock(fixed_now) -> StepClock:
    return StepClock(fixed_now)


@pytest.fixture
def container(frozen_clock):
    return build_container(clock=frozen_clock)


@pytest.fixture
def app(container):
    return create_app("config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def planset_payload():
    def _make(project_id: str, **overrides) -> dict:
        payload = {
            "project_id": project_id,
            "company_name": "Sunrise Installers",
            "customer_name": "Adam Golightly",
            "customer_email": "adam@example.com",
            "site_address": "262 W Roosevelt Ave",
            "city": "Phoenix",
            "state": "AZ",
            "mount_type": "roof",
            "property_type": "residential",
            "job_type": "pv+battery",
        }
        payload.update(overrides)
        return payload

    return _make
