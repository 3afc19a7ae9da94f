from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from ot_api.main import app
from ot_payroll.config import Settings, get_settings

EVENTS = [
    {"name": "Anan", "timestamp": "2025-11-04T08:00:00"},
    {"name": "Anan", "timestamp": "2025-11-04T20:00:00"},
    {"name": "Bee", "timestamp": "2025-11-13T08:00:00"},
    {"name": "Bee", "timestamp": "2025-11-13T10:30:00"},
    {"name": "", "timestamp": "2025-11-13T10:30:00"},
    {"name": "Bee"},
]


@pytest.fixture
def settings():
    configured = Settings(attendance_path=None, roster_path=None)
    app.dependency_overrides[get_settings] = lambda: configured
    yield configured
    app.dependency_overrides.clear()


def test_health(settings):
    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_calculate_from_posted_events(settings):
    payload = {"month": 11, "year": 2025, "holidays": [13, 13], "events": EVENTS}

    with TestClient(app) as client:
        response = client.post("/overtime/calculate", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["holidays"] == [13]
    assert body["total_pay"] == 270
    assert body["summary"] == [{"name": "Anan", "total_pay": 150}, {"name": "Bee", "total_pay": 120}]
    bee = body["details"]["Bee"][0]
    assert bee["date"] == "2025-11-13"
    assert bee["day_type"] == "holiday"
    assert bee["hours"] == 2


def test_calculate_drops_oversized_epoch_timestamps(settings):
    payload = {"month": 11, "year": 2025, "events": EVENTS + [{"name": "Anan", "timestamp": 10**400}]}

    with TestClient(app) as client:
        response = client.post("/overtime/calculate", json=payload)

    assert response.status_code == 200
    assert response.json()["total_pay"] == 150


def test_calculate_rejects_invalid_month(settings):
    with TestClient(app) as client:
        response = client.post("/overtime/calculate", json={"month": 13, "year": 2025, "events": []})

    assert response.status_code == 422


def test_monthly_overtime_without_source(settings):
    with TestClient(app) as client:
        response = client.get("/overtime", params={"month": 11, "year": 2025})

    assert response.status_code == 503
    assert response.json()["detail"] == "Attendance source unavailable"


def test_monthly_overtime_with_missing_file(settings, tmp_path):
    settings.attendance_path = tmp_path / "missing.csv"

    with TestClient(app) as client:
        response = client.get("/overtime", params={"month": 11, "year": 2025})

    assert response.status_code == 503


def test_monthly_overtime_reads_configured_file(settings, tmp_path):
    source = tmp_path / "attendance.csv"
    source.write_text(
        "name,timestamp\nAnan,2025-11-01T09:00:00\nAnan,2025-11-01T12:00:00\n",
        encoding="utf-8",
    )
    settings.attendance_path = source

    with TestClient(app) as client:
        response = client.get("/overtime", params={"month": 11, "year": 2025})

    assert response.status_code == 200
    assert response.json()["summary"] == [{"name": "Anan", "total_pay": 180}]
