from __future__ import annotations

import pytest

from attendance_reconciler.main import create_app


@pytest.fixture()
def client():
    app = create_app("attendance_reconciler.settings.testing")
    return app.test_client()


def _punch(when: str, mcid: str) -> dict:
    return {"Name": "Eve Wilson", "Empcode": "E006", "PunchDate": f"01/01/2026 {when}", "M_Flag": None, "mcid": mcid}


def test_health(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"success": True}


def test_reconcile_day_returns_attendance_and_discrepancies(client):
    payload = {
        "personId": "u-6",
        "date": "2026-01-01",
        "punches": [
            _punch("09:00:00", "1"),
            _punch("09:10:00", "1"),
            _punch("12:00:00", "2"),
            _punch("13:00:00", "1"),
            _punch("17:30:00", "2"),
            _punch("18:00:00", "2"),
            _punch("bad", "1"),
        ],
        "logs": [
            {"loggedAt": "2026-01-01T12:30:00", "duration": 20 * 60 * 1000, "taskName": "Hotfix"},
        ],
    }

    resp = client.post("/api/reconcile/day", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["attendance"]["sessions"] == [{"in": "09:00", "out": "12:00"}, {"in": "13:00", "out": "18:00"}]
    assert body["attendance"]["status"] == "PRESENT"
    assert body["attendance"]["totalMinutes"] == 480

    [discrepancy] = body["discrepancies"]
    assert discrepancy["rule"] == "LOG_AFTER_EXIT"
    assert discrepancy["severity"] == "medium"
    assert discrepancy["minutesInvolved"] == 20
    assert discrepancy["status"] == "open"
    assert discrepancy["metadata"]["out_period"] == {"start": "12:00", "end": "13:00"}
    assert discrepancy["metadata"]["label"] == "Hotfix"

    kinds = [d["kind"] for d in body["diagnostics"]]
    assert kinds[0] == "MALFORMED_TIMESTAMP"
    assert "DUPLICATE_IN" in kinds
    assert "DUPLICATE_OUT" in kinds


def test_absent_day(client):
    resp = client.post(
        "/api/reconcile/day",
        json={"personId": "u-1", "date": "2026-01-01", "logs": [{"loggedAt": "2026-01-01T11:00:00", "durationMinutes": 30}]},
    )

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["attendance"]["status"] == "ABSENT"
    assert body["attendance"]["firstIn"] is None
    assert [d["rule"] for d in body["discrepancies"]] == ["NO_ATTENDANCE"]
    assert body["compliance"]["insufficient_hours"] is True


def test_bad_time_log_duration_is_reported_not_fatal(client):
    resp = client.post(
        "/api/reconcile/day",
        json={
            "personId": "u-1",
            "date": "2026-01-01",
            "logs": [
                {"loggedAt": "2026-01-01T11:00:00", "duration": "abc"},
                {"loggedAt": "2026-01-01T11:30:00", "durationMinutes": 30},
            ],
        },
    )

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["loggedMinutes"] == 30
    assert [d["kind"] for d in body["diagnostics"]] == ["INVALID_DURATION"]


def test_punches_from_two_employees_are_rejected(client):
    other = dict(_punch("13:00:00", "1"), Empcode="E007", Name="Frank Ocean")
    resp = client.post(
        "/api/reconcile/day",
        json={"personId": "u-6", "date": "2026-01-01", "punches": [_punch("09:00:00", "1"), other]},
    )

    assert resp.status_code == 400
    assert "E006" in resp.get_json()["message"]


@pytest.mark.parametrize(
    "payload",
    [
        {"date": "2026-01-01"},
        {"personId": "u-1", "date": "01/01/2026"},
        {"personId": "u-1", "date": "2026-01-01", "punches": "nope"},
    ],
)
def test_invalid_payload_is_400(client, payload):
    resp = client.post("/api/reconcile/day", json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
