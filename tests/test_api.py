import pytest

from src.timebank.timebank.main import create_app


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    app.config["TESTING"] = True
    return app.test_client()


def test_schedule_roundtrip(client):
    resp = client.put(
        "/api/work-schedules/1",
        json={"days": [{"day": "monday", "start": "09:00", "end": "15:00", "hasLunch": False}]},
    )
    assert resp.status_code == 200

    body = client.get("/api/work-schedules/1").get_json()
    assert body["days"][0]["weekday"] == "monday"


def test_malformed_schedule_is_400(client):
    resp = client.put("/api/work-schedules/1", json={"days": [{"day": "monday", "start": "18:00", "end": "09:00"}]})
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_summary_for_explicit_past_week(client):
    resp = client.get("/api/time-records/summary?employeeId=1&startDate=2025-06-09&endDate=2025-06-13")

    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body["records"]) == 5
    assert body["records"][0]["status"] == "no_record"
    assert body["totalNegativeHours"] == "40:00:00"
    assert body["finalBalance"] == "-40:00:00"


@pytest.mark.parametrize(
    "query",
    [
        "employeeId=1",
        "employeeId=1&period=fortnight",
        "employeeId=1&startDate=2025-06-09",
        "employeeId=abc&period=week",
    ],
)
def test_summary_rejects_bad_windows(client, query):
    assert client.get(f"/api/time-records/summary?{query}").status_code == 400


def test_summary_unknown_employee_is_404(client):
    assert client.get("/api/time-records/summary?employeeId=5&period=month").status_code == 404


def test_punch_without_clock_in_is_404(client):
    resp = client.post("/api/time-records/clock-out", json={"employeeId": 1})
    assert resp.status_code == 404
    assert resp.get_json()["error"]


def test_absence_endpoints(client):
    created = client.post("/api/absences", json={"employeeId": 1, "date": "2025-06-10", "type": "vacation"})
    assert created.status_code == 201

    listed = client.get("/api/absences/1").get_json()
    assert [a["type"] for a in listed] == ["vacation"]

    summary = client.get("/api/time-records/summary?employeeId=1&startDate=2025-06-10&endDate=2025-06-10").get_json()
    assert summary["finalBalance"] == "00:00:00"


def test_absence_with_bad_date_is_400(client):
    resp = client.post("/api/absences", json={"employeeId": 1, "date": "10/06/2025", "type": "vacation"})
    assert resp.status_code == 400


def test_absence_for_future_date_is_403(client):
    resp = client.post("/api/absences", json={"employeeId": 1, "date": "2999-01-01", "type": "vacation"})
    assert resp.status_code == 403


def test_unknown_route_stays_404(client):
    assert client.get("/api/nope").status_code == 404
