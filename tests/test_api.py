from __future__ import annotations

import pytest

from src.work_ledger.work_ledger.database.connection import DatabaseConnection
from src.work_ledger.work_ledger.main import create_app


@pytest.fixture
def client():
    app = create_app("config.testing")
    return app.test_client()


def test_memory_storage_does_not_touch_mysql():
    app = create_app("config.testing")
    container = app.extensions["work_ledger"]
    assert container.conn is None
    assert DatabaseConnection._instance is None


def test_create_entry_and_read_week(client):
    client.put("/api/settings", json={"rate": 8, "rate_over": 12, "rate_weekend": 10, "threshold": 8})

    res = client.post("/api/entries", json={"date": "2025-06-03", "hours": 8, "activity": "Office"})
    assert res.status_code == 201
    assert res.get_json()["entry_id"].startswith("e_")

    client.post("/api/entries", json={"date": "2025-06-07", "hours": "6"})

    week = client.get("/api/reports/week?date=2025-06-04").get_json()["report"]
    assert week["start"] == "2025-06-02"
    assert week["totals"]["total"] == 14
    assert week["totals"]["normal"] == 8
    assert week["totals"]["over"] == 6
    assert week["totals"]["amount"] == pytest.approx(124)


def test_invalid_hours_returns_400(client):
    res = client.post("/api/entries", json={"date": "2025-06-03", "hours": 0})

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_patch_and_delete_entry(client):
    entry_id = client.post("/api/entries", json={"date": "2025-06-02", "hours": 8}).get_json()["entry_id"]

    res = client.patch(f"/api/entries/{entry_id}", json={"hours": 10, "rate_over": 20})
    assert res.status_code == 200
    assert res.get_json()["entry"]["hours"] == 10
    assert res.get_json()["entry"]["rate_over"] == 20

    day = client.get("/api/days/2025-06-02").get_json()["day"]
    assert (day["normal"], day["over"]) == (8, 2)

    assert client.delete(f"/api/entries/{entry_id}").status_code == 200
    assert client.delete(f"/api/entries/{entry_id}").status_code == 404


def test_rejected_patch_keeps_stored_hours(client):
    entry_id = client.post("/api/entries", json={"date": "2025-06-02", "hours": 8}).get_json()["entry_id"]

    res = client.patch(f"/api/entries/{entry_id}", json={"hours": 10, "rate": -5})
    assert res.status_code == 400

    day = client.get("/api/days/2025-06-02").get_json()["day"]
    assert day["h_day"] == 8


def test_settings_validation(client):
    res = client.put("/api/settings", json={"rate": -1, "rate_over": 10, "threshold": 8})
    assert res.status_code == 400

    settings = client.get("/api/settings").get_json()["settings"]
    assert settings["threshold"] == 8


def test_month_csv_export(client):
    client.post("/api/entries", json={"date": "2025-06-03", "hours": 8})

    res = client.get("/api/reports/month.csv?year=2025&month=6")

    assert res.status_code == 200
    assert res.mimetype == "text/csv"
    body = res.data.decode("utf-8-sig").splitlines()
    assert body[0].startswith("date,weekend,holiday,workday")
    assert body[1].startswith("2025-06-03")


def test_bad_month_is_rejected(client):
    assert client.get("/api/reports/month?year=2025&month=13").status_code == 400
    assert client.get("/api/days/not-a-date").status_code == 400
