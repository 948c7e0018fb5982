import pytest
from fastapi.testclient import TestClient

from dashboard.app import app
from dashboard.dependencies import get_tracker_service

@pytest.fixture
def client(service):
    service.open_month(2024, 1)
    app.dependency_overrides[get_tracker_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()

def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["open_month"] == "2024-1"
    assert data["stored_months"] == 1

def test_current_month_view(client):
    data = client.get("/api/months/current").json()
    assert data["year"] == 2024
    assert data["daysInMonth"] == 29
    assert len(data["habits"]) == 10

def test_list_stored_months(client):
    data = client.get("/api/months/").json()
    assert data["total"] == 1
    assert data["months"][0] == {"year": 2024, "month": 1, "key": "habit-tracker-data-2024-1"}

def test_navigate_and_open_month(client):
    data = client.post("/api/months/navigate", json={"offset": 1}).json()
    assert (data["year"], data["month"]) == (2024, 2)

    data = client.get("/api/months/2023/11").json()
    assert (data["year"], data["month"], data["daysInMonth"]) == (2023, 11, 31)

def test_open_month_rejects_bad_month(client):
    assert client.get("/api/months/2024/12").status_code == 422

def test_toggle(client):
    data = client.post("/api/habits/toggle", json={"habitId": "1", "dayIndex": 0}).json()
    assert data["habits"][0]["checks"][0] is True
    assert data["dailyStats"][0]["done"] == 1

def test_add_rename_move(client):
    data = client.post("/api/habits").json()
    new_id = data["habits"][-1]["id"]
    assert data["habits"][-1]["name"] == "New Habit"

    data = client.put(f"/api/habits/{new_id}", json={"name": "Stretch", "icon": "🧘"}).json()
    assert data["habits"][-1]["name"] == "Stretch"

    data = client.post("/api/habits/move", json={"index": 10, "direction": "up"}).json()
    assert data["habits"][9]["id"] == new_id

def test_rename_rejects_blank_name(client):
    assert client.put("/api/habits/1", json={"name": "  "}).status_code == 422

def test_two_phase_delete(client):
    data = client.post("/api/habits/2/delete-request").json()
    assert data["pendingDelete"]["id"] == "2"
    assert len(data["habits"]) == 10

    data = client.post("/api/habits/delete-confirm").json()
    assert data["pendingDelete"] is None
    assert "2" not in [h["id"] for h in data["habits"]]

def test_delete_request_unknown_habit(client):
    assert client.post("/api/habits/nope/delete-request").status_code == 404

def test_delete_cancel(client):
    client.post("/api/habits/2/delete-request")
    data = client.post("/api/habits/delete-cancel").json()
    assert data["pendingDelete"] is None
    assert len(data["habits"]) == 10

def test_mental_state_lenient_input(client):
    data = client.post("/api/mental-state", json={"dayIndex": 0, "field": "mood", "value": "15"}).json()
    assert data["mentalState"][0]["mood"] == 10

    data = client.post("/api/mental-state", json={"dayIndex": 0, "field": "motivation", "value": ""}).json()
    assert data["mentalState"][0]["motivation"] == 0

def test_stats_and_charts(client):
    client.post("/api/habits/toggle", json={"habitId": "1", "dayIndex": 0})

    assert client.get("/api/stats/summary").json()["totalActual"] == 1
    assert len(client.get("/api/stats/daily").json()["days"]) == 29
    assert client.get("/api/stats/analysis").json()["habits"][0]["actual"] == 1

    for chart in ("daily-progress", "mental-state", "habits"):
        assert client.get(f"/api/charts/{chart}").status_code == 200

def test_export(client):
    response = client.get("/api/export", params={"format": "csv"})
    assert response.status_code == 200
    assert "habits_2024_02.csv" in response.headers["content-disposition"]
    assert response.text.splitlines()[0].startswith("day,weekday,Wake up at 05:00")

    response = client.get("/api/export")
    assert response.json()["habits"][0]["id"] == "1"

def test_mental_state_accepts_any_json_value(client):
    data = client.post("/api/mental-state", json={"dayIndex": 1, "field": "mood", "value": 7.5}).json()
    assert data["mentalState"][1]["mood"] == 7

    data = client.post("/api/mental-state", json={"dayIndex": 1, "field": "mood", "value": True}).json()
    assert data["mentalState"][1]["mood"] == 0

    data = client.post("/api/mental-state", json={"dayIndex": 1, "field": "mood", "value": "9" * 5000}).json()
    assert data["mentalState"][1]["mood"] == 10
