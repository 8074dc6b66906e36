import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.app.db.base import Base
from backend.app.db.session import engine
from backend.app.main import app


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def register_and_login(client: TestClient, email: str, password: str) -> str:
    client.post(
        "/register",
        json={"name": "Scheduler", "email": email, "password": password, "password_confirmation": password},
    )
    response = client.post("/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return response.json()["access_token"]


@pytest.fixture
def auth_client():
    client = TestClient(app)
    token = register_and_login(client, "schedules@example.com", "secret")
    client.headers.update({"Authorization": f"Bearer {token}"})
    return client


@pytest.fixture
def course_id(auth_client):
    return auth_client.post("/courses", json={"name": "Safety Training", "duration": 3}).json()["id"]


def create_schedule(client: TestClient, course_id: int, start="2024-01-10", end="2024-01-12", **extra):
    payload = {"course_id": course_id, "start_date": start, "end_date": end}
    payload.update(extra)
    return client.post("/training-schedules", json=payload)


def test_create_schedule_includes_course_name(auth_client, course_id):
    resp = create_schedule(auth_client, course_id, location="Room 1")
    assert resp.status_code == 201
    data = resp.json()
    assert data["course_id"] == course_id
    assert data["course_name"] == "Safety Training"
    assert data["start_date"] == "2024-01-10"
    assert data["end_date"] == "2024-01-12"
    assert data["location"] == "Room 1"


def test_create_schedule_with_equal_dates(auth_client, course_id):
    resp = create_schedule(auth_client, course_id, start="2024-02-01", end="2024-02-01")
    assert resp.status_code == 201


def test_create_schedule_rejects_start_after_end(auth_client, course_id):
    resp = create_schedule(auth_client, course_id, start="2024-01-30", end="2024-01-15")
    assert resp.status_code == 422
    assert "start_date" in resp.json()["errors"]


def test_create_schedule_rejects_unknown_course(auth_client):
    resp = create_schedule(auth_client, 999)
    assert resp.status_code == 422
    assert "course_id" in resp.json()["errors"]


def test_create_schedule_requires_fields(auth_client):
    resp = auth_client.post("/training-schedules", json={})
    assert resp.status_code == 422
    assert {"course_id", "start_date", "end_date"}.issubset(resp.json()["errors"].keys())


def test_create_schedule_rejects_bad_date(auth_client, course_id):
    resp = create_schedule(auth_client, course_id, start="not-a-date")
    assert resp.status_code == 422
    assert "start_date" in resp.json()["errors"]


def test_list_and_show_include_course_name(auth_client, course_id):
    schedule_id = create_schedule(auth_client, course_id).json()["id"]

    listed = auth_client.get("/training-schedules")
    assert listed.status_code == 200
    assert [item["course_name"] for item in listed.json()] == ["Safety Training"]

    shown = auth_client.get(f"/training-schedules/{schedule_id}")
    assert shown.status_code == 200
    assert shown.json()["course_name"] == "Safety Training"


def test_show_missing_schedule_returns_404(auth_client):
    resp = auth_client.get("/training-schedules/999")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Training Schedule not found"}


def test_update_checks_effective_dates(auth_client, course_id):
    schedule_id = create_schedule(auth_client, course_id, start="2024-01-10", end="2024-01-12").json()["id"]

    # Only end_date supplied; compared against the stored start_date
    resp = auth_client.put(f"/training-schedules/{schedule_id}", json={"end_date": "2024-01-05"})
    assert resp.status_code == 422
    assert resp.json() == {"message": "start_date must be before or equal to end_date"}

    resp = auth_client.put(f"/training-schedules/{schedule_id}", json={"start_date": "2024-01-20"})
    assert resp.status_code == 422

    unchanged = auth_client.get(f"/training-schedules/{schedule_id}").json()
    assert unchanged["start_date"] == "2024-01-10"
    assert unchanged["end_date"] == "2024-01-12"


def test_update_accepts_equal_effective_dates(auth_client, course_id):
    schedule_id = create_schedule(auth_client, course_id, start="2024-01-10", end="2024-01-12").json()["id"]
    resp = auth_client.put(f"/training-schedules/{schedule_id}", json={"start_date": "2024-01-12"})
    assert resp.status_code == 200
    assert resp.json()["start_date"] == "2024-01-12"


def test_update_moves_schedule_to_other_course(auth_client, course_id):
    other_id = auth_client.post("/courses", json={"name": "First Aid", "duration": 1}).json()["id"]
    schedule_id = create_schedule(auth_client, course_id).json()["id"]
    resp = auth_client.put(f"/training-schedules/{schedule_id}", json={"course_id": other_id, "location": "Hall"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["course_id"] == other_id
    assert data["course_name"] == "First Aid"
    assert data["location"] == "Hall"


def test_update_rejects_unknown_course(auth_client, course_id):
    schedule_id = create_schedule(auth_client, course_id).json()["id"]
    resp = auth_client.put(f"/training-schedules/{schedule_id}", json={"course_id": 999})
    assert resp.status_code == 422
    assert "course_id" in resp.json()["errors"]


def test_delete_schedule(auth_client, course_id):
    schedule_id = create_schedule(auth_client, course_id).json()["id"]
    resp = auth_client.delete(f"/training-schedules/{schedule_id}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Training Schedule deleted successfully"}
    assert auth_client.get(f"/training-schedules/{schedule_id}").status_code == 404


def failing_commit(self):
    raise SQLAlchemyError("commit failed")


def test_create_schedule_failure_returns_500(auth_client, course_id, monkeypatch):
    monkeypatch.setattr(Session, "commit", failing_commit)
    resp = create_schedule(auth_client, course_id)
    monkeypatch.undo()

    assert resp.status_code == 500
    assert resp.json()["message"] == "Failed to create training schedule"
    assert auth_client.get("/training-schedules").json() == []


def test_update_schedule_failure_keeps_previous_values(auth_client, course_id, monkeypatch):
    schedule_id = create_schedule(auth_client, course_id, location="Room 1").json()["id"]

    monkeypatch.setattr(Session, "commit", failing_commit)
    resp = auth_client.put(f"/training-schedules/{schedule_id}", json={"location": "Room 2"})
    monkeypatch.undo()

    assert resp.status_code == 500
    assert resp.json()["message"] == "Failed to update training schedule"
    assert auth_client.get(f"/training-schedules/{schedule_id}").json()["location"] == "Room 1"


def test_delete_schedule_failure_keeps_schedule(auth_client, course_id, monkeypatch):
    schedule_id = create_schedule(auth_client, course_id).json()["id"]

    monkeypatch.setattr(Session, "commit", failing_commit)
    resp = auth_client.delete(f"/training-schedules/{schedule_id}")
    monkeypatch.undo()

    assert resp.status_code == 500
    assert resp.json()["message"] == "Failed to delete training schedule"
    assert auth_client.get(f"/training-schedules/{schedule_id}").status_code == 200
