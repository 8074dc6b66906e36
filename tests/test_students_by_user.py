import pytest
from fastapi.testclient import TestClient

from backend.app.db.base import Base
from backend.app.db.session import engine
from backend.app.main import app


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def register(client: TestClient, email: str, password: str = "secret") -> dict:
    resp = client.post(
        "/register",
        json={"name": "Learner", "email": email, "password": password, "password_confirmation": password},
    )
    assert resp.status_code == 201
    return resp.json()


def test_create_student_for_existing_user():
    client = TestClient(app)
    registered = register(client, "learner@example.com")
    user_id = registered["user"]["id"]
    headers = {"Authorization": f"Bearer {registered['access_token']}"}

    resp = client.post(f"/students/user/{user_id}", json={"first_name": "Lea", "last_name": "Rner"}, headers=headers)
    assert resp.status_code == 201
    data = resp.json()
    assert data["message"] == "Student created successfully for existing user"
    assert data["student"]["user_id"] == user_id
    assert data["student"]["email"] == "learner@example.com"
    assert data["student"]["phone"] is None

    fetched = client.get(f"/students/user/{user_id}", headers=headers)
    assert fetched.status_code == 200
    assert fetched.json()["id"] == data["student"]["id"]


def test_create_student_for_user_twice_conflicts():
    client = TestClient(app)
    registered = register(client, "twice@example.com")
    user_id = registered["user"]["id"]
    headers = {"Authorization": f"Bearer {registered['access_token']}"}
    payload = {"first_name": "T", "last_name": "W"}

    assert client.post(f"/students/user/{user_id}", json=payload, headers=headers).status_code == 201
    resp = client.post(f"/students/user/{user_id}", json=payload, headers=headers)
    assert resp.status_code == 409
    assert resp.json() == {"message": "Student record already exists for this user"}


def test_create_student_for_missing_user_returns_404():
    client = TestClient(app)
    registered = register(client, "someone@example.com")
    headers = {"Authorization": f"Bearer {registered['access_token']}"}
    resp = client.post("/students/user/999", json={"first_name": "N", "last_name": "O"}, headers=headers)
    assert resp.status_code == 404
    assert resp.json() == {"message": "User not found"}


def test_create_student_for_user_validation():
    client = TestClient(app)
    registered = register(client, "invalid@example.com")
    headers = {"Authorization": f"Bearer {registered['access_token']}"}
    resp = client.post(f"/students/user/{registered['user']['id']}", json={}, headers=headers)
    assert resp.status_code == 422
    assert {"first_name", "last_name"}.issubset(resp.json()["errors"].keys())


def test_get_student_by_user_without_student_returns_404():
    client = TestClient(app)
    registered = register(client, "nostudent@example.com")
    headers = {"Authorization": f"Bearer {registered['access_token']}"}
    resp = client.get(f"/students/user/{registered['user']['id']}", headers=headers)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Student not found for this user"}
