import pytest
from fastapi.testclient import TestClient
from main import app, seed_admin
from config import settings
from models.users import Users, UserRole
from api.auth.security import hash_password

client = TestClient(app)


@pytest.fixture
def test_user(test_db):
    """Creates a reviewer account directly in the database."""
    user = Users(
        username="testuser",
        email="test@example.com",
        hashed_password=hash_password("testpassword"),
        role=UserRole.reviewer,
    )
    test_db.add(user)
    test_db.commit()
    test_db.refresh(user)
    return user


def _login(username, password):
    return client.post("/auth/login", json={"username": username, "password": password})


def test_register_user():
    response = client.post("/auth/register", json={
        "username": "newuser",
        "email": "newuser@example.com",
        "password": "password123",
    })

    assert response.status_code == 201
    assert response.json()["message"] == "User registered successfully"
    assert "user_id" in response.json()


def test_register_duplicate_user(test_user):
    response = client.post("/auth/register", json={
        "username": test_user.username,
        "email": "newemail@example.com",
        "password": "anotherpassword",
    })

    assert response.status_code == 400
    assert response.json()["detail"] == "Username or email already exists"


def test_login_user(test_user):
    response = _login(test_user.username, "testpassword")

    assert response.status_code == 200
    assert "access_token" in response.json()
    assert response.json()["token_type"] == "bearer"


def test_form_login(test_user):
    response = client.post("/auth/token", data={"username": test_user.username, "password": "testpassword"})
    assert response.status_code == 200


@pytest.mark.parametrize("username, password", [("testuser", "wrongpassword"), ("nonexistent", "password123")])
def test_login_rejected(test_user, username, password):
    response = _login(username, password)

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid username or password"


def test_token_carries_role(test_user, make_inspection):
    token = _login(test_user.username, "testpassword").json()["access_token"]
    headers = {"Authorization": f"Bearer {token}"}
    inspection = make_inspection()
    detection = client.post("/detections/", headers=headers, json={
        "inspection_id": inspection.id,
        "bbox_x1": 1, "bbox_y1": 1, "bbox_x2": 2, "bbox_y2": 2,
        "ocr_confidence": 0.8, "match_score": 0.7,
    })
    assert detection.status_code == 201

    override = client.put(f"/detections/{detection.json()['id']}/override", headers=headers,
                          json={"reviewer_name": "testuser", "verdict": "Genuine"})
    assert override.status_code == 200

    # reviewers are not admins
    assert client.put("/settings/thresholds", headers=headers,
                      json={"genuine": 0.9, "suspicious": 0.5}).status_code == 403


def test_invalid_token_is_rejected():
    response = client.get("/inspections/", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_logout():
    assert client.post("/auth/logout").json() == {"message": "Logged out"}


def test_seed_admin(test_db, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_USERNAME", "root")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "s3cret-password")

    seed_admin(test_db)
    seed_admin(test_db)

    admins = test_db.query(Users).filter(Users.username == "root").all()
    assert len(admins) == 1
    assert admins[0].role == UserRole.admin
    assert _login("root", "s3cret-password").status_code == 200
