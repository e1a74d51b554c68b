import os
import sys

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.api import deps
from app.database import Base
from app.main import create_application
from app.models.user import User
from app.schemas.user import HealthProfile, UserResponse, to_json_column


def _build_test_client():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    app = create_application()

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[deps.get_db] = override_get_db
    return TestClient(app), TestingSessionLocal


def _signup_headers(client: TestClient, email: str) -> dict:
    response = client.post(
        "/api/auth/signup",
        json={
            "name": "Original",
            "email": email,
            "password": "secret123",
            "health_profile": {"age": 30, "sensitivity": "low"},
        },
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}


def test_profile_requires_authentication():
    client, _ = _build_test_client()

    assert client.get("/api/user/profile").status_code == 401
    assert client.put("/api/user/profile", json={"name": "x"}).status_code == 401
    assert client.delete("/api/user/account").status_code == 401


def test_get_profile_returns_current_user():
    client, _ = _build_test_client()
    headers = _signup_headers(client, "reader@example.com")

    response = client.get("/api/user/profile", headers=headers)

    assert response.status_code == 200
    assert response.json()["user"]["email"] == "reader@example.com"
    assert response.json()["user"]["health_profile"]["sensitivity"] == "low"


def test_update_profile_applies_only_sent_fields():
    client, _ = _build_test_client()
    headers = _signup_headers(client, "editor@example.com")

    response = client.put(
        "/api/user/profile",
        headers=headers,
        json={
            "preferences": {
                "alerts": {"enabled": False, "aqi_threshold": 150, "email": True},
                "location": {"lat": 47.61, "lng": -122.33, "city": "Seattle", "state": "WA"},
            },
        },
    )

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["name"] == "Original"
    assert user["health_profile"]["age"] == 30
    assert user["preferences"]["alerts"]["enabled"] is False
    assert user["preferences"]["location"]["city"] == "Seattle"

    renamed = client.put("/api/user/profile", headers=headers, json={"name": "Renamed"})
    assert renamed.json()["user"]["name"] == "Renamed"
    assert renamed.json()["user"]["preferences"]["location"]["state"] == "WA"


def test_update_profile_rejects_invalid_values():
    client, _ = _build_test_client()
    headers = _signup_headers(client, "invalid@example.com")

    response = client.put(
        "/api/user/profile",
        headers=headers,
        json={"health_profile": {"sensitivity": "extreme"}},
    )

    assert response.status_code == 400
    assert any("sensitivity" in error["field"] for error in response.json()["errors"])


def test_delete_account_is_permanent():
    client, testing_session_local = _build_test_client()
    headers = _signup_headers(client, "leaving@example.com")

    response = client.delete("/api/user/account", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Account deleted"}

    # Token is still well-formed but its user is gone
    assert client.get("/api/auth/me", headers=headers).status_code == 401
    login = client.post(
        "/api/auth/login",
        json={"email": "leaving@example.com", "password": "secret123"},
    )
    assert login.status_code == 401

    db = testing_session_local()
    try:
        assert db.query(User).filter(User.email == "leaving@example.com").count() == 0
    finally:
        db.close()

    # The email can be registered again
    _signup_headers(client, "leaving@example.com")


def test_json_columns_round_trip_through_user_response():
    assert to_json_column(None) is None

    stored = to_json_column(HealthProfile(age=70, conditions=["copd"], sensitivity="high"))
    response = UserResponse(
        id="user-1",
        email="old@example.com",
        health_profile=stored,
        created_at="2026-01-01T00:00:00",
    )

    assert response.health_profile.conditions == ["copd"]
    assert response.preferences is None
