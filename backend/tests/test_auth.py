"""Identity resolution, token checks and the shape of error responses."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from projecthub.config import settings
from projecthub.main import app
from projecthub.models.user import User
from projecthub.schemas.user import Identity
from projecthub.services import identity_service
from tests.conftest import auth_headers


def test_get_or_create_is_idempotent(db):
    identity = Identity(uid="uid-zed", email="zed@example.com")
    first = identity_service.get_or_create_user(db, identity)
    second = identity_service.get_or_create_user(db, identity, default_name="Someone Else")
    assert first.user_id == second.user_id
    assert first.display_name == "Anonymous"
    assert db.query(User).filter(User.uid == "uid-zed").count() == 1


def test_verify_token_reads_claims():
    token = identity_service.create_access_token("uid-1", email="a@b.c", name="Ann", picture="p.png")
    identity = identity_service.verify_token(token)
    assert identity == Identity(uid="uid-1", email="a@b.c", name="Ann", picture="p.png")


def test_verify_token_falls_back_to_user_id_claim():
    expire = datetime.now(timezone.utc) + timedelta(minutes=5)
    token = jwt.encode({"user_id": "fb-123", "exp": expire}, settings.IDENTITY_SECRET_KEY, algorithm="HS256")
    assert identity_service.verify_token(token).uid == "fb-123"


def test_me_auto_provisions_with_identity_fields(client, db):
    resp = client.get("/api/users/me", headers=auth_headers("uid-me", email="me@example.com", name="Me"))
    assert resp.status_code == 200
    data = resp.json()
    assert data["uid"] == "uid-me"
    assert data["displayName"] == "Me"
    assert data["email"] == "me@example.com"
    assert data["favorites"] == []
    assert db.query(User).count() == 1

    client.get("/api/users/me", headers=auth_headers("uid-me"))
    assert db.query(User).count() == 1


def test_me_defaults_to_anonymous(client):
    data = client.get("/api/users/me", headers=auth_headers("uid-anon")).json()
    assert data["displayName"] == "Anonymous"


def test_missing_token_is_401(client):
    resp = client.get("/api/users/me")
    assert resp.status_code == 401
    assert resp.json() == {"error": "No token provided"}


def test_bad_signature_is_401(client):
    token = jwt.encode({"uid": "x"}, "some-other-secret", algorithm="HS256")
    resp = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid or expired token"}


def test_expired_token_is_401(client):
    token = identity_service.create_access_token("uid-old", expires_minutes=-5)
    resp = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_profile_upsert_partial_semantics(client, seed_users):
    headers = auth_headers("uid-alice")
    resp = client.post(
        "/api/users/profile",
        json={"displayName": "Alice K", "photoURL": "https://img/a.png", "bio": "hi"},
        headers=headers,
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["displayName"] == "Alice K"
    assert data["photoURL"] == "https://img/a.png"
    assert data["bio"] == "hi"

    data = client.post("/api/users/profile", json={"displayName": "", "bio": ""}, headers=headers).json()
    assert data["displayName"] == "Alice K"
    assert data["photoURL"] == "https://img/a.png"
    assert data["bio"] == ""


def test_public_profile(client, seed_users, seed_project):
    resp = client.get("/api/users/profile/uid-alice")
    assert resp.status_code == 200
    data = resp.json()
    assert data["user"]["displayName"] == "Alice"
    assert "favorites" not in data["user"]
    assert [p["title"] for p in data["projects"]] == ["Rust Ray Tracer"]

    resp = client.get("/api/users/profile/uid-nobody")
    assert resp.status_code == 404
    assert resp.json() == {"error": "User not found"}


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert "timestamp" in resp.json()


def test_unexpected_error_is_hidden(monkeypatch):
    from projecthub.services import analytics_service

    def boom(db):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(analytics_service, "get_analytics", boom)
    client = TestClient(app, raise_server_exceptions=False)
    resp = client.get("/api/analytics")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Something went wrong!"}


def test_unusable_provider_key_is_upstream_error(monkeypatch, seed_users):
    from jose.exceptions import JWKError

    from projecthub.exceptions import UpstreamError

    def broken_decode(*args, **kwargs):
        raise JWKError("bad key material")

    token = identity_service.create_access_token("uid-alice")
    monkeypatch.setattr(identity_service.jwt, "decode", broken_decode)

    with pytest.raises(UpstreamError):
        identity_service.verify_token(token)

    client = TestClient(app, raise_server_exceptions=False)
    resp = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Something went wrong!"}
