"""End-to-end tests for the HTTP API."""

import json
from datetime import datetime, timedelta, timezone
from urllib.parse import quote

import pytest

from notepulse.core.models import Note

UNAUTHORIZED = {"error": "Authentication required"}


@pytest.mark.parametrize(
    "method,path",
    [
        ("GET", "/api/notes/"),
        ("GET", "/api/notes/today"),
        ("POST", "/api/notes/"),
        ("PUT", "/api/notes/n1"),
        ("DELETE", "/api/notes/n1"),
        ("GET", "/api/notes/tags/"),
        ("GET", "/api/notes/mentions/"),
        ("GET", "/api/auth/me"),
        ("POST", "/api/auth/logout"),
    ],
)
async def test_every_protected_route_requires_auth(async_client, method, path):
    resp = await async_client.request(method, path, json={"id": "n1", "title": "t", "content": ""})
    assert resp.status_code == 401
    assert resp.json() == UNAUTHORIZED


async def test_note_lifecycle(async_client, auth_headers, test_user):
    resp = await async_client.post(
        "/api/notes/",
        json={"id": "n1", "title": "Standup", "content": "", "tags": ["work", "urgent"], "mentions": ["alice"]},
        headers=auth_headers,
    )
    assert resp.status_code == 201
    created = resp.json()
    assert created["id"] == "n1"
    assert created["userEmail"] == test_user.email
    assert created["tags"] == ["work", "urgent"]
    assert created["mentions"] == ["alice"]
    assert created["createdAt"] == created["updatedAt"]

    resp = await async_client.put(
        "/api/notes/n1",
        json={"title": "Standup v2", "content": "done", "tags": ["urgent"]},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    assert resp.json() == {
        "id": "n1",
        "title": "Standup v2",
        "content": "done",
        "tags": ["urgent"],
        "mentions": [],
    }

    resp = await async_client.get("/api/notes/", headers=auth_headers)
    assert resp.status_code == 200
    [note] = resp.json()
    assert note["title"] == "Standup v2"
    assert note["tags"] == ["urgent"]
    assert note["mentions"] == []

    # orphaned labels stay available for suggestions
    resp = await async_client.get("/api/notes/tags/", headers=auth_headers)
    assert resp.json() == ["urgent", "work"]
    resp = await async_client.get("/api/notes/mentions/", headers=auth_headers)
    assert resp.json() == ["alice"]

    resp = await async_client.delete("/api/notes/n1", headers=auth_headers)
    assert resp.status_code == 204
    resp = await async_client.get("/api/notes/", headers=auth_headers)
    assert resp.json() == []


async def test_create_validation(async_client, auth_headers):
    resp = await async_client.post("/api/notes/", json={"id": "n1", "title": "", "content": "x"}, headers=auth_headers)
    assert resp.status_code == 422

    resp = await async_client.post("/api/notes/", json={"id": "n2", "title": "t", "content": ""}, headers=auth_headers)
    assert resp.status_code == 201


@pytest.mark.parametrize("field", ["tags", "mentions"])
async def test_overlong_label_names_are_rejected(async_client, auth_headers, field):
    long_name = "x" * 101
    resp = await async_client.post(
        "/api/notes/", json={"id": "n1", "title": "t", "content": "", field: [long_name]}, headers=auth_headers
    )
    assert resp.status_code == 422

    resp = await async_client.put(
        "/api/notes/n1", json={"title": "t", "content": "", field: ["ok", long_name]}, headers=auth_headers
    )
    assert resp.status_code == 422

    resp = await async_client.post(
        "/api/notes/", json={"id": "n2", "title": "t", "content": "", field: ["x" * 100]}, headers=auth_headers
    )
    assert resp.status_code == 201


async def test_cookie_auth_plain_and_array(async_client, access_token):
    for value in (access_token, quote(json.dumps([access_token]))):
        resp = await async_client.get("/api/notes/", headers={"Cookie": f"auth_token={value}"})
        assert resp.status_code == 200


async def test_users_cannot_see_or_touch_each_others_notes(async_client, auth_headers, other_auth_headers):
    await async_client.post(
        "/api/notes/", json={"id": "n1", "title": "mine", "content": "", "tags": ["private"]}, headers=auth_headers
    )

    assert (await async_client.get("/api/notes/", headers=other_auth_headers)).json() == []
    assert (await async_client.get("/api/notes/tags/", headers=other_auth_headers)).json() == []

    resp = await async_client.put(
        "/api/notes/n1", json={"title": "pwned", "content": "", "tags": []}, headers=other_auth_headers
    )
    assert resp.status_code == 200
    resp = await async_client.delete("/api/notes/n1", headers=other_auth_headers)
    assert resp.status_code == 204

    [note] = (await async_client.get("/api/notes/", headers=auth_headers)).json()
    assert note["title"] == "mine"
    assert note["tags"] == ["private"]


async def test_today_endpoint(async_client, auth_headers, test_session, test_user):
    yesterday = datetime.now(timezone.utc) - timedelta(days=2)
    test_session.add(
        Note(id="old", title="old", content="", user_email=test_user.email, created_at=yesterday, updated_at=yesterday)
    )
    await test_session.commit()
    await async_client.post("/api/notes/", json={"id": "new", "title": "new", "content": ""}, headers=auth_headers)

    resp = await async_client.get("/api/notes/today", headers=auth_headers)
    assert resp.status_code == 200
    notes = resp.json()
    assert [n["id"] for n in notes] == ["new"]
    assert notes[0]["synced"] is True

    # every note shows up in the full listing, newest first
    all_ids = [n["id"] for n in (await async_client.get("/api/notes/", headers=auth_headers)).json()]
    assert all_ids == ["new", "old"]


async def test_today_rejects_unknown_timezone(async_client, auth_headers):
    resp = await async_client.get("/api/notes/today", params={"tz": "Mars/Olympus_Mons"}, headers=auth_headers)
    assert resp.status_code == 422
    assert "Unknown timezone" in resp.json()["error"]


async def test_me_returns_identity(async_client, auth_headers, user_claims):
    resp = await async_client.get("/api/auth/me", headers=auth_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == user_claims["id"]
    assert body["email"] == user_claims["email"]
    assert body["provider"] == "google"


async def test_logout_revokes_token(async_client, auth_headers, fake_redis):
    resp = await async_client.post("/api/auth/logout", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["success"] is True
    assert len(fake_redis.revoked) == 1

    resp = await async_client.get("/api/notes/", headers=auth_headers)
    assert resp.status_code == 401
    assert resp.json() == UNAUTHORIZED


async def test_logout_without_redis_reports_failure(async_client, auth_headers):
    resp = await async_client.post("/api/auth/logout", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"success": False, "message": "Token revocation unavailable"}


async def test_health_reports_database_and_degraded_redis(async_client):
    resp = await async_client.get("/api/health/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["checks"]["database"]["connected"] is True
    assert body["checks"]["redis"]["connected"] is False
    assert body["status"] == "degraded"


async def test_root_endpoints(async_client):
    assert (await async_client.get("/")).json() == {"message": "NotePulse API"}
    assert (await async_client.get("/api/")).json()["endpoints"]["notes"] == "/api/notes/"


async def test_health_is_503_when_database_is_down(test_app, async_client):
    from notepulse.api.health import get_health_service
    from notepulse.core.services import HealthService

    class DatabaseDown(HealthService):
        async def check_database_health(self):
            return {"connected": False, "status": "unhealthy", "error": "down", "response_time_ms": 0.0}

    test_app.dependency_overrides[get_health_service] = lambda: DatabaseDown(session=None)

    resp = await async_client.get("/api/health/")
    assert resp.status_code == 503
    assert resp.json()["status"] == "unhealthy"

    resp = await async_client.get("/api/health/database")
    assert resp.status_code == 503

    # redis reachability alone never fails the endpoint
    resp = await async_client.get("/api/health/redis")
    assert resp.status_code == 200
