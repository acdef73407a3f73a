# tests/api/test_auth_api.py

from datetime import timedelta

from httpx import AsyncClient

from storefront.core import locales
from storefront.core.config import settings
from storefront.core.limiter import limiter
from storefront.core.security import create_session_token


async def test_register_returns_public_user(client: AsyncClient, db_session):
    response = await client.post(
        "/api/auth/register",
        json={"name": "  Carla Dias ", "email": "carla@example.com", "password": "pw-123456"},
    )

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["name"] == "Carla Dias"
    assert user["email"] == "carla@example.com"
    assert "password_hash" not in user
    # Registering does not log in
    assert "session_id" not in response.cookies


async def test_register_duplicate_email(client: AsyncClient, test_user):
    response = await client.post(
        "/api/auth/register",
        json={"name": "Someone Else", "email": test_user.email, "password": "another-pass"},
    )

    assert response.status_code == 409
    assert response.json()["detail"] == locales.ERROR_EMAIL_TAKEN


async def test_register_validates_payload(client: AsyncClient, db_session):
    response = await client.post("/api/auth/register", json={"name": "X", "email": "not-an-email", "password": "pw"})
    assert response.status_code == 422

    response = await client.post("/api/auth/register", json={"name": "   ", "email": "x@example.com", "password": "pw"})
    assert response.status_code == 422


async def test_login_sets_session_cookies(client: AsyncClient, test_user, test_password):
    response = await client.post("/api/auth/login", json={"email": test_user.email, "password": test_password})

    assert response.status_code == 200
    assert response.json()["user"]["id"] == test_user.id
    assert response.cookies["user_id"] == test_user.id
    assert response.cookies["session_id"]
    set_cookie = ",".join(response.headers.get_list("set-cookie")).lower()
    assert "httponly" in set_cookie
    assert "samesite=lax" in set_cookie


async def test_login_wrong_password(client: AsyncClient, test_user):
    response = await client.post("/api/auth/login", json={"email": test_user.email, "password": "wrong"})

    assert response.status_code == 401
    assert response.json()["detail"] == locales.ERROR_INVALID_CREDENTIALS
    assert "user_id" not in response.cookies


async def test_login_unknown_email_same_answer(client: AsyncClient, test_user):
    response = await client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "wrong"})

    assert response.status_code == 401
    assert response.json()["detail"] == locales.ERROR_INVALID_CREDENTIALS


async def test_me_and_status_when_logged_in(auth_client: AsyncClient, test_user):
    me = await auth_client.get("/api/auth/me")
    assert me.status_code == 200
    assert me.json()["user"] == {
        "id": test_user.id,
        "name": "Ana Souza",
        "email": "ana@example.com",
        "created_at": me.json()["user"]["created_at"],
    }

    status_response = await auth_client.get("/api/auth/status")
    assert status_response.json() == {"isAuthenticated": True}


async def test_anonymous_status_and_me(client: AsyncClient, db_session):
    assert (await client.get("/api/auth/status")).json() == {"isAuthenticated": False}

    me = await client.get("/api/auth/me")
    assert me.status_code == 401
    assert me.json()["detail"] == locales.ERROR_NOT_AUTHENTICATED


async def test_logout_clears_session(auth_client: AsyncClient):
    response = await auth_client.post("/api/auth/logout")
    assert response.status_code == 200
    assert response.json() == {"success": True}

    assert (await auth_client.get("/api/auth/me")).status_code == 401
    assert (await auth_client.get("/api/auth/status")).json() == {"isAuthenticated": False}


async def test_bare_user_id_cookie_is_not_a_session(client: AsyncClient, test_user):
    client.cookies.set("user_id", test_user.id)

    assert (await client.get("/api/auth/me")).status_code == 401


async def test_forged_session_token_rejected(client: AsyncClient, test_user):
    client.cookies.set("user_id", test_user.id)
    client.cookies.set("session_id", "not-a-token")

    assert (await client.get("/api/cart")).status_code == 401


async def test_token_for_another_user_rejected(client: AsyncClient, test_user, other_user):
    client.cookies.set("user_id", test_user.id)
    client.cookies.set("session_id", create_session_token(other_user.id))

    assert (await client.get("/api/auth/me")).status_code == 401


async def test_expired_token_rejected(client: AsyncClient, test_user):
    client.cookies.set("user_id", test_user.id)
    client.cookies.set("session_id", create_session_token(test_user.id, expires_delta=timedelta(seconds=-1)))

    assert (await client.get("/api/auth/me")).status_code == 401


async def test_token_for_deleted_user_rejected(client: AsyncClient, db_session):
    client.cookies.set("user_id", "ghost")
    client.cookies.set("session_id", create_session_token("ghost"))

    assert (await client.get("/api/auth/status")).json() == {"isAuthenticated": False}


async def test_login_is_rate_limited(client: AsyncClient, test_user, monkeypatch):
    monkeypatch.setattr(settings, "AUTH_RATE_LIMIT", "2/minute")
    limiter.enabled = True

    for _ in range(2):
        response = await client.post("/api/auth/login", json={"email": test_user.email, "password": "wrong"})
        assert response.status_code == 401

    response = await client.post("/api/auth/login", json={"email": test_user.email, "password": "wrong"})
    assert response.status_code == 429
