"""Auth endpoint tests: registration, activation, login, guards and logout."""

import asyncio

import pytest
from httpx import AsyncClient

from app.core.config import get_settings
from app.domain.exceptions import INVALID_CREDENTIALS_MESSAGE
from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories import (
    ActivationCodeRepository,
    UserRepository,
)
from tests.conftest import activate_account, login_headers
from tests.fakes import TEST_PASSWORD

EMAIL = "user@example.com"


def _wrong(code: str) -> str:
    return f"{(int(code) + 1) % 1_000_000:06d}"


async def test_register_returns_201_and_sends_code(client: AsyncClient, notifier) -> None:
    """POST /auth/register creates an unvalidated user and emails a six-digit code."""
    response = await client.post(
        "/api/v1/auth/register", json={"email": "New.User@Example.com", "password": TEST_PASSWORD}
    )
    assert response.status_code == 201
    assert response.json() == {"email": "new.user@example.com", "validated": False}
    code = notifier.last_code("new.user@example.com")
    assert len(code) == 6 and code.isdigit()


async def test_register_survives_notifier_crash(client: AsyncClient, notifier) -> None:
    """An unexpected notifier error still commits the user and the pending code."""
    notifier.error = RuntimeError("smtp down")
    response = await client.post(
        "/api/v1/auth/register", json={"email": EMAIL, "password": TEST_PASSWORD}
    )
    assert response.status_code == 201

    async with database.get_session_factory()() as session:
        user = await UserRepository(session).get_by_email(EMAIL)
        pending = await ActivationCodeRepository(session).get(EMAIL)
    assert user is not None and user.validated is False
    assert pending is not None and pending.attempts == 0


async def test_register_missing_body_returns_422(client: AsyncClient) -> None:
    response = await client.post("/api/v1/auth/register", json={})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_register_invalid_email_returns_422(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/register", json={"email": "not-an-email", "password": TEST_PASSWORD}
    )
    assert response.status_code == 422


async def test_register_empty_password_returns_400(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/register", json={"email": EMAIL, "password": ""}
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "password"}


async def test_register_duplicate_returns_409(client: AsyncClient) -> None:
    body = {"email": EMAIL, "password": TEST_PASSWORD}
    assert (await client.post("/api/v1/auth/register", json=body)).status_code == 201
    response = await client.post("/api/v1/auth/register", json=body)
    assert response.status_code == 409
    assert response.json()["error"] == "USER_ALREADY_EXISTS"


async def test_full_account_flow(client: AsyncClient, notifier) -> None:
    """Register, activate, log in, read /me, log out; the token is dead afterwards."""
    await activate_account(client, notifier, EMAIL)
    headers = await login_headers(client, EMAIL)

    me = await client.get("/api/v1/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["email"] == EMAIL
    assert me.json()["validated"] is True

    assert (await client.post("/api/v1/auth/logout", headers=headers)).status_code == 204
    response = await client.get("/api/v1/auth/me", headers=headers)
    assert response.status_code == 401


async def test_login_sets_httponly_session_cookie(client: AsyncClient, notifier) -> None:
    await activate_account(client, notifier, EMAIL)
    response = await client.post(
        "/api/v1/auth/login", json={"email": EMAIL, "password": TEST_PASSWORD}
    )
    assert response.status_code == 200
    cookie = response.headers["set-cookie"]
    assert cookie.startswith(f"{get_settings().session_cookie_name}=")
    assert "HttpOnly" in cookie
    assert "samesite=lax" in cookie.lower()
    assert response.json()["token_type"] == "bearer"


async def test_session_cookie_authenticates(client: AsyncClient, notifier) -> None:
    await activate_account(client, notifier, EMAIL)
    headers = await login_headers(client, EMAIL)
    token = headers["Authorization"].removeprefix("Bearer ")
    cookie = {"Cookie": f"{get_settings().session_cookie_name}={token}"}
    response = await client.get("/api/v1/auth/me", headers=cookie)
    assert response.status_code == 200


async def test_login_failures_share_one_response(client: AsyncClient, notifier) -> None:
    """Unknown email, wrong password and unvalidated account are indistinguishable."""
    await activate_account(client, notifier, EMAIL)
    await client.post(
        "/api/v1/auth/register", json={"email": "pending@example.com", "password": TEST_PASSWORD}
    )
    responses = [
        await client.post("/api/v1/auth/login", json={"email": email, "password": password})
        for email, password in [
            ("ghost@example.com", TEST_PASSWORD),
            (EMAIL, "wrong password"),
            ("pending@example.com", TEST_PASSWORD),
        ]
    ]
    assert {r.status_code for r in responses} == {401}
    bodies = [r.json() for r in responses]
    assert bodies[0] == bodies[1] == bodies[2]
    assert bodies[0]["message"] == INVALID_CREDENTIALS_MESSAGE


async def test_protected_route_without_session_returns_401(client: AsyncClient) -> None:
    response = await client.get("/api/v1/auth/me")
    assert response.status_code == 401
    assert response.json()["message"] == "Please log in to access this page."


async def test_protected_route_with_garbage_token_returns_401(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/auth/me", headers={"Authorization": "Bearer not.a.token"}
    )
    assert response.status_code == 401


@pytest.mark.parametrize(
    ("path", "body"),
    [
        ("/api/v1/auth/register", {"email": "other@example.com", "password": TEST_PASSWORD}),
        ("/api/v1/auth/login", {"email": EMAIL, "password": TEST_PASSWORD}),
        ("/api/v1/auth/activate", {"email": EMAIL, "code": "123456"}),
    ],
)
async def test_anonymous_routes_reject_logged_in_users(
    client: AsyncClient, auth_headers: dict[str, str], path: str, body: dict
) -> None:
    response = await client.post(path, json=body, headers=auth_headers)
    assert response.status_code == 403
    assert response.json()["error"] == "ALREADY_AUTHENTICATED"


async def test_activation_with_wrong_code_counts_attempts(client: AsyncClient, notifier) -> None:
    """Wrong codes are persisted; after five the correct code is refused with 429."""
    await client.post("/api/v1/auth/register", json={"email": EMAIL, "password": TEST_PASSWORD})
    code = notifier.last_code(EMAIL)

    for remaining in (4, 3, 2, 1, 0):
        response = await client.post(
            "/api/v1/auth/activate", json={"email": EMAIL, "code": _wrong(code)}
        )
        assert response.status_code == 400
        assert response.json()["details"] == {"attempts_remaining": remaining}

    response = await client.post("/api/v1/auth/activate", json={"email": EMAIL, "code": code})
    assert response.status_code == 429
    assert response.json()["error"] == "ACTIVATION_LOCKED"

    response = await client.post(
        "/api/v1/auth/login", json={"email": EMAIL, "password": TEST_PASSWORD}
    )
    assert response.status_code == 401


async def test_concurrent_wrong_codes_stop_at_max_attempts(
    client: AsyncClient, notifier
) -> None:
    """Parallel wrong codes never push the stored attempts counter past the maximum."""
    await client.post("/api/v1/auth/register", json={"email": EMAIL, "password": TEST_PASSWORD})
    wrong = _wrong(notifier.last_code(EMAIL))
    max_attempts = get_settings().activation_max_attempts

    responses = await asyncio.gather(
        *(
            client.post("/api/v1/auth/activate", json={"email": EMAIL, "code": wrong})
            for _ in range(9)
        )
    )
    statuses = sorted(r.status_code for r in responses)
    assert statuses == [400] * max_attempts + [429] * (9 - max_attempts)

    async with database.get_session_factory()() as session:
        pending = await ActivationCodeRepository(session).get(EMAIL)
    assert pending is not None and pending.attempts == max_attempts


async def test_resend_clears_lock(client: AsyncClient, notifier) -> None:
    await client.post("/api/v1/auth/register", json={"email": EMAIL, "password": TEST_PASSWORD})
    code = notifier.last_code(EMAIL)
    for _ in range(5):
        await client.post("/api/v1/auth/activate", json={"email": EMAIL, "code": _wrong(code)})

    response = await client.post("/api/v1/auth/activate/resend", json={"email": EMAIL})
    assert response.status_code == 202
    response = await client.post(
        "/api/v1/auth/activate", json={"email": EMAIL, "code": notifier.last_code(EMAIL)}
    )
    assert response.status_code == 200
    assert response.json() == {"status": "activated"}


async def test_expired_code_returns_400(client: AsyncClient, notifier, clock) -> None:
    await client.post("/api/v1/auth/register", json={"email": EMAIL, "password": TEST_PASSWORD})
    clock.advance(minutes=31)
    response = await client.post(
        "/api/v1/auth/activate", json={"email": EMAIL, "code": notifier.last_code(EMAIL)}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "ACTIVATION_CODE_EXPIRED"


async def test_activate_unknown_email_looks_like_no_code(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/activate", json={"email": "ghost@example.com", "code": "123456"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "NO_PENDING_ACTIVATION"


async def test_activate_rejects_malformed_code(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/activate", json={"email": EMAIL, "code": "12345a"}
    )
    assert response.status_code == 422


async def test_resend_for_unknown_email_returns_202(client: AsyncClient, notifier) -> None:
    response = await client.post(
        "/api/v1/auth/activate/resend", json={"email": "ghost@example.com"}
    )
    assert response.status_code == 202
    assert notifier.sent == []


async def test_resend_is_rate_limited(client: AsyncClient) -> None:
    statuses = [
        (await client.post("/api/v1/auth/activate/resend", json={"email": EMAIL})).status_code
        for _ in range(4)
    ]
    assert statuses == [202, 202, 202, 429]


async def test_delete_me_removes_account(client: AsyncClient, auth_headers) -> None:
    response = await client.delete("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 204
    assert (await client.get("/api/v1/auth/me", headers=auth_headers)).status_code == 401
    response = await client.post(
        "/api/v1/auth/login", json={"email": EMAIL, "password": TEST_PASSWORD}
    )
    assert response.status_code == 401
