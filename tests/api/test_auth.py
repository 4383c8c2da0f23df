"""API tests for sign-in, registration and the current user."""

from httpx import AsyncClient


async def test_login_returns_token_and_user(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/login", json={"email": "admin@example.com", "password": "admin-pass"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["token"] == "token-admin"
    assert data["token_type"] == "bearer"
    assert data["user"]["role"] == "admin"
    assert data["user"]["can_share_with_departments"] is True


async def test_login_rejection_passes_backend_message(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/login", json={"email": "admin@example.com", "password": "nope"}
    )
    assert response.status_code == 401
    data = response.json()
    assert data["message"] == "Invalid credentials"
    assert data["notification"] == {"level": "error", "message": "Invalid credentials"}


async def test_login_invalid_email_is_422(client: AsyncClient) -> None:
    response = await client.post("/api/v1/auth/login", json={"email": "nope", "password": "x"})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_register_creates_user(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/register",
        json={
            "name": "Carol",
            "email": "carol@example.com",
            "password": "carol-pass",
            "department": "engineering",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["user"]["email"] == "carol@example.com"
    assert data["user"]["role"] == "employee"


async def test_register_duplicate_email(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/register",
        json={
            "name": "Ada",
            "email": "admin@example.com",
            "password": "x",
            "department": "engineering",
        },
    )
    assert response.status_code == 400
    assert response.json()["message"] == "User already exists"


async def test_me_requires_bearer(client: AsyncClient) -> None:
    response = await client.get("/api/v1/auth/me")
    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"


async def test_me_with_unknown_token(client: AsyncClient) -> None:
    response = await client.get("/api/v1/auth/me", headers={"Authorization": "Bearer stale"})
    assert response.status_code == 401
    assert response.json()["message"] == "Please authenticate"


async def test_me(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == "u-admin"
