from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from schoolboard.auth.models import User
from schoolboard.auth.schemas import TokenIdentity
from schoolboard.auth.security import create_access_token
from schoolboard.auth.services import create_user, validate_user
from schoolboard.core.exceptions import StorageError

from conftest import ADMIN_EMAIL, ADMIN_PASSWORD


@pytest.mark.asyncio
async def test_validate_user(db_session: AsyncSession, admin: User) -> None:
    assert (await validate_user(db_session, ADMIN_EMAIL, ADMIN_PASSWORD)).id == admin.id
    assert await validate_user(db_session, ADMIN_EMAIL, "wrong-password") is None
    assert await validate_user(db_session, "nobody@example.com", ADMIN_PASSWORD) is None

@pytest.mark.asyncio
async def test_validate_user_email_is_case_insensitive(db_session: AsyncSession, admin: User) -> None:
    assert (await validate_user(db_session, ADMIN_EMAIL.upper(), ADMIN_PASSWORD)).id == admin.id

@pytest.mark.asyncio
async def test_password_is_not_stored_in_plaintext(admin: User) -> None:
    assert admin.password_hash != ADMIN_PASSWORD
    assert admin.password_hash.startswith("$2")

@pytest.mark.asyncio
async def test_duplicate_email_is_rejected(db_session: AsyncSession, admin: User) -> None:
    with pytest.raises(StorageError):
        await create_user(db_session, ADMIN_EMAIL, "another-pass", "Second")

@pytest.mark.asyncio
async def test_login_success(client: AsyncClient, admin: User) -> None:
    response = await client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    data = response.json()

    assert data["token"]
    assert data["user"] == {"id": str(admin.id), "email": ADMIN_EMAIL, "name": "Ada Admin"}

    me = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {data['token']}"})
    assert me.status_code == 200
    assert me.json()["email"] == ADMIN_EMAIL

@pytest.mark.asyncio
async def test_login_wrong_password_and_unknown_email_look_the_same(client: AsyncClient, admin: User) -> None:
    wrong = await client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": "nope"})
    unknown = await client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "nope"})
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json()


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["admin@colegio.local", "admin@localhost", "admin@school.test"])
async def test_login_accepts_any_provisioned_address(client: AsyncClient, db_session: AsyncSession, email: str) -> None:
    await create_user(db_session, email, "pw-123456", "Admin")
    response = await client.post("/api/auth/login", json={"email": email, "password": "pw-123456"})
    assert response.status_code == 200
    assert response.json()["user"]["email"] == email


@pytest.mark.asyncio
async def test_login_with_non_address_is_invalid_credentials(client: AsyncClient, admin: User) -> None:
    response = await client.post("/api/auth/login", json={"email": "nobody", "password": "x"})
    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid credentials"}

@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{}, {"email": ADMIN_EMAIL}, {"password": "x"}, {"email": "", "password": "x"}])
async def test_login_missing_fields(client: AsyncClient, payload: dict) -> None:
    response = await client.post("/api/auth/login", json=payload)
    assert response.status_code == 400

@pytest.mark.asyncio
async def test_missing_authorization_header_is_401(client: AsyncClient) -> None:
    response = await client.get("/api/students")
    assert response.status_code == 401

@pytest.mark.asyncio
async def test_non_bearer_scheme_is_401(client: AsyncClient) -> None:
    response = await client.get("/api/students", headers={"Authorization": "Basic YWRtaW46cGFzcw=="})
    assert response.status_code == 401

@pytest.mark.asyncio
async def test_garbage_bearer_token_is_403(client: AsyncClient) -> None:
    response = await client.get("/api/students", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 403
    assert response.json() == {"detail": "Forbidden"}

@pytest.mark.asyncio
async def test_expired_token_is_403(client: AsyncClient, admin: User) -> None:
    token = create_access_token(TokenIdentity(id=admin.id, email=admin.email), expires_minutes=-5)
    response = await client.get("/api/students", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403
    assert response.json() == {"detail": "Forbidden"}

@pytest.mark.asyncio
async def test_token_for_unknown_user_is_403(client: AsyncClient) -> None:
    token = create_access_token(TokenIdentity(id=uuid4(), email="ghost@example.com"))
    response = await client.get("/api/students", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403

@pytest.mark.asyncio
async def test_valid_token_reaches_handler(client: AsyncClient, auth_headers: dict) -> None:
    response = await client.get("/api/students", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []

@pytest.mark.asyncio
async def test_health_needs_no_token(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.status_code == 200
