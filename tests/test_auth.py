# tests/test_auth.py
import pytest
from httpx import AsyncClient

from portfolio.core.config import settings
from portfolio.core.security import create_session_token, get_session_user_id


@pytest.mark.asyncio
class TestAuthentication:
    """Test authentication endpoints"""

    async def test_login_success(self, test_client: AsyncClient, test_user):
        """Test successful login with valid credentials"""
        response = await test_client.post(
            "/api/v1/auth/login",
            json={
                "email": test_user["email"],
                "password": test_user["password"]
            }
        )

        assert response.status_code == 200
        body = response.json()
        assert body["status"] is True
        assert body["message"] == "Login successful"
        assert body["data"]["email"] == test_user["email"]
        assert "password" not in body["data"]
        assert "password_hash" not in body["data"]

        # Session cookie carries the user id
        token = response.cookies[settings.SESSION_COOKIE_NAME]
        assert get_session_user_id(token) == test_user["id"]

    async def test_login_cookie_attributes(self, test_client: AsyncClient, test_user):
        """Session cookie is HttpOnly, SameSite=lax and lasts 7 days"""
        response = await test_client.post(
            "/api/v1/auth/login",
            json={"email": test_user["email"], "password": test_user["password"]}
        )

        set_cookie = response.headers["set-cookie"].lower()
        assert "httponly" in set_cookie
        assert "samesite=lax" in set_cookie
        assert f"max-age={7 * 24 * 3600}" in set_cookie
        assert "path=/" in set_cookie

    async def test_login_invalid_email(self, test_client: AsyncClient):
        """Test login with non-existent email"""
        response = await test_client.post(
            "/api/v1/auth/login",
            json={
                "email": "nonexistent@example.com",
                "password": "SomePassword123!"
            }
        )

        assert response.status_code == 401
        assert response.json() == {"status": False, "message": "invalid email or password"}

    async def test_login_invalid_password(self, test_client: AsyncClient, test_user):
        """Wrong password gets the same answer as an unknown email"""
        response = await test_client.post(
            "/api/v1/auth/login",
            json={
                "email": test_user["email"],
                "password": "WrongPassword123!"
            }
        )

        assert response.status_code == 401
        assert response.json()["message"] == "invalid email or password"
        assert settings.SESSION_COOKIE_NAME not in response.cookies

    async def test_login_missing_fields(self, test_client: AsyncClient):
        response = await test_client.post("/api/v1/auth/login", json={"email": "a@b.com"})

        assert response.status_code == 400
        assert response.json()["message"] == "password is required"

    async def test_me_requires_session(self, test_client: AsyncClient):
        response = await test_client.get("/api/v1/auth/me")

        assert response.status_code == 401
        assert response.json() == {"status": False, "message": "unauthorized"}

    async def test_me_with_session(self, authenticated_client: AsyncClient, test_user):
        response = await authenticated_client.get("/api/v1/auth/me")

        assert response.status_code == 200
        assert response.json()["data"]["id"] == test_user["id"]

    async def test_tampered_cookie_rejected(self, test_client: AsyncClient, test_user):
        test_client.cookies.set(settings.SESSION_COOKIE_NAME, "not-a-token")

        response = await test_client.get("/api/v1/auth/me")

        assert response.status_code == 401

    async def test_session_for_deleted_user_rejected(self, test_client: AsyncClient, test_db):
        """A valid token whose user no longer exists is not a session"""
        test_client.cookies.set(settings.SESSION_COOKIE_NAME, create_session_token(999))

        response = await test_client.get("/api/v1/auth/me")

        assert response.status_code == 401

    async def test_logout_clears_cookie(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post("/api/v1/auth/logout")

        assert response.status_code == 200
        assert response.json()["message"] == "Logout successful"
        set_cookie = response.headers["set-cookie"].lower()
        assert set_cookie.startswith(f"{settings.SESSION_COOKIE_NAME}=")
        assert "max-age=0" in set_cookie


@pytest.mark.asyncio
class TestRegistration:
    """Only signed-in admins can create further admins"""

    async def test_register_requires_session(self, test_client: AsyncClient):
        response = await test_client.post(
            "/api/v1/auth/register",
            json={"email": "second@example.com", "password": "secret1", "name": "Second"}
        )

        assert response.status_code == 401

    async def test_register_success(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/auth/register",
            json={"email": "second@example.com", "password": "secret1", "name": "Second"}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User registered successfully"
        assert body["data"]["email"] == "second@example.com"
        assert body["data"]["role"] == "admin"

    async def test_register_duplicate(self, authenticated_client: AsyncClient, test_user):
        response = await authenticated_client.post(
            "/api/v1/auth/register",
            json={"email": test_user["email"], "password": "secret1", "name": "Dup"}
        )

        assert response.status_code == 409
        assert response.json()["message"] == "email already registered"

    async def test_register_short_password(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post(
            "/api/v1/auth/register",
            json={"email": "x@example.com", "password": "123", "name": "X"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "password must be at least 6 characters"
        assert body["errors"] == {"field": "password"}


@pytest.mark.asyncio
class TestLoginPage:
    """HTML login flow"""

    async def test_login_page_renders(self, test_client: AsyncClient):
        response = await test_client.get("/login")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]

    async def test_form_login_redirects_to_dashboard(self, test_client: AsyncClient, test_user):
        response = await test_client.post(
            "/login",
            data={"email": test_user["email"], "password": test_user["password"]}
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/admin/dashboard"
        assert settings.SESSION_COOKIE_NAME in response.cookies

    async def test_form_login_failure_rerenders(self, test_client: AsyncClient, test_user):
        response = await test_client.post(
            "/login",
            data={"email": test_user["email"], "password": "wrong"}
        )

        assert response.status_code == 401
        assert "invalid email or password" in response.text

    async def test_login_page_redirects_when_signed_in(self, authenticated_client: AsyncClient):
        response = await authenticated_client.get("/login")

        assert response.status_code == 303
        assert response.headers["location"] == "/admin/dashboard"

    async def test_form_logout(self, authenticated_client: AsyncClient):
        response = await authenticated_client.post("/logout")

        assert response.status_code == 303
        assert response.headers["location"] == "/login"
