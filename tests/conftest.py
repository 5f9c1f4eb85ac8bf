# tests/conftest.py
import os
import tempfile

# Settings are read at import time, so point them at throwaway locations first
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ.setdefault("PUBLIC_DIR", tempfile.mkdtemp(prefix="portfolio-public-"))

import pytest
from typing import AsyncGenerator, Dict, Any
from httpx import ASGITransport, AsyncClient

from portfolio.core.config import settings
from portfolio.core.security import hash_password
from portfolio.db.database import Database, create_engine_from_url, get_database
from portfolio.db.schema import create_schema
from portfolio.main import app
from portfolio.repositories import UserRepository
from portfolio.services import LocalStorageService, get_local_storage_service


@pytest.fixture
async def test_db(tmp_path) -> AsyncGenerator[Database, None]:
    """Fresh SQLite database with the full schema"""
    db = Database(create_engine_from_url(f"sqlite+aiosqlite:///{tmp_path / 'portfolio.db'}"))
    await create_schema(db)

    yield db

    await db.close()


@pytest.fixture
def storage(tmp_path) -> LocalStorageService:
    """Upload storage rooted in a temporary public directory"""
    return LocalStorageService(public_dir=str(tmp_path / "public"))


@pytest.fixture
async def test_client(test_db, storage) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP test client with database override"""

    app.dependency_overrides[get_database] = lambda: test_db
    app.dependency_overrides[get_local_storage_service] = lambda: storage

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    # Clear overrides
    app.dependency_overrides.clear()


@pytest.fixture
def sample_user():
    """Sample admin credentials for testing"""
    return {
        "email": "admin@example.com",
        "password": "SecurePassword123!",
        "name": "Test Admin"
    }


@pytest.fixture
async def test_user(test_db, sample_user) -> Dict[str, Any]:
    """Create an admin user in the database and return its data with the plain password"""
    user = await UserRepository(test_db).create(
        email=sample_user["email"],
        password_hash=hash_password(sample_user["password"]),
        name=sample_user["name"],
    )

    return {
        "id": user.id,
        "email": sample_user["email"],
        "password": sample_user["password"],
        "user_object": user
    }


@pytest.fixture
async def authenticated_client(test_client: AsyncClient, test_user: Dict[str, Any]) -> AsyncClient:
    """Test client carrying a valid session cookie"""
    response = await test_client.post(
        "/api/v1/auth/login",
        json={
            "email": test_user["email"],
            "password": test_user["password"]
        }
    )

    assert response.status_code == 200
    token = response.cookies[settings.SESSION_COOKIE_NAME]

    test_client.cookies.clear()
    test_client.cookies.set(settings.SESSION_COOKIE_NAME, token)

    return test_client


@pytest.fixture
def profile_payload():
    return {
        "name": "John Doe",
        "title": "Backend Engineer",
        "description": "Builds web services.",
        "email": "john@example.com",
        "github_url": "https://github.com/johndoe"
    }
