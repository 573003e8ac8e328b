"""Shared fixtures for API tests: an app on an in-memory database plus seeded identities."""

from __future__ import annotations

import itertools

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from liftcare.config import Settings
from liftcare.main import create_app
from liftcare.services.auth import AuthContext, create_user

TEST_SECRET = "integration-test-secret"

_emails = itertools.count(1)


@pytest_asyncio.fixture
async def app():
    settings = Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        jwt_secret=TEST_SECRET,
        log_level="WARNING",
    )
    application = create_app(settings)
    # ASGITransport does not run lifespan, so create tables here
    await application.state.db.create_all()
    yield application
    await application.state.db.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_headers(app):
    """Create an identity directly in the store and return a bearer header for it."""

    async def _make(role: str, customer_id: str | None = None, email: str | None = None,
                    name: str = "Test User") -> dict:
        async with app.state.db.session_factory() as db:
            user = await create_user(
                db, email or f"{role}{next(_emails)}@test.com", "password123", name, role, customer_id,
            )
        token = app.state.tokens.issue(AuthContext.from_user(user))
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest_asyncio.fixture
async def admin_headers(make_headers):
    return await make_headers("admin", email="admin@test.com", name="Admin")
