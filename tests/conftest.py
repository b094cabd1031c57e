"""Pytest configuration and fixtures for alumni_api.

HTTP tests run against alumni_api.main:app through httpx's ASGITransport on a
throwaway SQLite database (aiosqlite). The environment is set before any
alumni_api import so the cached settings and the engine pick it up.
"""

import os
from pathlib import Path

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_alumni.db"
os.environ["JWT_SECRET"] = "test-jwt-secret"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from alumni_api.core import hash_password, create_access_token, ROLE_ADMINISTRATOR, ROLE_ALUMNI
from alumni_api.db.models import User, Alumni
from alumni_api.db.session import Base, engine, async_session
from alumni_api.main import app

TEST_PASSWORD = "Password123"


@pytest.fixture
async def database():
    """Fresh schema per test; pooled connections are disposed on the test's own loop."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(database) -> AsyncSession:
    async with async_session() as session:
        yield session


@pytest.fixture
async def client(database) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_user(db_session: AsyncSession):
    """Factory fixture: insert a user plus alumni profile and commit."""

    async def _make(
        email: str,
        *,
        username: str | None = None,
        password: str = TEST_PASSWORD,
        is_admin: bool = False,
        blocked: bool = False,
        **profile,
    ) -> User:
        user = User(
            username=username or email.split("@")[0],
            email=email,
            hashed_password=hash_password(password),
            is_admin=is_admin,
            user_role=ROLE_ADMINISTRATOR if is_admin else ROLE_ALUMNI,
            account_blocked=blocked,
        )
        db_session.add(user)
        await db_session.flush()
        db_session.add(Alumni(user_id=user.id, email=email, **profile))
        await db_session.commit()
        return user

    return _make


@pytest.fixture
def auth_headers():
    def _headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(subject=user.id)}"}

    return _headers


@pytest.fixture
def history_file(tmp_path: Path) -> Path:
    return tmp_path / "search_history.json"
