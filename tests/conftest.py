# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read at import time, so the environment must be in place
# before anything under app/ is imported
os.environ.update(
    {
        "ENVIRONMENT": "test",
        "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
        "SECRET_KEY": "test-secret-key-with-enough-length-for-hs256",
        "PASSWORD_SECURITY_LEVEL": "low",
        "LOG_TO_FILE": "false",
    },
)

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402

import app.models  # noqa: E402, F401
from app.db import build_engine, create_session_maker, get_session  # noqa: E402
from app.main import app  # noqa: E402
from app.managers.rate_limiter import limiter  # noqa: E402
from app.models import UserDB  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory database with all tables, one per test."""
    test_engine = build_engine(TEST_DATABASE_URL)
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Session bound to the test database."""
    async with create_session_maker(engine)() as db_session:
        yield db_session


@pytest.fixture
def make_user(session: AsyncSession) -> Callable[..., Awaitable[UserDB]]:
    """Insert users directly, bypassing password hashing."""

    async def factory(
        email: str = "ada@example.com",
        first_name: str = "Ada",
        last_name: str = "Lovelace",
    ) -> UserDB:
        user = UserDB(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash="$argon2id$v=19$m=8192,t=1,p=1$notarealsalt$notarealhash",
        )
        session.add(user)
        await session.flush()
        return user

    return factory


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client backed by the test database."""
    session_maker = create_session_maker(engine)

    async def override_get_session() -> AsyncGenerator[AsyncSession]:
        async with session_maker() as db_session:
            try:
                yield db_session
                await db_session.commit()
            except Exception:
                await db_session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    limiter.enabled = False
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    limiter.enabled = True
    app.dependency_overrides.clear()
