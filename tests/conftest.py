"""Pytest configuration and fixtures for firetrack.

Environment is set before app.* is imported so Settings validate. Each
test that needs a database gets a fresh SQLite file (aiosqlite) with the
schema created from the ORM metadata; it is installed as the process-wide
session factory so request dependencies and repositories use it.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789abcdef0123456789")
os.environ.setdefault("NOTIFIER_BACKEND", "log")
# Cheap argon2 parameters keep the suite fast; production defaults are far higher.
os.environ.setdefault("HASHER_MEMORY_COST", "1024")
os.environ.setdefault("HASHER_ITERATIONS", "1")
os.environ.setdefault("HASHER_PARALLELISM", "1")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession  # noqa: E402

from app.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from app.api.v1.dependencies import get_clock, get_notifier  # noqa: E402
from app.core.limiter import limiter  # noqa: E402
from app.infrastructure.persistence import database  # noqa: E402
from app.infrastructure.persistence import models  # noqa: E402,F401
from app.infrastructure.security import Argon2PasswordHasher  # noqa: E402
from app.main import app  # noqa: E402
from tests.fakes import TEST_PASSWORD, FrozenClock, RecordingNotifier  # noqa: E402


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def hasher() -> Argon2PasswordHasher:
    """Low-cost argon2id hasher for tests."""
    return Argon2PasswordHasher(memory_cost=1024, iterations=1, parallelism=1)


@pytest.fixture
async def db_engine(tmp_path) -> AsyncEngine:
    """Fresh SQLite database with all tables, installed as the app's engine."""
    engine = database.build_engine(f"sqlite+aiosqlite:///{tmp_path / 'firetrack.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)
    previous = (database.engine, database.AsyncSessionLocal)
    database.engine = engine
    database.AsyncSessionLocal = database.build_session_factory(engine)
    yield engine
    database.engine, database.AsyncSessionLocal = previous
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test."""
    async with database.build_session_factory(db_engine)() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(
    db_engine: AsyncEngine,
    notifier: RecordingNotifier,
    clock: FrozenClock,
) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with a recording notifier."""
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_clock] = lambda: clock
    limiter.reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def activate_account(
    client: AsyncClient, notifier: RecordingNotifier, email: str
) -> None:
    """Register email and submit the code it was sent."""
    response = await client.post(
        "/api/v1/auth/register", json={"email": email, "password": TEST_PASSWORD}
    )
    assert response.status_code == 201, response.text
    response = await client.post(
        "/api/v1/auth/activate",
        json={"email": email, "code": notifier.last_code(email)},
    )
    assert response.status_code == 200, response.text


async def login_headers(client: AsyncClient, email: str) -> dict[str, str]:
    """Log in and return a Bearer header; the cookie jar is cleared so later calls are explicit."""
    response = await client.post(
        "/api/v1/auth/login", json={"email": email, "password": TEST_PASSWORD}
    )
    assert response.status_code == 200, response.text
    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
async def auth_headers(client: AsyncClient, notifier: RecordingNotifier) -> dict[str, str]:
    """Bearer header for an activated, logged-in user (user@example.com)."""
    await activate_account(client, notifier, "user@example.com")
    return await login_headers(client, "user@example.com")
