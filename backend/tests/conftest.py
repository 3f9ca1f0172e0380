"""Root conftest: environment defaults plus async DB and HTTP client fixtures.

Invariants:
    - Environment is set before task_tracker.main is imported (settings are cached)
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test engine
    - db_manager patched so readiness checks hit the test engine
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DEBUG_ROUTES", "true")
os.environ.setdefault("DATABASE_AUTO_CREATE", "false")

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import task_tracker.infrastructure.database as db_module  # noqa: E402
from task_tracker.db.base import Base  # noqa: E402
from task_tracker.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, get_db,
)
from task_tracker.infrastructure.task_repository import (  # noqa: E402
    SqlAlchemyTaskRepository,
)
from task_tracker.main import app  # noqa: E402
from task_tracker.models.task import Task  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def repo(test_db):
    return SqlAlchemyTaskRepository(test_db)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def make_task(test_session_factory):
    """Insert a task directly, bypassing validation.

    created_at defaults to a fixed base time offset by `age_minutes` so
    ordering tests do not depend on clock resolution.
    """
    base = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    async def _make(
        title="Buy milk", color="BLUE", completed=False, age_minutes=0,
    ) -> Task:
        created = base - timedelta(minutes=age_minutes)
        task = Task(
            title=title, color=color, completed=completed,
            created_at=created, updated_at=created,
        )
        async with test_session_factory() as session:
            session.add(task)
            await session.commit()
            await session.refresh(task)
        return task

    return _make
