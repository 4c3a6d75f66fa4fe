"""Pytest fixtures: a throwaway SQLite database per test, seeded on demand."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from src.common.database.database import get_db_session, get_session_factory
from src.main import app
from src.models.models import Base
from src.seed.seed import seed_course_content


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'course_search.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def course_id(session_factory) -> int:
    """Id of the fully seeded demo course."""
    async with session_factory() as session:
        async with session.begin():
            course = await seed_course_content(session)
            return course.id


@pytest.fixture
async def client(session_factory) -> AsyncClient:
    """Async HTTP client against the app, wired to the test database."""
    async def override_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
