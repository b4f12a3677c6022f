"""Service test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine
"""

from datetime import date, timedelta

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from course_catalog.db.base import Base
from course_catalog.infrastructure.database import get_db, DatabaseSessionManager
from course_catalog.models.course import Course as CourseModel
import course_catalog.infrastructure.database as db_module
from course_catalog.main import app

TOPICS = ("Math", "Programming", "History", "Art", "Biology")


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
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
async def seed_courses(test_db):
    """Insert 25 courses: titles "Course 00".."Course 24", cycling topics."""
    courses = [
        CourseModel(
            title=f"Course {i:02d}",
            topic=TOPICS[i % len(TOPICS)],
            release_date=date(2020, 1, 1) + timedelta(days=i * 13),
            author=f"Author {i % 7}",
        )
        for i in range(25)
    ]
    test_db.add_all(courses)
    await test_db.commit()
    for course in courses:
        await test_db.refresh(course)
    return courses


@pytest.fixture
async def seed_course(test_db):
    course = CourseModel(
        title="Intro to Statistics", topic="Math",
        release_date=date(2022, 2, 2), author="Florence Nightingale",
    )
    test_db.add(course)
    await test_db.commit()
    await test_db.refresh(course)
    return course
