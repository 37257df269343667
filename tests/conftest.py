"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database session, blob store mock, acting users,
hierarchy builders
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from unittest.mock import MagicMock

import pytest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from coursehub.boundary.db.base import Base

    # Register every model with the metadata
    import coursehub.boundary.db.models  # noqa: F401

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def blob_store() -> MagicMock:
    """
    Create mock blob store.

    Returns:
        MagicMock: put() returns a StoredBlob with a fresh key, delete() succeeds
    """
    from coursehub.boundary.blob_store import StoredBlob

    def _put(data, metadata):
        key = f"documents/{uuid.uuid4()}/{metadata.get('filename', 'document')}"
        return StoredBlob(url=f"https://bucket.example/{key}", key=key)

    store = MagicMock()
    store.put = MagicMock(side_effect=_put)
    store.delete = MagicMock(return_value=None)
    return store


@pytest.fixture
def admin():
    """Acting user with the admin role."""
    from coursehub.core.authorization import ActingUser, Role

    return ActingUser(id=uuid.uuid4(), role=Role.ADMIN)


@pytest.fixture
def student():
    """Acting user with the plain user role."""
    from coursehub.core.authorization import ActingUser

    return ActingUser(id=uuid.uuid4())


@pytest.fixture
def other_student():
    """Second plain user, never the owner of anything created in a test."""
    from coursehub.core.authorization import ActingUser

    return ActingUser(id=uuid.uuid4())


@pytest.fixture
def repository(test_async_db):
    from coursehub.application.services import NodeRepository

    return NodeRepository(test_async_db)


@pytest.fixture
def make_course(repository, admin):
    """Factory creating a committed course owned by the admin fixture."""
    from coursehub.core.nodes import NodeKind

    async def _make(name: str = "Algorithms", **fields):
        return await repository.create(
            NodeKind.COURSE, {"name": name, "admin_id": admin.id, **fields}
        )

    return _make


@pytest.fixture
def make_folder(repository, student):
    """Factory creating a committed folder under a course or folder."""
    from coursehub.core.nodes import NodeKind

    async def _make(parent, name: str = "Week 1", uploader_id=None):
        key = "course_id" if parent.node_kind is NodeKind.COURSE else "parent_folder_id"
        return await repository.create(
            NodeKind.FOLDER,
            {"name": name, key: parent.id, "uploader_id": uploader_id or student.id},
        )

    return _make


@pytest.fixture
def make_file(repository, student):
    """Factory creating a committed file record under a course or folder."""
    from coursehub.core.nodes import NodeKind

    async def _make(parent, name: str = "notes.pdf", uploader_id=None, **fields):
        key = "course_id" if parent.node_kind is NodeKind.COURSE else "parent_folder_id"
        blob_key = f"documents/{uuid.uuid4()}/{name}"
        return await repository.create(
            NodeKind.FILE,
            {
                "name": name,
                key: parent.id,
                "uploader_id": uploader_id or student.id,
                "url": f"https://bucket.example/{blob_key}",
                "blob_key": blob_key,
                **fields,
            },
        )

    return _make
