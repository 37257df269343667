"""
Router test fixtures.

Provides: TestClient with service dependencies replaced by AsyncMocks,
acting-user headers and ORM-shaped response objects
Dependencies: pytest, fastapi
System role: HTTP layer test infrastructure
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from coursehub.api.deps.dependencies import (
    get_favorites_index,
    get_hierarchy_service,
    get_review_service,
)
from coursehub.api.main import create_app
from coursehub.core.nodes import NodeKind


@pytest.fixture
def mock_hierarchy_service():
    return AsyncMock()


@pytest.fixture
def mock_review_service():
    return AsyncMock()


@pytest.fixture
def mock_favorites_index():
    return AsyncMock()


@pytest.fixture
def client(mock_hierarchy_service, mock_review_service, mock_favorites_index):
    app = create_app()
    app.dependency_overrides[get_hierarchy_service] = lambda: mock_hierarchy_service
    app.dependency_overrides[get_review_service] = lambda: mock_review_service
    app.dependency_overrides[get_favorites_index] = lambda: mock_favorites_index
    return TestClient(app)


@pytest.fixture
def user_id():
    return uuid4()


@pytest.fixture
def user_headers(user_id):
    return {"X-User-Id": str(user_id)}


@pytest.fixture
def admin_headers():
    return {"X-User-Id": str(uuid4()), "X-User-Role": "admin"}


def _now():
    return datetime.now(timezone.utc)


def course_record(**overrides):
    values = dict(
        id=uuid4(),
        name="Algorithms",
        description=None,
        is_featured=False,
        average_rating=0.0,
        folder_ids=[],
        file_ids=[],
        admin_id=uuid4(),
        created_at=_now(),
        updated_at=_now(),
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def folder_record(**overrides):
    values = dict(
        id=uuid4(),
        name="Week 1",
        parent_kind=NodeKind.COURSE,
        parent_id=uuid4(),
        subfolder_ids=[],
        file_ids=[],
        uploader_id=uuid4(),
        created_at=_now(),
        updated_at=_now(),
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def file_record(**overrides):
    values = dict(
        id=uuid4(),
        name="notes.pdf",
        url="https://bucket.example/documents/k/notes.pdf",
        parent_kind=NodeKind.FOLDER,
        parent_id=uuid4(),
        uploader_id=uuid4(),
        is_featured=False,
        average_rating=0.0,
        created_at=_now(),
        updated_at=_now(),
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def review_record(**overrides):
    values = dict(
        id=uuid4(),
        rating=4,
        comment=None,
        resource_kind=NodeKind.COURSE,
        resource_id=uuid4(),
        user_id=uuid4(),
        created_at=_now(),
    )
    values.update(overrides)
    return SimpleNamespace(**values)


@pytest.fixture
def records():
    """Factories for ORM-shaped objects the routers serialize."""
    return SimpleNamespace(
        course=course_record,
        folder=folder_record,
        file=file_record,
        review=review_record,
    )
