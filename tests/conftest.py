"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def db_session():
    """Fresh schema per test on the shared in-memory engine."""
    from test_fixtures import TestingSessionLocal, reset_database

    reset_database()
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def api_client(db_session):
    """TestClient whose routes use the in-memory database."""
    from test_fixtures import client, override_get_db
    from domain.models import get_db_session
    from main import app

    app.dependency_overrides[get_db_session] = override_get_db
    try:
        yield client
    finally:
        app.dependency_overrides.pop(get_db_session, None)
