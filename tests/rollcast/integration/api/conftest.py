"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient

from rollcast.presentation.api.app import API_V1_PREFIX, create_app
from rollcast.presentation.api.dependencies import CurrentSession, get_document_store
from rollcast_config.settings import Settings, get_settings
from tests.shared.fixtures import InMemoryDocumentStore


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        debug=True,
        api_host="127.0.0.1",
        api_port=8000,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
def stores() -> dict[str, InMemoryDocumentStore]:
    """Document stores created by the app, keyed by session id."""
    return {}


@pytest.fixture
def test_client(api_settings, stores) -> TestClient:
    """Create a test client backed by in-memory document stores.

    The lifespan is not entered, so no database connection is opened.
    """
    app = create_app(settings=api_settings)

    def override_get_document_store(session: CurrentSession) -> InMemoryDocumentStore:
        return stores.setdefault(session.session_id, InMemoryDocumentStore())

    app.dependency_overrides[get_document_store] = override_get_document_store
    app.dependency_overrides[get_settings] = lambda: api_settings

    return TestClient(app)


@pytest.fixture
def statement_file():
    """Build the ``files`` argument for a statement upload."""

    def _build(content: str, filename: str = "statement.csv") -> dict:
        return {"file": (filename, content.encode("utf-8"), "text/csv")}

    return _build
