"""Pytest configuration and fixtures for the search server tests."""

import os
import tempfile

# Keep log files out of the working tree; must run before the app is imported.
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="search-echo-logs-"))

import pytest
from fastapi.testclient import TestClient

from app.main import app, create_app


@pytest.fixture
def client():
    """TestClient for the default application."""
    return TestClient(app)


@pytest.fixture
def fresh_app():
    """A separately built application, for tests that add routes."""
    return create_app()


@pytest.fixture
def post_search(client):
    """Submit the search form without following the redirect."""
    def _post(term=None):
        data = {} if term is None else {"term": term}
        return client.post("/search", data=data, follow_redirects=False)
    return _post
