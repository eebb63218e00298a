# -*- coding: utf-8 -*-
"""
Pytest configuration and fixtures.
"""
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from markclip.api import app
from markclip.config import settings


class AuthenticatedTestClient(TestClient):
    """Test client with API key authentication."""

    def __init__(self, *args, api_key: str = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.api_key = api_key

    def request(self, method, url, **kwargs):
        headers = kwargs.get("headers") or {}
        key = self.api_key or settings.API_KEY
        if key:
            headers["X-API-Key"] = key
        kwargs["headers"] = headers
        return super().request(method, url, **kwargs)


@pytest.fixture
def client():
    """FastAPI test client (API key sent when one is configured)."""
    return AuthenticatedTestClient(app, raise_server_exceptions=False)


@pytest.fixture
def unauthenticated_client():
    """FastAPI test client without authentication."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def api_key(monkeypatch):
    """Enable API key authentication for the duration of a test."""
    monkeypatch.setattr(settings, "API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def capture_time():
    """Fixed capture timestamp: Monday 2024-01-15 10:30:00 UTC."""
    return datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_article():
    """Sample metadata record."""
    return {
        "pageTitle": "Sample Article Title",
        "title": "Article Title",
        "byline": "John Doe",
        "keywords": ["javascript", "testing", "tutorial"],
        "baseURI": "https://example.com/path/article",
        "hostname": "example.com",
        "excerpt": "A short excerpt.",
        "content": "<p>Test content</p>",
    }
