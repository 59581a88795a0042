"""
Integration test fixtures.

These tests require a running backend with MongoDB (and optionally
Elasticsearch). Mark with @pytest.mark.integration to skip in normal runs.
"""
import os

import pytest


@pytest.fixture
def live_backend_url():
    """Get base URL for live backend tests (if running)."""
    return os.getenv("BACKEND_URL", "http://localhost:8000")


@pytest.fixture
def test_timeout():
    """Timeout for network requests in integration tests."""
    return 30
