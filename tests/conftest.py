"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across the API tests:
- Test client (FastAPI TestClient)
- Sample markup
"""

import pytest

from fastapi.testclient import TestClient

from app.main import app


# ---------------------------------------------------------------------------
# CLIENT FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def client() -> TestClient:
    """FastAPI test client. The checker holds no state between requests."""
    return TestClient(app)


# ---------------------------------------------------------------------------
# SAMPLE DATA
# ---------------------------------------------------------------------------

@pytest.fixture
def broken_page() -> str:
    """Page with a missing lang, a missing alt and an ambiguous link."""
    return (
        "<html>\n"
        "<body>\n"
        "<h1>Docs</h1>\n"
        '<img src="logo.png">\n'
        '<a href="/docs">click here</a>\n'
        "</body>\n"
        "</html>"
    )
