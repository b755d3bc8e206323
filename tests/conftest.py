"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - test_data_dir: Path to sample files directory
    - store: Fresh in-memory document store
    - app: Application bound to that store
    - async_client: HTTPX client for API testing
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from docpress.api.app import create_app
from docpress.store import DocumentStore

GOOGLE_DOCS_EXPORT = (
    "<html><head><meta content=\"text/html; charset=UTF-8\" http-equiv=\"content-type\">"
    "<style type=\"text/css\">.c1{color:#000000}.c2{font-weight:700}</style></head>"
    "<body class=\"c5 doc-content\">"
    "<p class=\"c4 title\" id=\"h.abc\"><span class=\"c2\">budget-guide-draft</span></p>"
    "<h1 class=\"c3\" id=\"h.def\"><span class=\"c2\">Budgeting &amp; You</span></h1>"
    "<p class=\"c1\"><span class=\"c0\">A budget is a plan for your money.</span></p>"
    "<p class=\"c1\"><span class=\"c0\">Track every expense for a month.</span></p>"
    "<hr style=\"page-break-before:always;display:none;\">"
    "<p class=\"c1\"><span class=\"c0\">SEO Title: Budgeting Basics</span></p>"
    "</body></html>"
)


@pytest.fixture
def test_data_dir() -> Path:
    """Return path to test data directory.

    Returns:
        Absolute path to tests/data/ directory.
    """
    return Path(__file__).parent / "data"


@pytest.fixture
def google_docs_export() -> str:
    """Google Docs HTML export with a title paragraph and trailing SEO notes."""
    return GOOGLE_DOCS_EXPORT


@pytest.fixture
def store() -> DocumentStore:
    return DocumentStore()


@pytest.fixture
def app(store: DocumentStore) -> FastAPI:
    """Create an application serving the test store."""
    return create_app(store)


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
