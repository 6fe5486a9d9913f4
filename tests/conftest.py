"""Shared test fixtures."""

from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from qa_report.app import app
from qa_report.config import Settings

TEST_BASE_URL = "https://example.atlassian.net/wiki"
TEST_API_URL = f"{TEST_BASE_URL}/rest/api"


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def settings() -> Settings:
    """Settings with credentials and a predictable Confluence target."""
    return Settings(
        confluence_email="qa-bot@example.com",
        confluence_api_token="token-123",
        confluence_base_url=TEST_BASE_URL,
        template_page_id="42008650",
        parent_page_id="29698636",
        space_key="NFTMetaverse",
        placeholder_token="ovdr-6116",
    )


def make_response(status_code: int, method: str, path: str, **kwargs) -> httpx.Response:
    """Build a real httpx.Response bound to a request (so raise_for_status works)."""
    request = httpx.Request(method, f"{TEST_API_URL}{path}")
    return httpx.Response(status_code, request=request, **kwargs)


def template_response(value: str, page_id: str = "42008650") -> httpx.Response:
    """GET /content/{id} response carrying ``value`` as the storage body."""
    return make_response(
        200,
        "GET",
        f"/content/{page_id}",
        json={
            "id": page_id,
            "type": "page",
            "title": "QA Report Template",
            "body": {"storage": {"value": value, "representation": "storage"}},
        },
    )


def created_response(page_id: str = "99", webui: str = "/spaces/X/pages/99") -> httpx.Response:
    """POST /content response for a freshly created page."""
    return make_response(
        200,
        "POST",
        "/content",
        json={
            "id": page_id,
            "type": "page",
            "title": "created",
            "_links": {"webui": webui, "base": TEST_BASE_URL},
        },
    )


def mock_async_client(get=None, post=None):
    """Build a mocked httpx.AsyncClient context manager.

    ``get`` / ``post`` are either an httpx.Response (returned) or an
    exception instance (raised).
    """
    client = AsyncMock()
    for name, outcome in (("get", get), ("post", post)):
        method = getattr(client, name)
        if isinstance(outcome, Exception):
            method.side_effect = outcome
        elif outcome is not None:
            method.return_value = outcome

    ctx = AsyncMock()
    ctx.__aenter__ = AsyncMock(return_value=client)
    ctx.__aexit__ = AsyncMock(return_value=False)
    return ctx, client
