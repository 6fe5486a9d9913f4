"""Confluence REST calls over httpx.

Each call opens a short-lived AsyncClient with basic auth (account email +
API token) and runs under a wall-clock budget: httpx timeouts apply per
phase and restart on every chunk read, so the whole call is additionally
wrapped in asyncio.timeout(). Upstream failures are not caught here:
non-2xx responses raise httpx.HTTPStatusError, transport failures raise
httpx.TransportError, and an exhausted budget raises TimeoutError, all left
to the handler for status mapping.
"""

import asyncio
import logging

import httpx

from qa_report.config import Settings
from qa_report.confluence.models import CreatedPage, CreatePagePayload, TemplatePage

logger = logging.getLogger(__name__)

_BASE_HEADERS = {
    "Accept": "application/json",
    "X-Atlassian-Token": "no-check",
}


def _build_client(settings: Settings, timeout: float) -> httpx.AsyncClient:
    """Create an authenticated client rooted at the REST API base URL."""
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        auth=httpx.BasicAuth(settings.confluence_email, settings.confluence_api_token),
        headers=_BASE_HEADERS,
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
    )


async def fetch_template_page(settings: Settings) -> TemplatePage:
    """Fetch the template page with its body in storage representation."""
    timeout_seconds = settings.fetch_timeout_seconds
    try:
        async with asyncio.timeout(timeout_seconds):
            async with _build_client(settings, timeout_seconds) as client:
                response = await client.get(
                    f"/content/{settings.template_page_id}",
                    params={"expand": "body.storage"},
                )
                response.raise_for_status()
    except TimeoutError:
        logger.warning("Template fetch exceeded %.1fs", timeout_seconds)
        raise

    page = TemplatePage.model_validate(response.json())
    logger.info("Fetched template page %s (%d chars)", page.id, len(page.storage_value))
    return page


async def create_page(settings: Settings, payload: CreatePagePayload) -> CreatedPage:
    """Create a page from ``payload`` and return the upstream page reference."""
    timeout_seconds = settings.create_timeout_seconds
    try:
        async with asyncio.timeout(timeout_seconds):
            async with _build_client(settings, timeout_seconds) as client:
                response = await client.post(
                    "/content",
                    json=payload.model_dump(),
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
    except TimeoutError:
        logger.warning("Page creation exceeded %.1fs: %s", timeout_seconds, payload.title)
        raise

    created = CreatedPage.model_validate(response.json())
    logger.info("Created Confluence page %s: %s", created.id, payload.title)
    return created
