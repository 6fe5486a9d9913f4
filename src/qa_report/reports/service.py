"""QA report creation pipeline.

Fetches the template page, swaps the placeholder token for the requested
version, and creates the report page under the configured parent. Upstream
errors propagate to the caller (the handler maps them to HTTP responses).
"""

import logging

from qa_report.config import Settings
from qa_report.confluence.client import create_page, fetch_template_page
from qa_report.confluence.models import CreatePagePayload
from qa_report.reports.models import ReportRequest, ReportResult
from qa_report.reports.template import count_placeholders, substitute_version

logger = logging.getLogger(__name__)


async def create_qa_report(request: ReportRequest, settings: Settings) -> ReportResult:
    """Create one QA report page for ``request.affected_version``.

    1. Fetch the template page (storage representation)
    2. Replace the placeholder token in the body
    3. Create the page in the target space under the parent page
    4. Return ReportResult with the browser URL of the new page
    """
    # 1. Template
    template = await fetch_template_page(settings)

    # 2. Substitution
    occurrences = count_placeholders(template.storage_value, settings.placeholder_token)
    if occurrences == 0:
        logger.warning(
            "Placeholder %s not found in template page %s",
            settings.placeholder_token,
            template.id,
        )
    body = substitute_version(
        template.storage_value, settings.placeholder_token, request.affected_version
    )
    logger.info(
        "Query updated: %s -> %s (%d occurrence(s))",
        settings.placeholder_token,
        request.affected_version,
        occurrences,
    )

    # 3. Page creation
    title = request.title
    logger.info("Creating page: %s", title)
    payload = CreatePagePayload.build(
        title=title,
        space_key=settings.space_key,
        parent_id=settings.parent_page_id,
        storage_value=body,
    )
    created = await create_page(settings, payload)

    # 4. Result
    page_url = settings.confluence_base_url.rstrip("/") + created.links.webui
    logger.info("Page created successfully: %s", page_url)
    return ReportResult(page_id=created.id, page_url=page_url, page_title=title)
