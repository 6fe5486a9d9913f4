"""Confluence access: template retrieval and page creation."""

from qa_report.confluence.client import create_page, fetch_template_page
from qa_report.confluence.models import CreatedPage, CreatePagePayload, TemplatePage

__all__ = [
    "create_page",
    "CreatedPage",
    "CreatePagePayload",
    "fetch_template_page",
    "TemplatePage",
]
