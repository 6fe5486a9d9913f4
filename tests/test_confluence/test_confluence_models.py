"""Tests for Confluence request/response models."""

import pytest
from pydantic import ValidationError

from qa_report.confluence.models import CreatedPage, CreatePagePayload, TemplatePage


def test_template_page_exposes_storage_value():
    page = TemplatePage.model_validate(
        {
            "id": "1",
            "title": "Template",
            "body": {"storage": {"value": "<p>x</p>", "representation": "storage"}},
            "version": {"number": 7},
        }
    )
    assert page.storage_value == "<p>x</p>"


def test_created_page_reads_links_alias():
    created = CreatedPage.model_validate({"id": "99", "_links": {"webui": "/spaces/X/pages/99"}})
    assert created.links.webui == "/spaces/X/pages/99"


def test_created_page_requires_webui_link():
    with pytest.raises(ValidationError):
        CreatedPage.model_validate({"id": "99", "_links": {}})


def test_create_payload_build_shape():
    payload = CreatePagePayload.build("T", "SPACE", "42", "<p/>")
    assert payload.model_dump() == {
        "type": "page",
        "title": "T",
        "space": {"key": "SPACE"},
        "parent": {"id": "42"},
        "body": {"storage": {"value": "<p/>", "representation": "storage"}},
    }
