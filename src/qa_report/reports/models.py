"""Request and result models for QA report creation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from qa_report.reports.errors import ReportRequestError

VERSION_REQUIRED_MESSAGE = "AffectedVersion is required"
TITLE_TYPE_MESSAGE = "pageTitle must be a string"


class ReportRequest(BaseModel):
    """Validated caller input."""

    model_config = ConfigDict(populate_by_name=True)

    affected_version: str = Field(alias="affectedVersion")
    page_title: str | None = Field(default=None, alias="pageTitle")

    @property
    def title(self) -> str:
        """Caller-supplied title, or "<version> Report"."""
        return self.page_title or f"{self.affected_version} Report"


class ReportResult(BaseModel):
    """Returned after the report page has been created."""

    page_id: str
    page_url: str
    page_title: str

    def to_response(self) -> dict[str, Any]:
        """Success body in the shape the front end expects."""
        return {
            "success": True,
            "pageUrl": self.page_url,
            "pageTitle": self.page_title,
            "pageId": self.page_id,
        }


def parse_report_request(data: Any) -> ReportRequest:
    """Validate a decoded JSON body into a ReportRequest.

    A body that is not a JSON object, or whose affectedVersion is absent,
    null, non-string, or empty, raises ReportRequestError. An empty pageTitle
    counts as omitted.
    """
    if not isinstance(data, dict):
        raise ReportRequestError(VERSION_REQUIRED_MESSAGE)

    version = data.get("affectedVersion")
    if not isinstance(version, str) or not version:
        raise ReportRequestError(VERSION_REQUIRED_MESSAGE)

    title = data.get("pageTitle")
    if title is not None and not isinstance(title, str):
        raise ReportRequestError(TITLE_TYPE_MESSAGE)

    return ReportRequest(affected_version=version, page_title=title or None)
