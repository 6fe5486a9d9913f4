"""QA report creation: input validation, template substitution, pipeline."""

from qa_report.reports.errors import ConfigurationError, ReportRequestError
from qa_report.reports.models import ReportRequest, ReportResult, parse_report_request
from qa_report.reports.service import create_qa_report
from qa_report.reports.template import count_placeholders, substitute_version

__all__ = [
    "ConfigurationError",
    "count_placeholders",
    "create_qa_report",
    "parse_report_request",
    "ReportRequest",
    "ReportRequestError",
    "ReportResult",
    "substitute_version",
]
