"""Serverless HTTP handler that creates a QA report page in Confluence.

Accepts a proxy-style event ({"httpMethod", "body", "isBase64Encoded"}) and
returns {"statusCode", "headers", "body"}. Every response carries the CORS
headers, and every failure is converted into a JSON error body.
"""

import asyncio
import base64
import json
import logging
from typing import Any

import httpx

from qa_report.config import get_settings
from qa_report.logging_config import configure_logging
from qa_report.reports.errors import ConfigurationError, ReportRequestError
from qa_report.reports.models import parse_report_request
from qa_report.reports.service import create_qa_report

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"
CONFIGURATION_ERROR_MESSAGE = "Server configuration error"
NETWORK_ERROR_MESSAGE = "Network error - unable to connect to Confluence"
GENERIC_ERROR_MESSAGE = "Failed to create QA Report"

_logging_configured = False


def _response(status: int, body: dict[str, Any] | None = None) -> dict[str, Any]:
    headers = dict(CORS_HEADERS)
    if body is None:
        return {"statusCode": status, "headers": headers, "body": ""}
    headers["Content-Type"] = "application/json"
    return {
        "statusCode": status,
        "headers": headers,
        "body": json.dumps(body, ensure_ascii=False),
    }


def _decode_body(event: dict[str, Any]) -> Any:
    """Decode the event body as JSON.

    Base64-encoded bodies are decoded first. A missing or malformed body
    raises (TypeError / json.JSONDecodeError) and ends up as a generic 500.
    """
    body = event.get("body")
    if event.get("isBase64Encoded") and body is not None:
        body = base64.b64decode(body)
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8")
    return json.loads(body)


def _upstream_payload(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _error_response(exc: Exception) -> dict[str, Any]:
    """Map an exception raised while handling a POST to an HTTP response."""
    if isinstance(exc, ReportRequestError):
        logger.info("Rejected request: %s", exc)
        return _response(400, {"error": str(exc)})

    if isinstance(exc, ConfigurationError):
        logger.error("Configuration error: %s", exc)
        return _response(500, {"error": CONFIGURATION_ERROR_MESSAGE})

    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        payload = _upstream_payload(response)
        message = None
        if isinstance(payload, dict):
            message = payload.get("message")
        if not message:
            message = f"HTTP {response.status_code}: {response.reason_phrase}"
        logger.error(
            "Confluence API error %d for %s: %s",
            response.status_code,
            exc.request.url,
            payload if payload is not None else response.text,
        )
        return _response(
            response.status_code,
            {
                "error": message,
                "details": payload if payload is not None else response.text,
            },
        )

    if isinstance(exc, TimeoutError):
        logger.error("Confluence call exceeded its time budget")
        return _response(
            500, {"error": NETWORK_ERROR_MESSAGE, "details": str(exc) or "Request timed out"}
        )

    if isinstance(exc, httpx.TransportError):
        logger.error("Network error: %s", exc)
        return _response(500, {"error": NETWORK_ERROR_MESSAGE, "details": str(exc)})

    logger.exception("Error creating QA Report")
    return _response(500, {"error": str(exc) or GENERIC_ERROR_MESSAGE, "details": str(exc)})


async def handle_event(event: dict[str, Any]) -> dict[str, Any]:
    """Handle one report-creation request.

    - OPTIONS: CORS preflight, 200 with empty body
    - anything but POST: 405
    - POST: validate, check credentials, run the report pipeline
    """
    method = (event.get("httpMethod") or "").upper()
    logger.info("Function called with: %s", method)

    if method == "OPTIONS":
        return _response(200)

    if method != "POST":
        return _response(405, {"error": METHOD_NOT_ALLOWED_MESSAGE})

    try:
        request = parse_report_request(_decode_body(event))
        logger.info(
            "Request data: affectedVersion=%s pageTitle=%s",
            request.affected_version,
            request.page_title,
        )

        settings = get_settings()
        if not settings.has_credentials:
            raise ConfigurationError("CONFLUENCE_EMAIL or CONFLUENCE_API_TOKEN is not set")

        result = await create_qa_report(request, settings)
    except Exception as exc:
        return _error_response(exc)

    return _response(200, result.to_response())


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Synchronous serverless entry point (Lambda / Netlify style)."""
    global _logging_configured
    if not _logging_configured:
        configure_logging(get_settings().log_level)
        _logging_configured = True

    request_id = getattr(context, "aws_request_id", None)
    if request_id:
        logger.info("Invocation %s", request_id)
    return asyncio.run(handle_event(event))
