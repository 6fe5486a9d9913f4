"""FastAPI application exposing the QA report handler over HTTP."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response

from qa_report.config import get_settings
from qa_report.handler import handle_event
from qa_report.logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and load config on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield


app = FastAPI(
    title="QA Report Creator",
    lifespan=lifespan,
)


@app.get("/health")
async def health():
    """Health check endpoint for the hosting platform and local development."""
    return {
        "status": "ok",
        "service": "qa-report",
        "version": "0.1.0",
    }


@app.api_route(
    "/create-qa-report",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
)
async def create_qa_report_endpoint(request: Request) -> Response:
    """Adapt the HTTP request to a handler event and relay the handler's response."""
    body = await request.body()
    event = {
        "httpMethod": request.method,
        "body": body or None,
        "isBase64Encoded": False,
    }
    result = await handle_event(event)
    return Response(
        content=result["body"],
        status_code=result["statusCode"],
        headers=result["headers"],
    )
