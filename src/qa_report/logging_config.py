"""Structured JSON logging configuration for serverless and container hosts.

Configures Python stdlib logging to emit JSON on stdout. Log collectors pick
up `severity`, `message`, and the other fields without extra parsing.

Usage:
    from qa_report.logging_config import configure_logging
    configure_logging()
"""

import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "qa-report",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str | None = None) -> None:
    """Apply structured JSON logging configuration.

    Call once per process (FastAPI lifespan or first serverless invocation).
    ``level`` overrides the root level, typically from ``Settings.log_level``;
    unknown level names fall back to INFO.
    """
    config = {**LOGGING_CONFIG, "root": dict(LOGGING_CONFIG["root"])}
    if level:
        name = level.upper()
        config["root"]["level"] = name if isinstance(logging.getLevelName(name), int) else "INFO"
    logging.config.dictConfig(config)
