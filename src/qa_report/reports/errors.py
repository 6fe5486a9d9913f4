"""Locally detected failures of a report request."""


class ReportRequestError(ValueError):
    """The caller's input is invalid (HTTP 400)."""


class ConfigurationError(RuntimeError):
    """Required server configuration is missing (HTTP 500)."""
