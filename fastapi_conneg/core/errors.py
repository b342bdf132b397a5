"""Exceptions and error documents."""

from typing import Any


class ContentNegotiationError(Exception):
    """Base class for content negotiation errors."""


class ConfigurationError(ContentNegotiationError):
    """Raised when negotiation is set up without usable content types."""


def error_document(status: int, title: str, detail: str | None = None) -> dict[str, Any]:
    """Return ``{"errors": [...]}`` holding a single error object."""
    error: dict[str, Any] = {"status": str(status), "title": title}
    if detail:
        error["detail"] = detail
    return {"errors": [error]}
