"""Application error types for consistent API error handling.

This module defines a small exception hierarchy for endpoint errors.
These exceptions are converted to consistent HTTP responses by the global
exception handlers installed in `promscrape_api.error_handling`.
"""

from __future__ import annotations

from typing import Any


class PromScrapeError(Exception):
    """Base exception for predictable application errors.

    Note: Avoid frozen dataclasses for exceptions; some frameworks attempt to
    mutate ``__traceback__`` and other attributes during handling, which breaks
    with frozen/slots dataclass exceptions.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "UNKNOWN",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class MetricsWriteError(PromScrapeError):
    """Encoding a metrics snapshot failed (500).

    Always raised ``from`` the underlying encoder or sink error.
    """

    def __init__(
        self,
        message: str = "Writing metrics failed",
        *,
        code: str = "METRICS_WRITE_FAILED",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message=message, code=code, status_code=500, details=details)


class InvalidExporterPropertiesError(PromScrapeError):
    """Exporter property bag could not be loaded (500)."""

    def __init__(
        self,
        message: str = "Invalid exporter properties",
        *,
        code: str = "INVALID_EXPORTER_PROPERTIES",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message=message, code=code, status_code=500, details=details)
