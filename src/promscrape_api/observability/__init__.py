"""Observability module for promscrape API.

This module provides structured logging and self-describing HTTP metrics.
"""

from promscrape_api.observability.logging import configure_logging, get_logger
from promscrape_api.observability.metrics import HTTP_REQUEST_DURATION, HTTP_REQUESTS_TOTAL
from promscrape_api.observability.middleware import MetricsMiddleware

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    # Metrics
    "HTTP_REQUEST_DURATION",
    "HTTP_REQUESTS_TOTAL",
    # Middleware
    "MetricsMiddleware",
]
