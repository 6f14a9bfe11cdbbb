"""Observability middleware for FastAPI."""

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from promscrape_api.observability.metrics import HTTP_REQUEST_DURATION, HTTP_REQUESTS_TOTAL

UNMATCHED_ENDPOINT = "unmatched"


def _route_template(request: Request) -> str:
    """Label requests by the matched route template, never the raw path."""
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path if isinstance(path, str) else UNMATCHED_ENDPOINT


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware to collect HTTP request metrics."""

    def __init__(self, app: ASGIApp, *, excluded_paths: tuple[str, ...] = ()) -> None:
        super().__init__(app)
        self._excluded_paths = frozenset(excluded_paths)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Process request and collect metrics."""
        # Scrapes are not counted as traffic
        if request.url.path in self._excluded_paths:
            return await call_next(request)

        start_time = time.monotonic()
        status_code = 500  # Default to error if exception occurs

        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration = time.monotonic() - start_time
            method = request.method
            # Route is only known once routing ran inside call_next
            endpoint = _route_template(request)

            HTTP_REQUEST_DURATION.labels(
                method=method,
                endpoint=endpoint,
                status_code=str(status_code),
            ).observe(duration)

            HTTP_REQUESTS_TOTAL.labels(
                method=method,
                endpoint=endpoint,
                status_code=str(status_code),
            ).inc()
