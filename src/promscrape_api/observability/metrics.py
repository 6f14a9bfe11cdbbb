"""Prometheus metrics describing promscrape API itself.

Metrics follow the naming convention: promscrape_<subsystem>_<name>_<unit>
"""

from prometheus_client import Counter, Histogram

# -----------------------------------------------------------------------------
# HTTP request metrics
# -----------------------------------------------------------------------------

HTTP_REQUEST_DURATION = Histogram(
    "promscrape_http_request_duration_seconds",
    "HTTP request duration",
    ["method", "endpoint", "status_code"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

HTTP_REQUESTS_TOTAL = Counter(
    "promscrape_http_requests_total",
    "Total number of HTTP requests",
    ["method", "endpoint", "status_code"],
)
