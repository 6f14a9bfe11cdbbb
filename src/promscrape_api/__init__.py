"""promscrape API - Prometheus scrape endpoint for in-process metrics."""

__version__ = "0.1.0"
