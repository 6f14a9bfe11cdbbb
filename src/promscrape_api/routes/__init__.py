"""API routes for promscrape."""

from promscrape_api.routes.prometheus import router as prometheus_router

__all__ = ["prometheus_router"]
