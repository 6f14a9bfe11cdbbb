"""FastAPI dependency injection."""

from fastapi import Request
from prometheus_client import REGISTRY

from promscrape_api.config import Settings
from promscrape_api.exposition.snapshots import SupportsCollect
from promscrape_api.services.prometheus_scrape_endpoint import PrometheusScrapeEndpoint


def build_prometheus_scrape_endpoint(
    app_settings: Settings, registry: SupportsCollect | None = None
) -> PrometheusScrapeEndpoint:
    """Create a scrape endpoint configured from settings.

    Args:
        app_settings: Settings providing the exporter property bag.
        registry: Registry to scrape. Defaults to the process registry.
    """
    return PrometheusScrapeEndpoint(
        registry if registry is not None else REGISTRY, app_settings.exposition_properties
    )


def get_prometheus_scrape_endpoint(request: Request) -> PrometheusScrapeEndpoint:
    """Get the scrape endpoint the application was built with."""
    endpoint: PrometheusScrapeEndpoint = request.app.state.prometheus_scrape_endpoint
    return endpoint
