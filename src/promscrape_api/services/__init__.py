"""Services for promscrape API."""

from promscrape_api.services.prometheus_scrape_endpoint import (
    PrometheusScrapeEndpoint,
    ScrapeResponse,
)

__all__ = ["PrometheusScrapeEndpoint", "ScrapeResponse"]
