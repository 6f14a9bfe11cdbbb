"""Prometheus scrape route.

Mounted under the actuator base path, e.g. ``GET /actuator/prometheus``.
"""

from fastapi import APIRouter, Depends, Header, Query, Response

from promscrape_api.dependencies import get_prometheus_scrape_endpoint
from promscrape_api.exposition import OutputFormat
from promscrape_api.services.prometheus_scrape_endpoint import PrometheusScrapeEndpoint

router = APIRouter(tags=["prometheus"])


def _parse_included_names(values: list[str] | None) -> set[str] | None:
    """Flatten repeated and comma-separated includedNames values."""
    if not values:
        return None
    names = {name.strip() for value in values for name in value.split(",")}
    names.discard("")
    return names or None


@router.get("/prometheus", response_class=Response)
def prometheus_scrape(
    accept: str | None = Header(None),
    included_names: list[str] | None = Query(
        None, alias="includedNames", description="Metric names to include"
    ),
    endpoint: PrometheusScrapeEndpoint = Depends(get_prometheus_scrape_endpoint),
) -> Response:
    """Expose registry metrics for Prometheus scrapers.

    Returns:
        Metrics in the format negotiated from the Accept header.
    """
    result = endpoint.scrape(
        OutputFormat.from_accept(accept), _parse_included_names(included_names)
    )
    return Response(
        content=result.body,
        media_type=result.content_type,
        status_code=result.status_code,
    )
