"""Prometheus scrape endpoint.

Exposes a metrics registry in a Prometheus exposition format. Collection and
encoding are done by ``prometheus_client``; this service wires a registry
snapshot to the writer picked by content negotiation and returns the bytes.
"""

from __future__ import annotations

import io
from collections.abc import Collection, Mapping
from dataclasses import dataclass
from typing import Any

from promscrape_api.errors import MetricsWriteError
from promscrape_api.exposition import (
    ExpositionFormats,
    OutputFormat,
    load_exporter_properties,
    scrape,
)
from promscrape_api.exposition.snapshots import SupportsCollect
from promscrape_api.observability.logging import get_logger

logger = get_logger(__name__)

INITIAL_SCRAPE_SIZE = 16
METRICS_SCRAPE_CHARS_EXTRA = 1024


@dataclass(frozen=True)
class ScrapeResponse:
    """Encoded scrape payload."""

    body: bytes
    content_type: str
    status_code: int = 200


class PrometheusScrapeEndpoint:
    """Endpoint that renders a registry for Prometheus scrapers.

    The buffer size hint is shared across concurrent scrapes without locking;
    it only affects pre-allocation, never the payload.
    """

    endpoint_id = "prometheus"

    def __init__(
        self,
        registry: SupportsCollect,
        exposition_formats_properties: Mapping[str, Any] | None = None,
    ) -> None:
        """Create the endpoint.

        Args:
            registry: Registry to scrape.
            exposition_formats_properties: Optional exporter property bag. When
                omitted, exporter properties are loaded from the environment.

        Raises:
            ValueError: If registry is None.
            InvalidExporterPropertiesError: If the property bag is invalid.
        """
        if registry is None:
            raise ValueError("registry must not be None")
        self._registry = registry
        self._exposition_formats = ExpositionFormats.init(
            load_exporter_properties(exposition_formats_properties)
        )
        self._next_scrape_size = INITIAL_SCRAPE_SIZE

    @property
    def exposition_formats(self) -> ExpositionFormats:
        return self._exposition_formats

    @property
    def next_scrape_size(self) -> int:
        """Initial buffer size for the next scrape."""
        return self._next_scrape_size

    def scrape(
        self,
        output_format: OutputFormat,
        included_names: Collection[str] | None = None,
    ) -> ScrapeResponse:
        """Scrape the registry and encode it.

        Args:
            output_format: Negotiated output format.
            included_names: Metric names to include. Empty or None means all.

        Returns:
            ScrapeResponse with the complete payload and its content type.

        Raises:
            MetricsWriteError: If encoding the snapshot failed.
        """
        # Zero-filled initial bytes reserve capacity; truncate() drops the unused tail
        buffer = io.BytesIO(bytes(self._next_scrape_size))
        if included_names:
            names = frozenset(included_names)
            snapshots = scrape(self._registry, names.__contains__)
        else:
            snapshots = scrape(self._registry)

        try:
            output_format.write(self._exposition_formats, buffer, snapshots)
        except (OSError, ValueError) as exc:
            logger.error(
                "metrics_write_failed",
                content_type=output_format.content_type,
                error=str(exc),
            )
            raise MetricsWriteError() from exc

        buffer.truncate()
        content = buffer.getvalue()
        self._next_scrape_size = len(content) + METRICS_SCRAPE_CHARS_EXTRA
        logger.debug(
            "metrics_scraped",
            content_type=output_format.content_type,
            families=len(snapshots),
            size=len(content),
        )
        return ScrapeResponse(body=content, content_type=output_format.content_type)
