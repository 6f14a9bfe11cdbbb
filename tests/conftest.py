"""Pytest configuration and fixtures for promscrape API tests."""

from __future__ import annotations

from collections.abc import Iterable

import pytest
from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram
from prometheus_client import parser as text_parser
from prometheus_client.openmetrics import parser as openmetrics_parser

from promscrape_api.exposition import OutputFormat

REGISTERED_FAMILIES = frozenset({"requests", "queue_size", "latency_seconds"})


@pytest.fixture(autouse=True)
def _clean_exporter_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep exporter properties independent of the developer's environment."""
    monkeypatch.delenv("PROMETHEUS_EXPORTER_INCLUDE_CREATED_TIMESTAMPS", raising=False)
    monkeypatch.delenv("PROMETHEUS_EXPORTER_EXEMPLARS_ON_ALL_METRIC_TYPES", raising=False)


@pytest.fixture
def registry() -> CollectorRegistry:
    """Create a registry with one counter, gauge and histogram."""
    registry = CollectorRegistry()

    requests = Counter("requests", "Handled requests", ["method"], registry=registry)
    requests.labels(method="GET").inc(3)
    requests.labels(method="POST").inc()

    queue_size = Gauge("queue_size", "Jobs waiting", registry=registry)
    queue_size.set(7)

    latency = Histogram(
        "latency_seconds", "Request latency", buckets=(0.1, 1.0), registry=registry
    )
    latency.observe(0.05)
    latency.observe(0.5)

    return registry


def family_names(payload: bytes, output_format: OutputFormat) -> set[str]:
    """Decode a payload and return the family names it contains."""
    text = payload.decode("utf-8")
    families: Iterable
    if output_format is OutputFormat.CONTENT_TYPE_OPENMETRICS_100:
        families = openmetrics_parser.text_string_to_metric_families(text)
    else:
        families = text_parser.text_string_to_metric_families(text)
    return {family.name for family in families}
