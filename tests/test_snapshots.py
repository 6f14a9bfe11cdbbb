"""Tests for registry snapshots and name filtering."""

from __future__ import annotations

from prometheus_client import CollectorRegistry
from prometheus_client.core import CounterMetricFamily
from prometheus_client.metrics_core import Metric

from promscrape_api.exposition import scrape
from tests.conftest import REGISTERED_FAMILIES


def test_unfiltered_scrape_contains_every_family(registry: CollectorRegistry) -> None:
    snapshots = scrape(registry)

    assert isinstance(snapshots, tuple)
    assert {m.name for m in snapshots} == REGISTERED_FAMILIES


def test_family_name_filter_keeps_whole_family(registry: CollectorRegistry) -> None:
    snapshots = scrape(registry, {"requests"}.__contains__)

    assert [m.name for m in snapshots] == ["requests"]
    sample_names = {s.name for s in snapshots[0].samples}
    assert "requests_total" in sample_names
    assert all(name.startswith("requests_") for name in sample_names)


def test_sample_name_filter_restricts_family(registry: CollectorRegistry) -> None:
    snapshots = scrape(registry, {"latency_seconds_count"}.__contains__)

    assert len(snapshots) == 1
    family = snapshots[0]
    assert family.name == "latency_seconds"
    assert family.type == "histogram"
    assert [s.name for s in family.samples] == ["latency_seconds_count"]


def test_filter_without_matches_is_empty(registry: CollectorRegistry) -> None:
    assert scrape(registry, {"does_not_exist"}.__contains__) == ()


def test_restricted_family_leaves_collected_family_untouched() -> None:
    family = CounterMetricFamily("hits", "Cache hits", value=2, created=1700000000.0)

    class _FixedCollector:
        def collect(self) -> list[Metric]:
            return [family]

    snapshots = scrape(_FixedCollector(), {"hits_total"}.__contains__)

    assert [s.name for s in snapshots[0].samples] == ["hits_total"]
    assert snapshots[0] is not family
    assert {s.name for s in family.samples} == {"hits_total", "hits_created"}
