"""Point-in-time snapshots of a metrics registry."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Protocol

from prometheus_client.metrics_core import Metric
from prometheus_client.samples import Sample

# Immutable point-in-time view of the collected metric families.
MetricSnapshots = tuple[Metric, ...]

NameFilter = Callable[[str], bool]


class SupportsCollect(Protocol):
    """Anything that yields metric families, e.g. ``CollectorRegistry``."""

    def collect(self) -> Iterable[Metric]: ...


def copy_family(metric: Metric, samples: Iterable[Sample]) -> Metric:
    """Return a new family with the same metadata and the given samples."""
    family = Metric(metric.name, metric.documentation, metric.type, metric.unit)
    family.samples = list(samples)
    return family


def _filter_families(metrics: Iterable[Metric], name_filter: NameFilter) -> Iterator[Metric]:
    for metric in metrics:
        if name_filter(metric.name):
            yield metric
            continue
        # Sample names (foo_total, foo_bucket, ...) select a subset of the family
        samples = [s for s in metric.samples if name_filter(s.name)]
        if samples:
            yield copy_family(metric, samples)


def scrape(registry: SupportsCollect, name_filter: NameFilter | None = None) -> MetricSnapshots:
    """Collect the registry into an immutable snapshot.

    Args:
        registry: Registry to collect from.
        name_filter: Optional predicate on metric names. A family is kept whole
            when its name matches, or restricted to its matching samples when
            only some sample names match.

    Returns:
        Tuple of metric families, in registry order.
    """
    metrics = registry.collect()
    if name_filter is None:
        return tuple(metrics)
    return tuple(_filter_families(metrics, name_filter))


class SnapshotCollector:
    """Adapts a snapshot to the collector interface the encoders expect."""

    def __init__(self, snapshots: MetricSnapshots) -> None:
        self._snapshots = snapshots

    def collect(self) -> Iterator[Metric]:
        return iter(self._snapshots)
