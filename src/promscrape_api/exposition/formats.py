"""Exposition format writers.

Encoding itself is done by ``prometheus_client``; the writers here only apply
the exporter properties to a snapshot and stream the encoded bytes into a
binary sink.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO

from prometheus_client import exposition
from prometheus_client.metrics_core import Metric
from prometheus_client.openmetrics import exposition as openmetrics_exposition
from prometheus_client.samples import Sample

from promscrape_api.exposition.properties import ExporterProperties
from promscrape_api.exposition.snapshots import MetricSnapshots, SnapshotCollector, copy_family

CONTENT_TYPE_004 = "text/plain; version=0.0.4; charset=utf-8"
CONTENT_TYPE_OPENMETRICS_100 = "application/openmetrics-text; version=1.0.0; charset=utf-8"

# Family types that carry a <name>_created sample
_CREATED_TYPES = frozenset({"counter", "histogram", "summary"})


def _exemplar_allowed(metric: Metric, sample: Sample) -> bool:
    if metric.type == "counter":
        return sample.name.endswith("_total")
    if metric.type == "gaugehistogram":
        return sample.name.endswith("_bucket")
    if metric.type == "histogram":
        # Bare-name samples carry native histograms
        return sample.name.endswith("_bucket") or sample.name == metric.name
    return False


class _SnapshotWriter(ABC):
    content_type: str

    def __init__(self, properties: ExporterProperties) -> None:
        self._properties = properties

    def _keep_sample(self, metric: Metric, sample: Sample) -> bool:
        if self._properties.include_created_timestamps:
            return True
        return not (metric.type in _CREATED_TYPES and sample.name == f"{metric.name}_created")

    def _prepare_sample(self, metric: Metric, sample: Sample) -> Sample:
        if sample.exemplar is None or self._properties.exemplars_on_all_metric_types:
            return sample
        if _exemplar_allowed(metric, sample):
            return sample
        return sample._replace(exemplar=None)

    def _prepare(self, snapshots: MetricSnapshots) -> MetricSnapshots:
        prepared = []
        for metric in snapshots:
            samples = [
                self._prepare_sample(metric, s) for s in metric.samples if self._keep_sample(metric, s)
            ]
            prepared.append(copy_family(metric, samples))
        return tuple(prepared)

    @abstractmethod
    def _encode(self, collector: SnapshotCollector) -> bytes: ...

    def write(self, sink: BinaryIO, snapshots: MetricSnapshots) -> None:
        """Encode the snapshots and write them to the sink.

        Raises:
            OSError: If the sink rejects the write.
            ValueError: If the encoder rejects a family.
        """
        sink.write(self._encode(SnapshotCollector(self._prepare(snapshots))))


class TextFormatWriter(_SnapshotWriter):
    """Prometheus text format, version 0.0.4."""

    content_type = CONTENT_TYPE_004

    def _encode(self, collector: SnapshotCollector) -> bytes:
        return exposition.generate_latest(collector)  # type: ignore[arg-type]


class OpenMetricsTextFormatWriter(_SnapshotWriter):
    """OpenMetrics text format, version 1.0.0."""

    content_type = CONTENT_TYPE_OPENMETRICS_100

    def _encode(self, collector: SnapshotCollector) -> bytes:
        return openmetrics_exposition.generate_latest(collector)  # type: ignore[arg-type]


@dataclass(frozen=True)
class ExpositionFormats:
    """The set of supported wire encodings, configured once."""

    properties: ExporterProperties
    text_format_writer: TextFormatWriter
    open_metrics_text_format_writer: OpenMetricsTextFormatWriter

    @classmethod
    def init(cls, properties: ExporterProperties | None = None) -> ExpositionFormats:
        """Build the writers from resolved exporter properties."""
        if properties is None:
            properties = ExporterProperties()
        return cls(
            properties=properties,
            text_format_writer=TextFormatWriter(properties),
            open_metrics_text_format_writer=OpenMetricsTextFormatWriter(properties),
        )
