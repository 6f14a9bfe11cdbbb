"""Snapshotting and exposition-format encoding of metric registries."""

from promscrape_api.exposition.formats import (
    CONTENT_TYPE_004,
    CONTENT_TYPE_OPENMETRICS_100,
    ExpositionFormats,
    OpenMetricsTextFormatWriter,
    TextFormatWriter,
)
from promscrape_api.exposition.output_format import OutputFormat
from promscrape_api.exposition.properties import ExporterProperties, load_exporter_properties
from promscrape_api.exposition.snapshots import MetricSnapshots, scrape

__all__ = [
    "CONTENT_TYPE_004",
    "CONTENT_TYPE_OPENMETRICS_100",
    "ExporterProperties",
    "ExpositionFormats",
    "MetricSnapshots",
    "OpenMetricsTextFormatWriter",
    "OutputFormat",
    "TextFormatWriter",
    "load_exporter_properties",
    "scrape",
]
