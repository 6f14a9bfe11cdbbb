"""Tests for exposition format writers and exporter properties."""

from __future__ import annotations

import io

import pytest
from prometheus_client import CollectorRegistry, Counter
from prometheus_client.core import GaugeMetricFamily
from prometheus_client.metrics_core import Metric
from prometheus_client.samples import Exemplar, Sample
from pydantic import ValidationError

from promscrape_api.errors import InvalidExporterPropertiesError
from promscrape_api.exposition import (
    ExporterProperties,
    ExpositionFormats,
    OutputFormat,
    load_exporter_properties,
    scrape,
)
from promscrape_api.exposition.formats import _SnapshotWriter


def _render(
    registry: object, output_format: OutputFormat, properties: ExporterProperties
) -> bytes:
    sink = io.BytesIO()
    output_format.write(ExpositionFormats.init(properties), sink, scrape(registry))  # type: ignore[arg-type]
    return sink.getvalue()


def _gauge_with_exemplar() -> Metric:
    family = GaugeMetricFamily("temperature_celsius", "Room temperature")
    family.samples = [
        Sample(
            name="temperature_celsius",
            labels={},
            value=21.5,
            timestamp=None,
            exemplar=Exemplar({"trace_id": "abc123"}, 21.5),
        )
    ]
    return family


class _FixedCollector:
    def __init__(self, *families: Metric) -> None:
        self._families = families

    def collect(self) -> tuple[Metric, ...]:
        return self._families


class TestExporterProperties:
    """Test exporter property loading."""

    def test_defaults(self) -> None:
        properties = load_exporter_properties()
        assert properties.include_created_timestamps is False
        assert properties.exemplars_on_all_metric_types is False

    def test_none_and_empty_bag_are_equivalent(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROMETHEUS_EXPORTER_INCLUDE_CREATED_TIMESTAMPS", "true")
        assert load_exporter_properties(None).model_dump() == load_exporter_properties(
            {}
        ).model_dump()
        assert load_exporter_properties(None).include_created_timestamps is True

    @pytest.mark.parametrize(
        "key",
        [
            "include_created_timestamps",
            "includeCreatedTimestamps",
            "io.prometheus.exporter.includeCreatedTimestamps",
        ],
    )
    def test_bag_key_styles(self, key: str) -> None:
        assert load_exporter_properties({key: "true"}).include_created_timestamps is True

    def test_bag_overrides_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROMETHEUS_EXPORTER_INCLUDE_CREATED_TIMESTAMPS", "true")
        properties = load_exporter_properties({"includeCreatedTimestamps": "false"})
        assert properties.include_created_timestamps is False

    def test_unknown_keys_are_ignored(self) -> None:
        properties = load_exporter_properties({"io.prometheus.exporter.somethingElse": "1"})
        assert properties.include_created_timestamps is False

    def test_invalid_value_raises(self) -> None:
        with pytest.raises(InvalidExporterPropertiesError) as exc_info:
            load_exporter_properties({"include_created_timestamps": "not-a-bool"})
        assert exc_info.value.code == "INVALID_EXPORTER_PROPERTIES"
        assert exc_info.value.details is not None

    def test_properties_are_frozen(self) -> None:
        properties = load_exporter_properties()
        with pytest.raises(ValidationError):
            properties.include_created_timestamps = True  # type: ignore[misc]


class TestCreatedTimestamps:
    """Test the include_created_timestamps property."""

    def test_text_format_omits_created_by_default(self, registry: CollectorRegistry) -> None:
        payload = _render(registry, OutputFormat.CONTENT_TYPE_004, ExporterProperties())
        assert b"requests_total" in payload
        assert b"_created" not in payload

    def test_openmetrics_omits_created_by_default(self, registry: CollectorRegistry) -> None:
        payload = _render(
            registry, OutputFormat.CONTENT_TYPE_OPENMETRICS_100, ExporterProperties()
        )
        assert b"requests_total" in payload
        assert b"_created" not in payload
        assert payload.endswith(b"# EOF\n")

    def test_created_included_when_enabled(self, registry: CollectorRegistry) -> None:
        properties = ExporterProperties(include_created_timestamps=True)
        payload = _render(registry, OutputFormat.CONTENT_TYPE_004, properties)
        assert b"requests_created" in payload


class TestExemplars:
    """Test the exemplars_on_all_metric_types property."""

    def test_disallowed_exemplars_are_stripped(self) -> None:
        collector = _FixedCollector(_gauge_with_exemplar())
        payload = _render(
            collector, OutputFormat.CONTENT_TYPE_OPENMETRICS_100, ExporterProperties()
        )
        assert b"temperature_celsius 21.5" in payload
        assert b"trace_id" not in payload

    def test_counter_exemplars_are_kept(self) -> None:
        registry = CollectorRegistry()
        counter = Counter("jobs", "Jobs run", registry=registry)
        counter.inc(exemplar={"trace_id": "t-1"})

        payload = _render(
            registry, OutputFormat.CONTENT_TYPE_OPENMETRICS_100, ExporterProperties()
        )
        assert b'trace_id="t-1"' in payload


def test_exposition_formats_default_properties() -> None:
    formats = ExpositionFormats.init()
    assert formats.properties.include_created_timestamps is False
    assert formats.text_format_writer.content_type == OutputFormat.CONTENT_TYPE_004.value
    assert (
        formats.open_metrics_text_format_writer.content_type
        == OutputFormat.CONTENT_TYPE_OPENMETRICS_100.value
    )


def test_snapshot_writer_base_is_abstract() -> None:
    with pytest.raises(TypeError):
        _SnapshotWriter(ExporterProperties())  # type: ignore[abstract]
