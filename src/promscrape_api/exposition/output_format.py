"""Negotiable Prometheus output formats."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, BinaryIO

from promscrape_api.exposition import formats

if TYPE_CHECKING:
    from promscrape_api.exposition.formats import ExpositionFormats
    from promscrape_api.exposition.snapshots import MetricSnapshots

_OPENMETRICS_MEDIA_TYPE = "application/openmetrics-text"
_TEXT_MEDIA_RANGES = frozenset({"text/plain", "text/*", "*/*"})


class OutputFormat(str, Enum):
    """Output format; the value is the response content type."""

    CONTENT_TYPE_004 = formats.CONTENT_TYPE_004
    CONTENT_TYPE_OPENMETRICS_100 = formats.CONTENT_TYPE_OPENMETRICS_100

    @property
    def content_type(self) -> str:
        return self.value

    @property
    def is_default(self) -> bool:
        return self is OutputFormat.CONTENT_TYPE_004

    def write(
        self, exposition_formats: ExpositionFormats, sink: BinaryIO, snapshots: MetricSnapshots
    ) -> None:
        """Write the snapshots to the sink with this format's writer."""
        if self is OutputFormat.CONTENT_TYPE_OPENMETRICS_100:
            exposition_formats.open_metrics_text_format_writer.write(sink, snapshots)
        else:
            exposition_formats.text_format_writer.write(sink, snapshots)

    @classmethod
    def from_accept(cls, accept: str | None) -> OutputFormat:
        """Pick the format for an Accept header.

        OpenMetrics wins when its media type is listed with a quality at least
        as high as the best entry matching text/plain (``text/plain``,
        ``text/*`` or ``*/*``). Ties go to OpenMetrics since it was named
        explicitly. Anything else, including a missing header or only
        unsupported media types such as ``application/json``, gets the 0.0.4
        text format; this endpoint never answers 406.
        """
        openmetrics_quality = 0.0
        text_quality = 0.0
        for media_range in (accept or "").split(","):
            media_type, _, params = media_range.partition(";")
            media_type = media_type.strip().lower()
            if media_type == _OPENMETRICS_MEDIA_TYPE:
                openmetrics_quality = max(openmetrics_quality, _quality(params))
            elif media_type in _TEXT_MEDIA_RANGES:
                text_quality = max(text_quality, _quality(params))
        if openmetrics_quality > 0 and openmetrics_quality >= text_quality:
            return cls.CONTENT_TYPE_OPENMETRICS_100
        return cls.CONTENT_TYPE_004


def _quality(params: str) -> float:
    for param in params.split(";"):
        key, _, value = param.partition("=")
        if key.strip().lower() == "q":
            try:
                return float(value)
            except ValueError:
                return 0.0
    return 1.0
