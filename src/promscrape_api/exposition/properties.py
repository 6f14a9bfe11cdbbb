"""Exporter properties for the exposition formats.

Properties are resolved once per endpoint. Without a property bag they come
from ``PROMETHEUS_EXPORTER_*`` environment variables and defaults; with one,
the bag's values take precedence over the environment.

Bag keys may be given in snake case (``include_created_timestamps``), camel
case (``includeCreatedTimestamps``) or with the Java client's prefix
(``io.prometheus.exporter.includeCreatedTimestamps``).
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from promscrape_api.errors import InvalidExporterPropertiesError

_KEY_PREFIXES = ("io.prometheus.exporter.", "exporter.")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class ExporterProperties(BaseSettings):
    """Options controlling how snapshots are rendered."""

    model_config = SettingsConfigDict(
        env_prefix="PROMETHEUS_EXPORTER_",
        extra="ignore",
        frozen=True,
    )

    include_created_timestamps: bool = False
    exemplars_on_all_metric_types: bool = False


def _normalize_key(key: str) -> str:
    for prefix in _KEY_PREFIXES:
        if key.startswith(prefix):
            key = key[len(prefix) :]
            break
    return _CAMEL_BOUNDARY.sub("_", key).replace("-", "_").lower()


def load_exporter_properties(properties: Mapping[str, Any] | None = None) -> ExporterProperties:
    """Resolve exporter properties from a property bag or the environment.

    Args:
        properties: Optional property bag. ``None`` and an empty mapping both
            resolve to environment values and defaults.

    Returns:
        Frozen ExporterProperties.

    Raises:
        InvalidExporterPropertiesError: If a known property has an invalid value.
    """
    values = {_normalize_key(str(k)): v for k, v in (properties or {}).items()}
    try:
        return ExporterProperties(**values)
    except ValidationError as exc:
        raise InvalidExporterPropertiesError(
            details={"errors": exc.errors(include_url=False, include_context=False, include_input=False)}
        ) from exc
