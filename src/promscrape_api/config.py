"""Configuration for promscrape API."""

from pathlib import Path
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Get project root directory (2 levels up from this file)
_PROJECT_ROOT = Path(__file__).parent.parent.parent

# Load .env file into os.environ
load_dotenv(_PROJECT_ROOT / ".env")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(_PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        env_prefix="PROMSCRAPE_",
        extra="ignore",  # Ignore PROMETHEUS_EXPORTER_* and other unrelated vars
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Actuator
    actuator_base_path: str = Field(
        default="/actuator", description="Path prefix the scrape endpoint is mounted under"
    )
    prometheus_endpoint_enabled: bool = Field(
        default=True, description="Mount the Prometheus scrape endpoint"
    )
    exposition_properties: dict[str, Any] | None = Field(
        default=None,
        description="Exporter property bag for the exposition formats (JSON object). "
        "When unset, exporter properties come from PROMETHEUS_EXPORTER_* variables "
        "and defaults.",
    )

    # Self-observability
    http_metrics_enabled: bool = Field(
        default=True, description="Record HTTP request metrics for non-scrape routes"
    )

    @property
    def prometheus_path(self) -> str:
        """Full path of the Prometheus scrape route."""
        return f"{self.actuator_base_path.rstrip('/')}/prometheus"


settings = Settings()
