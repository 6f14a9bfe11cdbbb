"""promscrape API - FastAPI application entry point."""

from fastapi import FastAPI

from promscrape_api import __version__
from promscrape_api.config import Settings, settings
from promscrape_api.dependencies import build_prometheus_scrape_endpoint
from promscrape_api.error_handling import install_error_handling
from promscrape_api.exposition.snapshots import SupportsCollect
from promscrape_api.observability import MetricsMiddleware, configure_logging
from promscrape_api.routes import prometheus_router


def create_app(
    app_settings: Settings | None = None, registry: SupportsCollect | None = None
) -> FastAPI:
    """Build the application.

    Args:
        app_settings: Settings to use. Defaults to the process settings.
        registry: Registry to expose. Defaults to the process registry.
    """
    app_settings = app_settings or settings
    configure_logging(app_settings)

    app = FastAPI(
        title="promscrape API",
        description="Prometheus scrape endpoint for in-process metrics",
        version=__version__,
    )

    # Built once per app; exposition formats never change afterwards
    app.state.prometheus_scrape_endpoint = build_prometheus_scrape_endpoint(
        app_settings, registry
    )

    # Global error handling + request correlation
    install_error_handling(app)

    if app_settings.http_metrics_enabled:
        app.add_middleware(MetricsMiddleware, excluded_paths=(app_settings.prometheus_path,))

    if app_settings.prometheus_endpoint_enabled:
        app.include_router(prometheus_router, prefix=app_settings.actuator_base_path.rstrip("/"))

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "promscrape_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
