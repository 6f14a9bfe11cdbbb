"""promscrape CLI.

Usage:
    promscrape serve [--host HOST] [--port PORT]
    promscrape scrape [--openmetrics] [--name NAME ...]
"""

import argparse
import sys

from promscrape_api.config import settings
from promscrape_api.errors import PromScrapeError


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the API server."""
    import uvicorn

    uvicorn.run(
        "promscrape_api.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=settings.debug,
    )
    return 0


def cmd_scrape(args: argparse.Namespace) -> int:
    """Print one scrape of the process registry."""
    from promscrape_api.dependencies import build_prometheus_scrape_endpoint
    from promscrape_api.exposition import OutputFormat

    output_format = OutputFormat.CONTENT_TYPE_004
    if args.openmetrics:
        output_format = OutputFormat.CONTENT_TYPE_OPENMETRICS_100
    try:
        result = build_prometheus_scrape_endpoint(settings).scrape(output_format, args.names)
    except PromScrapeError as exc:
        print(f"Error: {exc.message}: {exc.__cause__}", file=sys.stderr)
        return 1
    sys.stdout.buffer.write(result.body)
    sys.stdout.buffer.flush()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="promscrape", description="Prometheus scrape endpoint")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the API server")
    serve.add_argument("--host", default=None, help="Bind address")
    serve.add_argument("--port", type=int, default=None, help="Bind port")
    serve.set_defaults(func=cmd_serve)

    scrape = subparsers.add_parser("scrape", help="Print the current metrics to stdout")
    scrape.add_argument(
        "--openmetrics", action="store_true", help="Use OpenMetrics instead of text 0.0.4"
    )
    scrape.add_argument(
        "--name",
        dest="names",
        action="append",
        default=None,
        help="Metric name to include (repeatable)",
    )
    scrape.set_defaults(func=cmd_scrape)

    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    sys.exit(main())
