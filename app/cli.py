"""
CLI entry point for the calculator API.

Usage:
    # Serve on the configured host/port (default 127.0.0.1:9999)
    python -m app.cli serve

    # Override the bind address
    python -m app.cli serve --host 0.0.0.0 --port 8080

    # Refuse to start without SENTRY_DSN
    python -m app.cli serve --require-sentry
"""

import argparse
import logging
import sys

from app.core.config import settings
from app.domain.calculator.errors import CalculatorError
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> int:
    """Build the application and run it under uvicorn."""
    import uvicorn

    from app.main import create_app

    configured = settings.model_copy(
        update={
            "host": args.host or settings.host,
            "port": args.port or settings.port,
            "sentry_required": settings.sentry_required or args.require_sentry,
        }
    )
    try:
        application = create_app(configured)
    except CalculatorError as exc:
        logger.error("Cannot start: %s", exc)
        return 1

    logger.info(
        "Starting %s at http://%s:%d%s",
        configured.project_name,
        configured.host,
        configured.port,
        configured.api_prefix,
    )
    uvicorn.run(application, host=configured.host, port=configured.port)
    return 0


def main(argv: list[str] | None = None) -> int:
    configure_logging(level=settings.log_level)

    parser = argparse.ArgumentParser(description="Calculator API CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")
    serve_parser.add_argument(
        "--require-sentry",
        action="store_true",
        help="Fail when SENTRY_DSN is unset",
    )
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
