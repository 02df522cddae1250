"""
CLI entry point for the BookStore API.

Usage:
    # Serve the API
    python -m app.cli serve --port 8000

    # Create the catalog tables without starting the server
    python -m app.cli init-db
"""

import argparse
import logging
import sys

from app.core.config import settings
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the API under uvicorn."""
    import uvicorn

    logger.info("Starting %s on %s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=args.reload)


def cmd_init_db(_args: argparse.Namespace) -> None:
    """Create the catalog schema in the configured database."""
    from app.infrastructure.catalog.tables import build_engine, create_schema

    engine = build_engine(settings.database_url, echo=settings.database_echo)
    try:
        create_schema(engine)
    finally:
        engine.dispose()
    logger.info("Catalog schema created.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookstore", description="BookStore catalog API"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")
    serve.set_defaults(func=cmd_serve)

    init_db = sub.add_parser("init-db", help="Create the catalog tables")
    init_db.set_defaults(func=cmd_init_db)

    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging(level=settings.log_level)
    args = build_parser().parse_args(argv)
    args.func(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
