#!/usr/bin/env python3
"""
Command line entry point for the Todo API server.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .logging_utils import configure_logging
from .settings import get_settings

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8888
DEFAULT_HOSTNAME = "localhost"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo-api",
        description="Serve the in-memory Todo API.",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to listen on (default: {DEFAULT_PORT})",
    )
    parser.add_argument(
        "-n",
        "--hostname",
        default=DEFAULT_HOSTNAME,
        help=f"Hostname to listen on (default: {DEFAULT_HOSTNAME})",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug"],
        help="Server log level (default: info)",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def run_server(hostname: str, port: int, log_level: str = "info") -> None:
    """Start uvicorn with the todo application."""
    import uvicorn

    from .main import app

    logger.info("Starting on %s:%s", hostname, port)
    uvicorn.run(
        app,
        host=hostname,
        port=port,
        log_level=log_level,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Parse arguments and run the server."""
    args = parse_args(argv)
    configure_logging(get_settings().log_level)

    try:
        run_server(args.hostname, args.port, args.log_level)
    except KeyboardInterrupt:
        logger.info("Shutdown requested...")
        sys.exit(0)
    except Exception as e:
        logger.exception("Error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
