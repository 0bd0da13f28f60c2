"""Process entry point: ``any-exporter --port 8080``."""

import argparse
from typing import Optional, Sequence

import uvicorn

from any_exporter.api.app import create_app
from any_exporter.core.config import settings
from any_exporter.core.logging import LoggerConfigurator, logger


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI flags; defaults come from the environment settings."""
    parser = argparse.ArgumentParser(
        prog="any-exporter",
        description="Serve scripted Prometheus metrics for end-to-end tests.",
    )
    parser.add_argument("--host", default=settings.HOST, help="listen address")
    parser.add_argument("--port", type=int, default=settings.PORT, help="listen port")
    args = parser.parse_args(argv)

    if args.port < 0 or args.port > 65535:
        parser.error(f"Invalid port number: {args.port}")
    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    LoggerConfigurator.configure(level=settings.LOG_LEVEL, json_output=settings.LOG_JSON)

    logger.with_context(host=args.host, port=args.port).info("Starting any-exporter")
    uvicorn.run(create_app(), host=args.host, port=args.port, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
