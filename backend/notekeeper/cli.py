"""Command-line runner for the NoteKeeper service."""

import argparse
import logging
from typing import List, Optional

import uvicorn
from pydantic import ValidationError as PydanticValidationError

from notekeeper.config import Settings
from notekeeper.main import create_app

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    # -h is the host flag, so help only answers to --help
    parser = argparse.ArgumentParser(
        prog="notekeeper",
        description="Run the NoteKeeper notes service.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument("-h", "--host", required=True, help="Server address")
    parser.add_argument("-p", "--port", required=True, type=int, help="Server port")
    parser.add_argument("-c", "--cache", required=True, help="Path to the cache directory")
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Logging verbosity (default: INFO)",
    )
    return parser


def load_settings(argv: Optional[List[str]] = None) -> Settings:
    """Parse command-line options into Settings; exits with status 2 on bad input."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return Settings(
            host=args.host,
            port=args.port,
            cache_dir=args.cache,
            log_level=args.log_level,
        )
    except PydanticValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        parser.error(problems)


def main(argv: Optional[List[str]] = None) -> None:
    settings = load_settings(argv)
    app = create_app(settings)

    try:
        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    except KeyboardInterrupt:  # pragma: no cover - graceful shutdown
        log.info("Shutting down NoteKeeper")


if __name__ == "__main__":  # pragma: no cover - direct invocation guard
    main()
