"""Entry-point for launching the CLI application."""
from __future__ import annotations

import logging
import os
import sys

from .presentation.cli import config
from .presentation.cli.app import main as cli_main

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging() -> None:
    """Send logs to stderr so the board stays readable.

    THEMINE_LOG_LEVEL picks the level (default WARNING); THEMINE_DEBUG=1 forces DEBUG.
    """
    level_name = os.environ.get("THEMINE_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    if config.debug_enabled():
        level = logging.DEBUG
    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr)


def main() -> None:
    """Run the CLI presentation layer."""
    configure_logging()
    cli_main()


if __name__ == "__main__":
    main()
