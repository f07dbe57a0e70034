"""Command-line entry point: ``env-switch <environment> [--force]``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .config import SwitcherConfig
from .errors import EnvSwitchError
from .log_utils import LOGGER_NAME, setup_logging
from .switcher import EnvSwitcher

logger = logging.getLogger(LOGGER_NAME)


class _ArgumentParser(argparse.ArgumentParser):
    """Report usage errors with exit code 1, like every other failure."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = _ArgumentParser(
        prog="env-switch",
        description="Switch between multiple environment configurations.",
    )
    parser.add_argument(
        "environment",
        help="Environment to switch to (case-insensitive).",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Force switch without confirmation.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = SwitcherConfig.from_env()
    except ValueError as exc:
        setup_logging()
        logger.error(f"Invalid configuration: {exc}")
        return 1

    setup_logging(logging.DEBUG if args.verbose else config.log_level)
    switcher = EnvSwitcher(config.layout())

    try:
        switcher.run(args.environment, force=args.force)
    except EnvSwitchError as exc:
        logger.error(str(exc))
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted.")
        return 1
    except Exception as exc:
        logger.error(f"Unexpected error: {exc}")
        return 1
    return 0
