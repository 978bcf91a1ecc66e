"""Argument parsing for the treeshell CLI."""

import argparse
from collections.abc import Sequence


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="treeshell",
        description="Interactive command shell with nested subcommands",
    )
    parser.add_argument(
        "--config",
        dest="config",
        help="Config file to load instead of ~/.treeshell and ./.treeshell layers",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        help="Also write logs to this file (rotated at 5MB)",
    )
    return parser.parse_args(argv)
