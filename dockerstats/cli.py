"""Command-line arguments of the ``ds`` command."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``ds``."""
    parser = argparse.ArgumentParser(
        prog="ds",
        description='Think "docker stats" but with beautiful, real-time charts. 📊',
    )
    parser.add_argument(
        "containers",
        metavar="CONTAINER",
        nargs="*",
        help="The container to show stats for.",
    )
    parser.add_argument(
        "-c", "--compact", action="store_true", help="Enable a simpler, more compact view."
    )
    parser.add_argument(
        "-f", "--full", action="store_true", help="Enable a more detailed view."
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse ``argv`` (or the process arguments when None)."""
    return build_parser().parse_args(argv)