"""Argument parser for the Sticky Prompts launcher.

Updates:
  v0.1.0 - 2026-10-16 - Add logging, settings summary, and list command options.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def build_parser() -> argparse.ArgumentParser:
    """Return the configured argument parser."""
    parser = argparse.ArgumentParser(description="Sticky Prompts launcher")
    parser.add_argument(
        "--logging-config",
        type=Path,
        default=None,
        help="Path to logging configuration file (INI format)",
    )
    parser.add_argument(
        "--print-settings",
        action="store_true",
        help="Print resolved settings and exit",
    )

    subparsers = parser.add_subparsers(dest="command")
    list_parser = subparsers.add_parser(
        "list",
        help="Print stored prompts in display order.",
    )
    list_parser.add_argument(
        "--content",
        action="store_true",
        help="Include each prompt's full content in the listing.",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return parsed CLI arguments for the Sticky Prompts launcher."""
    return build_parser().parse_args(argv)
