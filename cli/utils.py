"""Shared CLI utility functions for Sticky Prompts commands.

Updates:
  v0.1.0 - 2026-10-16 - Add stdout mirroring and path description helpers.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from logging import Logger


def print_and_log(logger: Logger, level: int, message: str) -> None:
    """Log *message* at *level* and mirror it to stdout."""
    logger.log(level, message)
    print(message)


def describe_path(path_value: Path | str | None, *, expect_directory: bool) -> str:
    """Return a human-friendly description of *path_value* suitability."""
    if path_value is None:
        return "not set"
    resolved = Path(path_value).expanduser()
    if not resolved.exists():
        return f"{resolved} (missing)"
    if expect_directory and not resolved.is_dir():
        return f"{resolved} (exists but is not a directory)"
    if not expect_directory and resolved.is_dir():
        return f"{resolved} (exists but is a directory)"
    return f"{resolved} (exists)"
