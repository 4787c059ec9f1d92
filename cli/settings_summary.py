"""Printable summaries for Sticky Prompts configuration.

Updates:
  v0.1.0 - 2026-10-16 - Summarise data directory, storage file, and seed source.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.storage import BUNDLED_SEED_PATH

from .utils import describe_path

if TYPE_CHECKING:
    from config import StickyPromptsSettings


def print_settings_summary(settings: StickyPromptsSettings) -> None:
    """Emit a readable summary of storage configuration."""
    seed_path = settings.seed_path or BUNDLED_SEED_PATH
    seed_label = "custom" if settings.seed_path else "bundled"
    print("Sticky Prompts configuration")
    print(f"  Data directory: {describe_path(settings.data_dir, expect_directory=True)}")
    print(f"  Storage file:   {describe_path(settings.storage_path, expect_directory=False)}")
    print(
        f"  Seed file:      {describe_path(seed_path, expect_directory=False)} ({seed_label})"
    )
