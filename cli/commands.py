"""CLI command handlers for Sticky Prompts.

Updates:
  v0.1.0 - 2026-10-16 - Add the list command and command dispatch metadata.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .utils import print_and_log

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from core.collection import PromptCollection

CommandHandler = Callable[["PromptCollection", argparse.Namespace, logging.Logger], int]


@dataclass(frozen=True)
class CommandSpec:
    """Metadata for dispatching CLI command handlers."""

    handler: CommandHandler


def _run_list_command(
    collection: PromptCollection,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    """Print prompts in display order."""
    prompts = collection.prompts
    if not prompts:
        print("No prompts stored.")
        return 0
    include_content = bool(getattr(args, "content", False))
    for position, prompt in enumerate(prompts, start=1):
        last_used = prompt.last_used.strftime("%Y-%m-%d %H:%M UTC")
        print(f"{position:>2}. {prompt.title} [{prompt.color_hex}] last used {last_used}")
        if include_content:
            for line in prompt.content.splitlines() or [""]:
                print(f"      {line}")
    logger.debug("Listed %d prompts", len(prompts))
    return 0


def run_default_mode(collection: PromptCollection, logger: logging.Logger) -> int:
    """Report readiness once the collection has been loaded."""
    print_and_log(
        logger,
        logging.INFO,
        f"Sticky Prompts ready with {len(collection)} prompts at "
        f"{collection.storage.storage_path}",
    )
    return 0


COMMAND_SPECS: dict[str, CommandSpec] = {
    "list": CommandSpec(handler=_run_list_command),
}


__all__ = ["COMMAND_SPECS", "CommandSpec", "run_default_mode"]
