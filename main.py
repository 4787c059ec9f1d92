"""Application entry point for Sticky Prompts.

Updates:
  v0.2.0 - 2026-10-17 - Dispatch CLI commands through COMMAND_SPECS.
  v0.1.0 - 2026-10-16 - Wire settings, logging, and the prompt collection bootstrap.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from cli.commands import COMMAND_SPECS, run_default_mode
from cli.parser import parse_args
from cli.runtime import setup_logging
from cli.settings_summary import print_settings_summary
from config import SettingsError, load_settings
from core import StickyPromptsError, build_prompt_collection

if TYPE_CHECKING:
    from collections.abc import Sequence

    from config import StickyPromptsSettings
    from core import PromptCollection


def _initialise_collection(
    settings: StickyPromptsSettings,
    logger: logging.Logger,
) -> PromptCollection | None:
    try:
        collection = build_prompt_collection(settings)
        collection.initialize()
    except (OSError, StickyPromptsError) as exc:
        logger.error("Failed to initialise prompt storage: %s", exc)
        return None
    return collection


def main(argv: Sequence[str] | None = None) -> int:
    """Entrypoint that wires settings, storage, and CLI commands."""
    args = parse_args(argv)
    setup_logging(args.logging_config)

    logger = logging.getLogger("sticky_prompts.main")
    try:
        settings = load_settings()
    except SettingsError as exc:
        logger.error("Failed to load settings: %s", exc)
        return 2

    if args.print_settings:
        print_settings_summary(settings)
        return 0

    collection = _initialise_collection(settings, logger)
    if collection is None:
        return 3

    command_spec = COMMAND_SPECS.get(args.command) if args.command else None
    if command_spec is not None:
        return command_spec.handler(collection, args, logger)
    return run_default_mode(collection, logger)


if __name__ == "__main__":
    sys.exit(main())
