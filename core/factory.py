"""Factories for constructing prompt collections from validated settings.

Updates:
  v0.1.0 - 2026-10-16 - Build PromptStorage and PromptCollection from settings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .collection import PromptCollection
from .notifications import NotificationCenter, notification_center as default_notification_center
from .storage import PromptStorage

if TYPE_CHECKING:  # pragma: no cover - typing only
    from config import StickyPromptsSettings

factory_logger = logging.getLogger("sticky_prompts.factory")


def build_prompt_storage(settings: StickyPromptsSettings) -> PromptStorage:
    """Return storage rooted at the configured data directory."""
    return PromptStorage(settings.storage_path, seed_path=settings.seed_path)


def build_prompt_collection(
    settings: StickyPromptsSettings,
    *,
    notifications: NotificationCenter | None = None,
) -> PromptCollection:
    """Return an uninitialised collection wired to storage from *settings*.

    Call :meth:`PromptCollection.initialize` before issuing mutations.
    """
    storage = build_prompt_storage(settings)
    factory_logger.debug("Prompt storage at %s (seed %s)", storage.storage_path, storage.seed_path)
    return PromptCollection(storage, notifications=notifications or default_notification_center)


__all__ = ["build_prompt_collection", "build_prompt_storage"]
