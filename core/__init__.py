"""Core persistence and collection layer for Sticky Prompts.

Updates:
  v0.3.0 - 2026-10-16 - Export settings-driven factories and the editor draft.
  v0.2.0 - 2026-10-14 - Export PromptCollection and change event types.
  v0.1.0 - 2026-10-11 - Surface PromptStorage and the exception hierarchy.
"""

from .collection import (
    CollectionEvent,
    CollectionEventKind,
    CollectionState,
    CollectionSubscription,
    PromptCollection,
)
from .editor import PromptDraft, is_valid_color, parse_hex_color
from .exceptions import (
    CollectionStateError,
    PromptFormatError,
    PromptStorageError,
    PromptValidationError,
    StickyPromptsError,
)
from .factory import build_prompt_collection, build_prompt_storage
from .notifications import (
    Notification,
    NotificationCenter,
    NotificationLevel,
    notification_center,
)
from .storage import PromptStorage, default_prompts

__all__ = [
    "CollectionEvent",
    "CollectionEventKind",
    "CollectionState",
    "CollectionStateError",
    "CollectionSubscription",
    "Notification",
    "NotificationCenter",
    "NotificationLevel",
    "PromptCollection",
    "PromptDraft",
    "PromptFormatError",
    "PromptStorage",
    "PromptStorageError",
    "PromptValidationError",
    "StickyPromptsError",
    "build_prompt_collection",
    "build_prompt_storage",
    "default_prompts",
    "is_valid_color",
    "notification_center",
    "parse_hex_color",
]
