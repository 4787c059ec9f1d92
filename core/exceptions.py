"""Common exception classes for the core package.

All exceptions raised by the storage and collection layers inherit from
:class:`StickyPromptsError`, allowing callers to catch a single base class
while still distinguishing individual failure categories.

Payload shape errors are defined beside the model as
:class:`models.prompt_entry.PromptFormatError` and re-exported here; they never
escape :meth:`core.storage.PromptStorage.load`.

Updates:
  v0.2.0 - 2026-10-13 - Add collection lifecycle and editor validation errors.
  v0.1.0 - 2026-10-11 - Created module with storage error hierarchy.
"""

from __future__ import annotations

from models.prompt_entry import PromptFormatError


class StickyPromptsError(Exception):
    """Base exception for Sticky Prompts failures."""


class PromptStorageError(StickyPromptsError):
    """Raised when writing or replacing the prompt storage file fails."""


class CollectionStateError(StickyPromptsError):
    """Raised when the prompt collection is used outside its lifecycle."""


class PromptValidationError(StickyPromptsError):
    """Raised when an editor draft cannot produce a valid prompt entry."""


__all__ = [
    "CollectionStateError",
    "PromptFormatError",
    "PromptStorageError",
    "PromptValidationError",
    "StickyPromptsError",
]
