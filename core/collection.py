"""In-memory prompt collection kept in sync with persistent storage.

Updates:
  v0.3.0 - 2026-10-16 - Publish failed saves to the notification centre.
  v0.2.0 - 2026-10-14 - Emit change events for inserts, replacements, removals, and resets.
  v0.1.0 - 2026-10-12 - Introduce PromptCollection with storage-backed mutations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .exceptions import CollectionStateError, PromptStorageError
from .notifications import NotificationCenter, notification_center as default_notification_center

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from models.prompt_entry import PromptEntry

    from .storage import PromptStorage

logger = logging.getLogger("sticky_prompts.collection")


class CollectionState(str, Enum):
    """Lifecycle of a prompt collection; transitions only move forward."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


class CollectionEventKind(str, Enum):
    """Kinds of change emitted to collection listeners."""

    INSERTED = "inserted"
    REPLACED = "replaced"
    REMOVED = "removed"
    RESET = "reset"


@dataclass(frozen=True, slots=True)
class CollectionEvent:
    """Describe one change to the ordered collection.

    ``index`` is the affected position (``-1`` for resets) and ``entry`` is the
    inserted, replacing, or removed prompt (``None`` for resets).
    """

    kind: CollectionEventKind
    index: int = -1
    entry: PromptEntry | None = None


class CollectionSubscription:
    """Disposable handle detaching a collection listener."""

    def __init__(
        self,
        collection: PromptCollection,
        callback: Callable[[CollectionEvent], None],
    ) -> None:
        self._collection = collection
        self._callback = callback
        self._closed = False

    def close(self) -> None:
        """Stop delivering events to the listener."""
        if self._closed:
            return
        self._closed = True
        self._collection.unsubscribe(self._callback)

    def __enter__(self) -> CollectionSubscription:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


class PromptCollection:
    """Ordered working set of prompts mirrored to :class:`PromptStorage`.

    Every mutation updates the in-memory list first and then persists the
    whole collection. Save failures propagate to the caller without rolling
    the in-memory change back, so the UI keeps reflecting the user's intent.
    """

    def __init__(
        self,
        storage: PromptStorage,
        notifications: NotificationCenter | None = None,
    ) -> None:
        self._storage = storage
        self._notifications = notifications or default_notification_center
        self._prompts: list[PromptEntry] = []
        self._listeners: list[Callable[[CollectionEvent], None]] = []
        self._state = CollectionState.UNINITIALIZED
        self.selected: PromptEntry | None = None

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------
    @property
    def storage(self) -> PromptStorage:
        """Return the backing storage."""
        return self._storage

    @property
    def state(self) -> CollectionState:
        return self._state

    @property
    def is_loading(self) -> bool:
        """Return True only while the initial load is running."""
        return self._state is CollectionState.LOADING

    @property
    def prompts(self) -> tuple[PromptEntry, ...]:
        """Return an immutable snapshot of the ordered prompts."""
        return tuple(self._prompts)

    def __len__(self) -> int:
        return len(self._prompts)

    def __iter__(self) -> Iterator[PromptEntry]:
        return iter(tuple(self._prompts))

    def __getitem__(self, index: int) -> PromptEntry:
        return self._prompts[index]

    def subscribe(self, callback: Callable[[CollectionEvent], None]) -> CollectionSubscription:
        """Register *callback* to receive :class:`CollectionEvent` values."""
        self._listeners.append(callback)
        return CollectionSubscription(self, callback)

    def unsubscribe(self, callback: Callable[[CollectionEvent], None]) -> None:
        """Remove *callback* if it is registered."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self) -> None:
        """Load prompts from storage and mark the collection ready.

        Raises:
            CollectionStateError: when called more than once.
        """
        if self._state is not CollectionState.UNINITIALIZED:
            raise CollectionStateError(f"Prompt collection is already {self._state.value}")
        self._state = CollectionState.LOADING
        try:
            with self._notifications.track_task(
                "Load prompts",
                metadata={"path": str(self._storage.storage_path)},
            ):
                loaded = self._storage.load()
        except Exception:
            self._state = CollectionState.UNINITIALIZED
            raise
        self._prompts = list(loaded)
        self._state = CollectionState.READY
        logger.info("Prompt collection ready with %d prompts", len(self._prompts))
        self._emit(CollectionEvent(CollectionEventKind.RESET))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def add(self, entry: PromptEntry | None) -> None:
        """Append *entry* to the end of the collection and persist."""
        if entry is None:
            return
        self._require_ready()
        self._prompts.append(entry)
        self._emit(CollectionEvent(CollectionEventKind.INSERTED, len(self._prompts) - 1, entry))
        self.persist_all()

    def update(self, entry: PromptEntry | None) -> None:
        """Replace the prompt sharing *entry*'s id in place and persist.

        Unknown ids leave the collection and storage untouched.
        """
        if entry is None:
            return
        self._require_ready()
        index = self._index_of(entry)
        if index < 0:
            logger.debug("Ignoring update for unknown prompt %s", entry.id)
            return
        self._prompts[index] = entry
        self._emit(CollectionEvent(CollectionEventKind.REPLACED, index, entry))
        self.persist_all()

    def delete(self, entry: PromptEntry | None) -> None:
        """Remove the first prompt sharing *entry*'s id and persist."""
        if entry is None:
            return
        self._require_ready()
        index = self._index_of(entry)
        if index < 0:
            logger.debug("Ignoring delete for unknown prompt %s", entry.id)
            return
        removed = self._prompts.pop(index)
        self._emit(CollectionEvent(CollectionEventKind.REMOVED, index, removed))
        self.persist_all()

    def mark_used(self, entry: PromptEntry | None) -> None:
        """Stamp *entry* with the current time and store the copy."""
        if entry is None:
            return
        self.update(entry.with_updated_last_used())

    def persist_all(self) -> None:
        """Save the full collection.

        Raises:
            PromptStorageError: when the storage layer cannot write the file.
        """
        self._require_ready()
        try:
            self._storage.save(list(self._prompts))
        except PromptStorageError as exc:
            logger.error("Failed to save %d prompts: %s", len(self._prompts), exc)
            self._notifications.report_failure(
                "Save prompts",
                exc,
                metadata={"path": str(self._storage.storage_path)},
            )
            raise

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _require_ready(self) -> None:
        if self._state is not CollectionState.READY:
            raise CollectionStateError(
                "Prompt collection must be initialised before it can be modified"
            )

    def _index_of(self, entry: PromptEntry) -> int:
        for index, existing in enumerate(self._prompts):
            if existing.id == entry.id:
                return index
        return -1

    def _emit(self, event: CollectionEvent) -> None:
        for callback in list(self._listeners):
            try:
                callback(event)
            except Exception:
                logger.exception("Prompt collection listener raised an exception")


__all__ = [
    "CollectionEvent",
    "CollectionEventKind",
    "CollectionState",
    "CollectionSubscription",
    "PromptCollection",
]
