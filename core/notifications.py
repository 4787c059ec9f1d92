"""Status messages about prompt loading and saving for the UI layer.

The collection announces its initial load and any failed save here, so a
desktop shell can show non-blocking toasts without the core importing a
widget toolkit.

Updates:
  v0.3.0 - 2026-10-18 - Narrow the centre to load progress and save failures.
  v0.2.0 - 2026-10-15 - Add report_failure helper for failed prompt saves.
  v0.1.0 - 2026-10-12 - Introduce notification centre.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

logger = logging.getLogger("sticky_prompts.notifications")


class NotificationLevel(str, Enum):
    """How a status message should be presented."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Notification:
    title: str
    message: str
    level: NotificationLevel
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class NotificationCenter:
    """Fan status messages out to listeners and keep the most recent ones."""

    def __init__(self, history_limit: int = 50) -> None:
        self._listeners: list[Callable[[Notification], None]] = []
        self._recent: deque[Notification] = deque(maxlen=history_limit)
        self._lock = threading.Lock()

    def subscribe(self, listener: Callable[[Notification], None]) -> Callable[[], None]:
        """Register *listener*; call the returned function to detach it."""
        with self._lock:
            self._listeners.append(listener)

        def _detach() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _detach

    def publish(self, notification: Notification) -> None:
        with self._lock:
            self._recent.append(notification)
            listeners = tuple(self._listeners)
        for listener in listeners:
            try:
                listener(notification)
            except Exception:
                logger.exception("Notification listener failed for %r", notification.title)

    def history(self) -> tuple[Notification, ...]:
        """Return recent notifications, oldest first."""
        with self._lock:
            return tuple(self._recent)

    def report_failure(
        self,
        title: str,
        error: BaseException,
        *,
        metadata: dict[str, Any] | None = None,
    ) -> Notification:
        """Publish an error describing *error* under *title*."""
        notification = Notification(
            title=title,
            message=f"{title} failed: {error}",
            level=NotificationLevel.ERROR,
            metadata=dict(metadata or {}),
        )
        self.publish(notification)
        return notification

    @contextmanager
    def track_task(self, title: str, *, metadata: dict[str, Any] | None = None) -> Iterator[None]:
        """Announce *title* as started, then as finished or failed."""
        extra = dict(metadata or {})
        self.publish(Notification(title, f"{title} started", NotificationLevel.INFO, extra))
        try:
            yield
        except Exception as exc:
            self.report_failure(title, exc, metadata=extra)
            raise
        self.publish(Notification(title, f"{title} finished", NotificationLevel.SUCCESS, extra))


notification_center = NotificationCenter()


__all__ = [
    "Notification",
    "NotificationCenter",
    "NotificationLevel",
    "notification_center",
]
