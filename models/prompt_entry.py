"""Prompt entry data model and JSON record helpers.

Updates:
  v0.4.0 - 2026-10-18 - Reject unconvertible timestamps, stop marks at the latest moment,
                         and normalise last_used passed to with_changes.
  v0.3.0 - 2026-10-14 - Guarantee strictly increasing last-used timestamps on repeated marks.
  v0.2.0 - 2026-10-12 - Validate record shape and raise PromptFormatError on mismatches.
  v0.1.0 - 2026-10-10 - Initial PromptEntry dataclass with camelCase serialization.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, replace
from datetime import UTC, datetime, timedelta
from typing import Any

DEFAULT_COLOR = "#4CAF50"

AVAILABLE_COLORS: tuple[str, ...] = (
    "#4CAF50",  # green
    "#2196F3",  # blue
    "#F44336",  # red
    "#9C27B0",  # purple
    "#FF9800",  # orange
    "#00BCD4",  # cyan
    "#E91E63",  # pink
    "#FFEB3B",  # yellow
    "#795548",  # brown
    "#607D8B",  # blue grey
)

_RECORD_KEYS: tuple[str, ...] = ("id", "title", "content", "colorHex", "lastUsed")
_TIMESTAMP_STEP = timedelta(microseconds=1)
_LATEST_TIMESTAMP = datetime.max.replace(tzinfo=UTC)


class PromptFormatError(ValueError):
    """Raised when a stored prompt payload does not match the expected shape."""


def _utc_now() -> datetime:
    """Return an aware UTC timestamp."""
    return datetime.now(UTC)


def _ensure_uuid(value: Any) -> uuid.UUID:
    """Parse UUID strings, raising PromptFormatError for anything else."""
    if isinstance(value, uuid.UUID):
        return value
    if not isinstance(value, str):
        raise PromptFormatError(f"id must be a string, got {type(value).__name__}")
    try:
        return uuid.UUID(value)
    except ValueError as exc:
        raise PromptFormatError(f"id is not a valid identifier: {value!r}") from exc


def _ensure_datetime(value: Any) -> datetime:
    """Parse ISO-8601 timestamps into aware UTC datetimes."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError as exc:
            raise PromptFormatError(f"lastUsed is not an ISO-8601 timestamp: {value!r}") from exc
    else:
        raise PromptFormatError(f"lastUsed must be a string, got {type(value).__name__}")
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(UTC)
    except OverflowError as exc:
        raise PromptFormatError(f"lastUsed is outside the supported range: {value!r}") from exc


def _require_text(record: Mapping[str, Any], key: str) -> str:
    value = record[key]
    if not isinstance(value, str):
        raise PromptFormatError(f"{key} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True, slots=True)
class PromptEntry:
    """Single stored prompt with display metadata and usage tracking.

    Instances are replaced wholesale on edit; use :meth:`with_changes` or
    :meth:`with_updated_last_used` to derive modified copies.
    """

    id: uuid.UUID
    title: str
    content: str
    color_hex: str
    last_used: datetime

    @classmethod
    def create(cls, title: str, content: str, color_hex: str = DEFAULT_COLOR) -> PromptEntry:
        """Return a new entry with a fresh identifier and the current UTC time."""
        return cls(
            id=uuid.uuid4(),
            title=title,
            content=content,
            color_hex=color_hex,
            last_used=_utc_now(),
        )

    def with_changes(self, **changes: Any) -> PromptEntry:
        """Return a copy with *changes* applied; the identifier never changes."""
        if "id" in changes:
            raise TypeError("PromptEntry.id is immutable; create a new entry instead")
        if "last_used" in changes:
            changes["last_used"] = _ensure_datetime(changes["last_used"])
        return replace(self, **changes)

    def with_updated_last_used(self, now: datetime | None = None) -> PromptEntry:
        """Return a copy whose last_used is the current UTC time.

        The new timestamp is strictly later than the current one, even when the
        system clock has not advanced since the previous mark. The one
        exception is a timestamp already at the latest representable moment,
        which is kept as is.
        """
        moment = _ensure_datetime(now) if now is not None else _utc_now()
        if moment <= self.last_used:
            if self.last_used >= _LATEST_TIMESTAMP:
                return self
            moment = self.last_used + _TIMESTAMP_STEP
        return replace(self, last_used=moment)

    def to_record(self) -> dict[str, str]:
        """Return the JSON-serialisable camelCase mapping for this entry."""
        return {
            "id": str(self.id),
            "title": self.title,
            "content": self.content,
            "colorHex": self.color_hex,
            "lastUsed": self.last_used.isoformat(),
        }

    @classmethod
    def from_record(cls, record: Any) -> PromptEntry:
        """Build an entry from a decoded JSON object.

        Raises:
            PromptFormatError: when *record* does not match the stored shape.
        """
        if not isinstance(record, Mapping):
            raise PromptFormatError(f"prompt record must be an object, got {type(record).__name__}")
        missing = [key for key in _RECORD_KEYS if key not in record]
        if missing:
            raise PromptFormatError(f"prompt record is missing keys: {', '.join(missing)}")
        return cls(
            id=_ensure_uuid(record["id"]),
            title=_require_text(record, "title"),
            content=_require_text(record, "content"),
            color_hex=_require_text(record, "colorHex"),
            last_used=_ensure_datetime(record["lastUsed"]),
        )


def prompts_to_payload(entries: Iterable[PromptEntry]) -> list[dict[str, str]]:
    """Serialise *entries* in order into a JSON-ready list."""
    return [entry.to_record() for entry in entries]


def prompts_from_payload(payload: Any) -> list[PromptEntry]:
    """Parse a decoded JSON document into an ordered list of entries."""
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes, bytearray)):
        raise PromptFormatError("prompt storage must contain a JSON array")
    return [PromptEntry.from_record(item) for item in payload]


__all__ = [
    "AVAILABLE_COLORS",
    "DEFAULT_COLOR",
    "PromptEntry",
    "PromptFormatError",
    "prompts_from_payload",
    "prompts_to_payload",
]
