"""Qt list model that mirrors a prompt collection for tile views.

Updates:
  v0.2.0 - 2026-10-17 - Translate collection change events into row notifications.
  v0.1.0 - 2026-10-16 - Expose prompt titles, colours, and content through Qt roles.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import (
    QAbstractListModel,
    QByteArray,
    QModelIndex,
    QObject,
    QPersistentModelIndex,
    Qt,
)
from PySide6.QtGui import QColor

from core.collection import CollectionEvent, CollectionEventKind
from core.editor import parse_hex_color

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from core.collection import CollectionSubscription, PromptCollection
    from models.prompt_entry import PromptEntry

FALLBACK_COLOR = "#808080"


def color_for_hex(value: str) -> QColor:
    """Return a QColor for *value*, falling back to grey for unparsable input."""
    parsed = parse_hex_color(value)
    if parsed is None:
        return QColor(FALLBACK_COLOR)
    alpha, red, green, blue = parsed
    return QColor(red, green, blue, alpha)


class PromptListModel(QAbstractListModel):
    """List model exposing prompt tiles and following collection changes."""

    ContentRole = Qt.ItemDataRole.UserRole + 1
    ColorHexRole = Qt.ItemDataRole.UserRole + 2
    LastUsedRole = Qt.ItemDataRole.UserRole + 3
    EntryRole = Qt.ItemDataRole.UserRole + 4

    def __init__(self, collection: PromptCollection, parent: QObject | None = None) -> None:
        """Snapshot *collection* and subscribe to its change events."""
        super().__init__(parent)
        self._collection = collection
        self._prompts: list[PromptEntry] = list(collection.prompts)
        self._subscription: CollectionSubscription | None = collection.subscribe(
            self._on_collection_event
        )

    def rowCount(  # noqa: N802 - Qt API
        self,
        parent: QModelIndex | QPersistentModelIndex = QModelIndex(),
    ) -> int:
        """Return the number of prompt tiles."""
        if parent.isValid():
            return 0
        return len(self._prompts)

    def data(
        self,
        index: QModelIndex | QPersistentModelIndex,
        role: int = Qt.ItemDataRole.DisplayRole,
    ) -> object | None:
        """Return tile data for *role* at *index*."""
        if not index.isValid() or index.row() >= len(self._prompts):
            return None
        prompt = self._prompts[index.row()]
        if role in {Qt.ItemDataRole.DisplayRole, Qt.ItemDataRole.EditRole}:
            return prompt.title
        if role == Qt.ItemDataRole.ToolTipRole or role == self.ContentRole:
            return prompt.content
        if role in {Qt.ItemDataRole.DecorationRole, Qt.ItemDataRole.BackgroundRole}:
            return color_for_hex(prompt.color_hex)
        if role == self.ColorHexRole:
            return prompt.color_hex
        if role == self.LastUsedRole:
            return prompt.last_used
        if role == self.EntryRole:
            return prompt
        return None

    def roleNames(self) -> dict[int, QByteArray]:  # noqa: N802 - Qt API
        """Expose role names for QML-style bindings."""
        roles = dict(super().roleNames())
        roles[self.ContentRole] = QByteArray(b"content")
        roles[self.ColorHexRole] = QByteArray(b"colorHex")
        roles[self.LastUsedRole] = QByteArray(b"lastUsed")
        roles[self.EntryRole] = QByteArray(b"entry")
        return roles

    def prompt_at(self, row: int) -> PromptEntry | None:
        """Return the prompt at *row* when in range."""
        if 0 <= row < len(self._prompts):
            return self._prompts[row]
        return None

    def close(self) -> None:
        """Stop following the collection."""
        if self._subscription is not None:
            self._subscription.close()
            self._subscription = None

    def _on_collection_event(self, event: CollectionEvent) -> None:
        if event.kind is CollectionEventKind.RESET:
            self.beginResetModel()
            self._prompts = list(self._collection.prompts)
            self.endResetModel()
            return
        if event.entry is None:
            return
        row = event.index
        if event.kind is CollectionEventKind.INSERTED:
            self.beginInsertRows(QModelIndex(), row, row)
            self._prompts.insert(row, event.entry)
            self.endInsertRows()
        elif event.kind is CollectionEventKind.REPLACED:
            self._prompts[row] = event.entry
            model_index = self.index(row, 0)
            self.dataChanged.emit(model_index, model_index)
        elif event.kind is CollectionEventKind.REMOVED:
            self.beginRemoveRows(QModelIndex(), row, row)
            del self._prompts[row]
            self.endRemoveRows()


__all__ = ["PromptListModel", "color_for_hex"]
