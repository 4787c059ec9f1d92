"""GUI adapters for Sticky Prompts.

Only the collaborator-facing Qt model lives here; windows and dialogs are
provided by the desktop shell.

Updates: v0.1.0 - 2026-10-16 - Expose PromptListModel with a friendly PySide6 guard.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

if TYPE_CHECKING:
    from core.collection import PromptCollection


class GuiDependencyError(RuntimeError):
    """Raised when GUI adapters are requested but PySide6 is not installed."""


_MISSING_PYSIDE6_MESSAGE = (
    "PySide6 is not installed. Install the project with `pip install -e .` "
    "before using the Qt adapters."
)

try:
    from .prompt_list_model import PromptListModel, color_for_hex
except ModuleNotFoundError as exc:  # pragma: no cover - depends on installed extras
    if exc.name is None or not exc.name.startswith("PySide6"):
        raise

    def _raise_missing_pyside(_: PromptCollection, parent: object = None) -> NoReturn:
        raise GuiDependencyError(_MISSING_PYSIDE6_MESSAGE)

    def _raise_missing_color(_: str) -> NoReturn:
        raise GuiDependencyError(_MISSING_PYSIDE6_MESSAGE)

    PromptListModel = _raise_missing_pyside  # type: ignore[assignment,misc]
    color_for_hex = _raise_missing_color  # type: ignore[assignment]


__all__ = ["GuiDependencyError", "PromptListModel", "color_for_hex"]
