"""Editor draft that turns user input into validated prompt entries.

Updates:
  v0.2.0 - 2026-10-16 - Add hex colour parsing shared with the Qt list model.
  v0.1.0 - 2026-10-13 - Introduce PromptDraft for add/edit flows.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from models.prompt_entry import AVAILABLE_COLORS, DEFAULT_COLOR, PromptEntry

from .exceptions import PromptValidationError

_HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def is_valid_color(value: object) -> bool:
    """Return True when *value* is a ``#RRGGBB`` or ``#AARRGGBB`` string."""
    return isinstance(value, str) and _HEX_COLOR_PATTERN.fullmatch(value.strip()) is not None


def parse_hex_color(value: object) -> tuple[int, int, int, int] | None:
    """Return ``(alpha, red, green, blue)`` for *value*, or None when unparsable."""
    if not is_valid_color(value):
        return None
    digits = str(value).strip()[1:]
    if len(digits) == 6:
        digits = "FF" + digits
    alpha, red, green, blue = (int(digits[i : i + 2], 16) for i in range(0, 8, 2))
    return alpha, red, green, blue


@dataclass(slots=True)
class PromptDraft:
    """Mutable editor state for creating or editing a prompt.

    Drafts built with :meth:`for_entry` keep the original identifier so the
    resulting entry replaces the existing prompt instead of adding a new one.
    """

    title: str = ""
    content: str = ""
    color: str = DEFAULT_COLOR
    original: PromptEntry | None = None

    @classmethod
    def for_entry(cls, entry: PromptEntry) -> PromptDraft:
        """Return a draft pre-filled from *entry* in edit mode."""
        return cls(title=entry.title, content=entry.content, color=entry.color_hex, original=entry)

    @property
    def is_edit_mode(self) -> bool:
        return self.original is not None

    @property
    def is_valid(self) -> bool:
        """Return True when both title and content contain non-whitespace text."""
        return bool(self.title.strip()) and bool(self.content.strip())

    @property
    def available_colors(self) -> tuple[str, ...]:
        return AVAILABLE_COLORS

    def select_color(self, color: str) -> None:
        """Choose *color* for the prompt tile."""
        if not is_valid_color(color):
            raise PromptValidationError(f"Unsupported colour value: {color!r}")
        self.color = color.strip()

    def to_entry(self) -> PromptEntry:
        """Return the prompt entry described by this draft.

        Raises:
            PromptValidationError: when the title or content is blank.
        """
        if not self.is_valid:
            raise PromptValidationError("Prompt title and content are required")
        title = self.title.strip()
        content = self.content.strip()
        if self.original is not None:
            return self.original.with_changes(title=title, content=content, color_hex=self.color)
        return PromptEntry.create(title, content, self.color)


__all__ = ["PromptDraft", "is_valid_color", "parse_hex_color"]
