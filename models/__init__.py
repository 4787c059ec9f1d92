"""Data models for Sticky Prompts.

Updates: v0.2.0 - 2026-10-12 - Export PromptFormatError for storage fallbacks.
Updates: v0.1.0 - 2026-10-10 - Export PromptEntry dataclass.
"""

from .prompt_entry import (
    AVAILABLE_COLORS,
    DEFAULT_COLOR,
    PromptEntry,
    PromptFormatError,
    prompts_from_payload,
    prompts_to_payload,
)

__all__ = [
    "AVAILABLE_COLORS",
    "DEFAULT_COLOR",
    "PromptEntry",
    "PromptFormatError",
    "prompts_from_payload",
    "prompts_to_payload",
]
