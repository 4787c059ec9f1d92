"""Configuration helpers for Sticky Prompts.

Updates: v0.2.0 - 2026-10-15 - Expose the JSON configuration source.
Updates: v0.1.0 - 2026-10-11 - Expose settings loader and configuration error types.
"""

from .settings import (
    APP_NAME,
    DEFAULT_STORAGE_FILENAME,
    JsonConfigSettingsSource,
    SettingsError,
    StickyPromptsSettings,
    default_data_dir,
    load_settings,
)

__all__ = [
    "APP_NAME",
    "DEFAULT_STORAGE_FILENAME",
    "JsonConfigSettingsSource",
    "SettingsError",
    "StickyPromptsSettings",
    "default_data_dir",
    "load_settings",
]
