"""Settings management utilities for Sticky Prompts configuration.

Updates:
  v0.2.0 - 2026-10-15 - Read optional JSON configuration ahead of environment variables.
  v0.1.0 - 2026-10-11 - Resolve per-user data directory and storage file name.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

from platformdirs import user_data_dir
from pydantic import Field, ValidationError, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

APP_NAME = "StickyPrompts"
DEFAULT_STORAGE_FILENAME = "prompts.json"
CONFIG_JSON_ENV = "STICKY_PROMPTS_CONFIG_JSON"
DEFAULT_CONFIG_PATH = Path("config") / "config.json"

_CONFIG_KEYS = ("data_dir", "storage_filename", "seed_path")

logger = logging.getLogger("sticky_prompts.settings")


def default_data_dir() -> Path:
    """Return the per-user application data directory."""
    return Path(user_data_dir(APP_NAME, appauthor=False))


class SettingsError(Exception):
    """Raised when Sticky Prompts configuration cannot be loaded or validated."""


class JsonConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source reading an optional JSON configuration file.

    ``STICKY_PROMPTS_CONFIG_JSON`` names the file explicitly and must exist;
    otherwise ``config/config.json`` relative to the working directory is used
    when present.
    """

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        explicit_path = os.getenv(CONFIG_JSON_ENV)
        if explicit_path:
            path = Path(explicit_path).expanduser()
            if not path.exists():
                raise SettingsError(f"Configuration file not found: {path}")
        else:
            path = DEFAULT_CONFIG_PATH
            if not path.exists():
                return {}
        try:
            raw_contents = path.read_text(encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem failure is env-specific
            raise SettingsError(f"Unable to read configuration file: {path}") from exc
        try:
            data = json.loads(raw_contents)
        except json.JSONDecodeError as exc:
            raise SettingsError(f"Invalid JSON in configuration file: {path}") from exc
        if not isinstance(data, Mapping):
            raise SettingsError(f"Configuration file {path} must contain a JSON object")
        mapping = cast("Mapping[str, Any]", data)
        unknown = sorted(str(key) for key in mapping if key not in _CONFIG_KEYS)
        if unknown:
            logger.warning("Ignoring unknown configuration keys in %s: %s", path, ", ".join(unknown))
        return {key: mapping[key] for key in _CONFIG_KEYS if key in mapping}


class StickyPromptsSettings(BaseSettings):
    """Application configuration sourced from JSON files or environment variables."""

    data_dir: Path = Field(
        default_factory=default_data_dir,
        description="Directory holding the prompt storage file.",
    )
    storage_filename: str = Field(
        default=DEFAULT_STORAGE_FILENAME,
        description="File name of the prompt storage document inside data_dir.",
    )
    seed_path: Path | None = Field(
        default=None,
        description="Optional seed file overriding the bundled starter prompts.",
    )

    model_config = SettingsConfigDict(
        env_prefix="STICKY_PROMPTS_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("data_dir", mode="before")
    def _normalise_data_dir(cls, value: Any) -> Path:
        """Expand user-relative paths and coerce values to Path instances."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return default_data_dir()
        return Path(str(value).strip()).expanduser().resolve()

    @field_validator("seed_path", mode="before")
    def _normalise_seed_path(cls, value: Any) -> Path | None:
        if value in (None, ""):
            return None
        return Path(str(value).strip()).expanduser().resolve()

    @field_validator("storage_filename", mode="before")
    def _validate_storage_filename(cls, value: Any) -> str:
        """Require a bare file name without directory components."""
        if value is None:
            return DEFAULT_STORAGE_FILENAME
        name = str(value).strip()
        if not name:
            return DEFAULT_STORAGE_FILENAME
        if name in {".", ".."} or Path(name).name != name or "\\" in name:
            raise ValueError("storage_filename must be a plain file name")
        return name

    @property
    def storage_path(self) -> Path:
        """Return the full path of the prompt storage file."""
        return self.data_dir / self.storage_filename

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Define configuration source precedence.

        Order (highest → lowest):
            1. Explicit keyword arguments (e.g. load_settings(data_dir="...")).
            2. JSON configuration file.
            3. Environment variables.
            4. File secrets.
        """
        return (
            init_settings,
            JsonConfigSettingsSource(settings_cls),
            env_settings,
            file_secret_settings,
        )


def load_settings(**overrides: Any) -> StickyPromptsSettings:
    """Return validated settings, raising SettingsError on failure."""
    try:
        return StickyPromptsSettings(**overrides)
    except SettingsError:
        raise
    except ValidationError as exc:
        raise SettingsError("Invalid Sticky Prompts configuration") from exc


__all__ = [
    "APP_NAME",
    "DEFAULT_STORAGE_FILENAME",
    "JsonConfigSettingsSource",
    "SettingsError",
    "StickyPromptsSettings",
    "default_data_dir",
    "load_settings",
]
