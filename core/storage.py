"""Crash-safe JSON persistence for the prompt collection.

Updates:
  v0.5.0 - 2026-10-18 - Treat oversized numbers and deeply nested JSON as unreadable files.
  v0.4.0 - 2026-10-15 - Share one lock per storage file across PromptStorage instances.
  v0.3.0 - 2026-10-14 - Fsync temp files and remove them when the replace step fails.
  v0.2.0 - 2026-10-12 - Fall back to seed data for unreadable or mis-shaped storage files.
  v0.1.0 - 2026-10-11 - Introduce PromptStorage with atomic temp-file writes and seeding.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import TYPE_CHECKING

from models.prompt_entry import (
    PromptEntry,
    prompts_from_payload,
    prompts_to_payload,
)

from .exceptions import PromptStorageError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("sticky_prompts.storage")

DEFAULT_STORAGE_FILENAME = "prompts.json"
BUNDLED_SEED_PATH = Path(__file__).resolve().parent / "assets" / "seed_prompts.json"
TEMP_SUFFIX = ".tmp"

# ValueError includes JSONDecodeError, UnicodeDecodeError and PromptFormatError.
_UNREADABLE_ERRORS: tuple[type[Exception], ...] = (OSError, ValueError, RecursionError)

_PATH_LOCKS: dict[Path, threading.Lock] = {}
_PATH_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    """Return the process-wide lock guarding *path*."""
    with _PATH_LOCKS_GUARD:
        lock = _PATH_LOCKS.get(path)
        if lock is None:
            lock = threading.Lock()
            _PATH_LOCKS[path] = lock
        return lock


def default_prompts() -> list[PromptEntry]:
    """Return the built-in starter prompts used when no seed file is available."""
    return [
        PromptEntry.create(
            "Code Review",
            "Please review this code for bugs, performance issues, and best practices. "
            "Suggest improvements and explain your reasoning.",
            "#4CAF50",
        ),
        PromptEntry.create(
            "Explain Simply",
            "Explain the following concept in simple terms that a beginner could "
            "understand. Use analogies where helpful.",
            "#2196F3",
        ),
        PromptEntry.create(
            "Debug Helper",
            "I'm encountering an error. Please help me debug this issue. Here's the "
            "error message and relevant code:",
            "#F44336",
        ),
        PromptEntry.create(
            "Refactor Request",
            "Please refactor this code to be more readable, maintainable, and "
            "following SOLID principles:",
            "#9C27B0",
        ),
        PromptEntry.create(
            "Documentation",
            "Please generate comprehensive documentation for the following code, "
            "including purpose, parameters, return values, and usage examples:",
            "#FF9800",
        ),
        PromptEntry.create(
            "Test Cases",
            "Please generate unit test cases for the following code. Cover edge "
            "cases, error conditions, and typical usage:",
            "#00BCD4",
        ),
    ]


class PromptStorage:
    """Persist an ordered list of prompts as a single JSON document.

    Every physical file access runs inside a lock shared by all instances that
    point at the same storage file, so concurrent loads and saves never observe
    a half-written document. Saves write to a sibling ``.tmp`` file first and
    then atomically replace the primary file.
    """

    def __init__(self, storage_path: Path | str, seed_path: Path | str | None = None) -> None:
        """Resolve paths and ensure the storage directory exists."""
        self._storage_path = Path(storage_path).expanduser().resolve()
        self._seed_path = (
            Path(seed_path).expanduser().resolve() if seed_path is not None else BUNDLED_SEED_PATH
        )
        self._temp_path = self._storage_path.with_name(self._storage_path.name + TEMP_SUFFIX)
        self._lock = _lock_for(self._storage_path)
        self._storage_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def storage_path(self) -> Path:
        """Return the primary storage file location."""
        return self._storage_path

    @property
    def seed_path(self) -> Path:
        """Return the read-only seed file location."""
        return self._seed_path

    @property
    def temp_path(self) -> Path:
        """Return the transient file used during atomic saves."""
        return self._temp_path

    def load(self) -> list[PromptEntry]:
        """Return stored prompts, falling back to seed data when needed.

        A missing storage file is treated as a first run: seed data is written
        as the new storage file before being returned. A corrupt or unreadable
        storage file yields seed data without touching the file on disk.
        """
        with self._lock:
            if not self._storage_path.exists():
                seed = self._load_seed()
                logger.info(
                    "No prompt storage at %s; seeding %d prompts",
                    self._storage_path,
                    len(seed),
                )
                try:
                    self._write(seed)
                except PromptStorageError as exc:
                    logger.error("Unable to persist seed prompts: %s", exc)
                return seed

            try:
                raw_contents = self._storage_path.read_text(encoding="utf-8")
                prompts = prompts_from_payload(json.loads(raw_contents))
            except _UNREADABLE_ERRORS as exc:
                logger.warning(
                    "Prompt storage %s is unreadable (%s); falling back to seed data",
                    self._storage_path,
                    exc,
                )
                return self._load_seed()
            logger.debug("Loaded %d prompts from %s", len(prompts), self._storage_path)
            return prompts

    def save(self, prompts: Sequence[PromptEntry]) -> None:
        """Atomically replace the stored prompts with *prompts*.

        Raises:
            PromptStorageError: when the temp file cannot be written or moved
                into place. The previous storage file is left intact.
        """
        with self._lock:
            self._write(prompts)

    def _write(self, prompts: Sequence[PromptEntry]) -> None:
        """Serialise *prompts* to the temp file and replace the storage file."""
        payload = json.dumps(prompts_to_payload(prompts), indent=2, ensure_ascii=False)
        try:
            self._storage_path.parent.mkdir(parents=True, exist_ok=True)
            with self._temp_path.open("w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
        except OSError as exc:
            self._discard_temp()
            raise PromptStorageError(
                f"Unable to write prompt storage {self._temp_path}: {exc}"
            ) from exc

        try:
            os.replace(self._temp_path, self._storage_path)
        except OSError as exc:
            self._discard_temp()
            raise PromptStorageError(
                f"Unable to replace prompt storage {self._storage_path}: {exc}"
            ) from exc
        logger.debug("Saved %d prompts to %s", len(prompts), self._storage_path)

    def _discard_temp(self) -> None:
        try:
            self._temp_path.unlink(missing_ok=True)
        except OSError:  # pragma: no cover - best effort cleanup
            logger.warning("Unable to remove temporary file %s", self._temp_path)

    def _load_seed(self) -> list[PromptEntry]:
        """Return seed prompts from the bundled file or the built-in defaults."""
        if not self._seed_path.is_file():
            return default_prompts()
        try:
            raw_contents = self._seed_path.read_text(encoding="utf-8")
            return prompts_from_payload(json.loads(raw_contents))
        except _UNREADABLE_ERRORS as exc:
            logger.warning("Seed file %s is unusable (%s); using defaults", self._seed_path, exc)
            return default_prompts()


__all__ = [
    "BUNDLED_SEED_PATH",
    "DEFAULT_STORAGE_FILENAME",
    "PromptStorage",
    "default_prompts",
]
