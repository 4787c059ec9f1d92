"""Tests for atomic JSON prompt storage and its seed fallbacks."""

from __future__ import annotations

import json
import threading
import time
import uuid
from pathlib import Path

import pytest

import core.storage as storage_module
from core.exceptions import PromptStorageError
from core.storage import BUNDLED_SEED_PATH, PromptStorage, default_prompts
from models.prompt_entry import PromptEntry

DEFAULT_TITLES = [
    "Code Review",
    "Explain Simply",
    "Debug Helper",
    "Refactor Request",
    "Documentation",
    "Test Cases",
]


def _entries(*titles: str) -> list[PromptEntry]:
    return [PromptEntry.create(title, f"{title} body", "#3F51B5") for title in titles]


def _missing_seed(tmp_path: Path) -> Path:
    return tmp_path / "no-seed.json"


def test_save_then_load_preserves_order_and_fields(tmp_path: Path) -> None:
    storage = PromptStorage(tmp_path / "prompts.json")
    prompts = _entries("Zeta", "Alpha", "Mu")

    storage.save(prompts)

    assert storage.load() == prompts


def test_save_writes_pretty_printed_camel_case_array(tmp_path: Path) -> None:
    storage = PromptStorage(tmp_path / "prompts.json")
    prompts = _entries("Only")

    storage.save(prompts)

    raw = storage.storage_path.read_text(encoding="utf-8")
    assert raw.startswith("[\n  {")
    data = json.loads(raw)
    assert isinstance(data, list)
    assert set(data[0]) == {"id", "title", "content", "colorHex", "lastUsed"}
    assert not storage.temp_path.exists()


def test_save_preserves_non_ascii_text(tmp_path: Path) -> None:
    storage = PromptStorage(tmp_path / "prompts.json")
    prompt = PromptEntry.create("Zażółć", "Übersetze bitte ✓", "#4CAF50")

    storage.save([prompt])

    assert "Zażółć" in storage.storage_path.read_text(encoding="utf-8")
    assert storage.load() == [prompt]


def test_save_creates_missing_parent_directories(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "deeper" / "prompts.json"

    storage = PromptStorage(target)
    storage.save(_entries("One"))

    assert target.is_file()


def test_failed_replace_keeps_previous_file_and_removes_temp(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    storage = PromptStorage(tmp_path / "prompts.json")
    original = _entries("Original")
    storage.save(original)
    before = storage.storage_path.read_bytes()

    def _failing_replace(src: object, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(storage_module.os, "replace", _failing_replace)

    with pytest.raises(PromptStorageError, match="disk full"):
        storage.save(_entries("Replacement", "Another"))

    monkeypatch.undo()
    assert storage.storage_path.read_bytes() == before
    assert not storage.temp_path.exists()
    assert storage.load() == original


def test_failed_temp_write_raises_and_keeps_previous_file(tmp_path: Path) -> None:
    storage = PromptStorage(tmp_path / "prompts.json")
    original = _entries("Original")
    storage.save(original)
    storage.temp_path.mkdir()

    with pytest.raises(PromptStorageError):
        storage.save(_entries("Replacement"))

    assert storage.load() == original


def test_first_run_without_seed_file_uses_builtin_defaults(tmp_path: Path) -> None:
    storage = PromptStorage(tmp_path / "prompts.json", seed_path=_missing_seed(tmp_path))

    prompts = storage.load()

    assert [prompt.title for prompt in prompts] == DEFAULT_TITLES
    assert storage.storage_path.is_file()
    assert storage.load() == prompts


def test_first_run_uses_bundled_seed_with_stable_ids(tmp_path: Path) -> None:
    storage = PromptStorage(tmp_path / "prompts.json")

    prompts = storage.load()

    assert storage.seed_path == BUNDLED_SEED_PATH
    assert [prompt.title for prompt in prompts] == DEFAULT_TITLES
    assert prompts[0].id == uuid.UUID("6f1c2a9e-3b4d-4e8a-9c1f-0a2b3c4d5e01")
    assert PromptStorage(tmp_path / "other.json").load() == prompts


def test_custom_seed_file_is_used_for_first_run(tmp_path: Path) -> None:
    seed_file = tmp_path / "seed.json"
    seed_prompts = _entries("Seeded")
    seed_file.write_text(json.dumps([p.to_record() for p in seed_prompts]), encoding="utf-8")
    storage = PromptStorage(tmp_path / "data" / "prompts.json", seed_path=seed_file)

    assert storage.load() == seed_prompts
    assert json.loads(storage.storage_path.read_text(encoding="utf-8"))[0]["title"] == "Seeded"


@pytest.mark.parametrize(
    "contents",
    [
        "{not json",
        "null",
        '{"prompts": []}',
        '[{"id": "x"}]',
        "",
    ],
)
def test_unreadable_storage_falls_back_to_seed_without_touching_file(
    tmp_path: Path,
    contents: str,
) -> None:
    path = tmp_path / "prompts.json"
    path.write_text(contents, encoding="utf-8")
    storage = PromptStorage(path, seed_path=_missing_seed(tmp_path))

    prompts = storage.load()

    assert [prompt.title for prompt in prompts] == DEFAULT_TITLES
    assert path.read_text(encoding="utf-8") == contents


def test_invalid_utf8_storage_falls_back_to_seed(tmp_path: Path) -> None:
    path = tmp_path / "prompts.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    storage = PromptStorage(path, seed_path=_missing_seed(tmp_path))

    assert [prompt.title for prompt in storage.load()] == DEFAULT_TITLES


_OUT_OF_RANGE_RECORD = json.dumps(
    [
        {
            "id": "6f1c2a9e-3b4d-4e8a-9c1f-0a2b3c4d5e01",
            "title": "Ancient",
            "content": "Body",
            "colorHex": "#4CAF50",
            "lastUsed": "0001-01-01T00:00:00+01:00",
        }
    ]
)
_HOSTILE_DOCUMENTS = {
    "oversized-number": "[" + "9" * 5000 + "]",
    "deep-nesting": "[" * 100_000 + "]" * 100_000,
    "out-of-range-timestamp": _OUT_OF_RANGE_RECORD,
}


@pytest.mark.parametrize("contents", _HOSTILE_DOCUMENTS.values(), ids=_HOSTILE_DOCUMENTS.keys())
def test_hostile_storage_file_falls_back_to_defaults(tmp_path: Path, contents: str) -> None:
    path = tmp_path / "prompts.json"
    path.write_text(contents, encoding="utf-8")
    storage = PromptStorage(path, seed_path=_missing_seed(tmp_path))

    prompts = storage.load()

    assert [prompt.title for prompt in prompts] == DEFAULT_TITLES
    assert path.read_text(encoding="utf-8") == contents


@pytest.mark.parametrize("contents", _HOSTILE_DOCUMENTS.values(), ids=_HOSTILE_DOCUMENTS.keys())
def test_hostile_seed_file_falls_back_to_defaults(tmp_path: Path, contents: str) -> None:
    seed_file = tmp_path / "seed.json"
    seed_file.write_text(contents, encoding="utf-8")
    storage = PromptStorage(tmp_path / "prompts.json", seed_path=seed_file)

    prompts = storage.load()

    assert [prompt.title for prompt in prompts] == DEFAULT_TITLES
    assert storage.load() == prompts


def test_corrupt_seed_file_falls_back_to_defaults(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    seed_file = tmp_path / "seed.json"
    seed_file.write_text("[1, 2, 3]", encoding="utf-8")
    storage = PromptStorage(tmp_path / "prompts.json", seed_path=seed_file)

    with caplog.at_level("WARNING", logger="sticky_prompts.storage"):
        prompts = storage.load()

    assert [prompt.title for prompt in prompts] == DEFAULT_TITLES
    assert "Seed file" in caplog.text


def test_empty_array_is_a_valid_collection(tmp_path: Path) -> None:
    storage = PromptStorage(tmp_path / "prompts.json")
    storage.save([])

    assert storage.load() == []


def test_repeated_loads_return_equal_collections(tmp_path: Path) -> None:
    storage = PromptStorage(tmp_path / "prompts.json", seed_path=_missing_seed(tmp_path))

    first = storage.load()
    second = storage.load()

    assert first == second


def test_first_run_save_failure_still_returns_seed(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    storage = PromptStorage(tmp_path / "prompts.json", seed_path=_missing_seed(tmp_path))

    def _failing_replace(src: object, dst: object) -> None:
        raise OSError("read-only filesystem")

    monkeypatch.setattr(storage_module.os, "replace", _failing_replace)

    with caplog.at_level("ERROR", logger="sticky_prompts.storage"):
        prompts = storage.load()

    assert [prompt.title for prompt in prompts] == DEFAULT_TITLES
    assert not storage.storage_path.exists()
    assert not storage.temp_path.exists()
    assert "Unable to persist seed prompts" in caplog.text


def test_default_prompts_are_fresh_records() -> None:
    first = default_prompts()
    second = default_prompts()

    assert [prompt.title for prompt in first] == DEFAULT_TITLES
    assert {prompt.id for prompt in first}.isdisjoint({prompt.id for prompt in second})


def test_instances_sharing_a_path_serialise_file_access(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    path = tmp_path / "prompts.json"
    first = PromptStorage(path)
    second = PromptStorage(path)
    active = 0
    overlaps: list[int] = []
    counter_lock = threading.Lock()
    real_replace = storage_module.os.replace

    def _slow_replace(src: object, dst: object) -> None:
        nonlocal active
        with counter_lock:
            active += 1
            overlaps.append(active)
        time.sleep(0.01)
        real_replace(src, dst)
        with counter_lock:
            active -= 1

    monkeypatch.setattr(storage_module.os, "replace", _slow_replace)
    batches = [_entries(f"A{i}") for i in range(5)] + [_entries(f"B{i}") for i in range(5)]

    def _save(storage: PromptStorage, prompts: list[PromptEntry]) -> None:
        storage.save(prompts)
        assert storage.load()

    threads = [
        threading.Thread(target=_save, args=(first if i % 2 else second, batch))
        for i, batch in enumerate(batches)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert overlaps and max(overlaps) == 1
    final = first.load()
    assert final in batches
