"""Tests for CLI runtime helpers and path descriptions."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from cli.parser import parse_args
from cli.runtime import DEFAULT_LOGGING_CONFIG, setup_logging
from cli.utils import describe_path, print_and_log


def test_setup_logging_reads_ini_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "logging.conf"
    config_path.write_text(
        "\n".join(
            [
                "[loggers]",
                "keys=root,sticky_prompts",
                "[handlers]",
                "keys=null",
                "[formatters]",
                "keys=",
                "[logger_root]",
                "level=WARNING",
                "handlers=null",
                "[logger_sticky_prompts]",
                "level=DEBUG",
                "handlers=null",
                "qualname=sticky_prompts",
                "propagate=0",
                "[handler_null]",
                "class=NullHandler",
                "args=()",
            ]
        ),
        encoding="utf-8",
    )
    root_logger = logging.getLogger()
    package_logger = logging.getLogger("sticky_prompts")
    for logger in (root_logger, package_logger):
        monkeypatch.setattr(logger, "level", logger.level)
        monkeypatch.setattr(logger, "handlers", list(logger.handlers))
        monkeypatch.setattr(logger, "propagate", logger.propagate)

    setup_logging(config_path)

    assert package_logger.level == logging.DEBUG


def test_bundled_logging_config_exists() -> None:
    repo_root = Path(__file__).resolve().parents[1]

    assert (repo_root / DEFAULT_LOGGING_CONFIG).is_file()


def test_describe_path_reports_state(tmp_path: Path) -> None:
    file_path = tmp_path / "prompts.json"
    file_path.write_text("[]", encoding="utf-8")

    assert describe_path(None, expect_directory=True) == "not set"
    assert describe_path(tmp_path, expect_directory=True).endswith("(exists)")
    assert describe_path(file_path, expect_directory=True).endswith("is not a directory)")
    assert describe_path(tmp_path, expect_directory=False).endswith("is a directory)")
    assert describe_path(tmp_path / "absent", expect_directory=False).endswith("(missing)")


def test_print_and_log_mirrors_message(
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
) -> None:
    logger = logging.getLogger("sticky_prompts.test")

    with caplog.at_level(logging.INFO, logger="sticky_prompts.test"):
        print_and_log(logger, logging.INFO, "hello")

    assert capsys.readouterr().out == "hello\n"
    assert "hello" in caplog.text


def test_parser_defaults() -> None:
    args = parse_args([])

    assert args.command is None
    assert args.logging_config is None
    assert not args.print_settings
    assert parse_args(["list", "--content"]).content is True
