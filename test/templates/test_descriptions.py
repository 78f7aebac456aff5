"""Unit tests for devrecord.templates.descriptions."""
from __future__ import annotations

from pathlib import Path

import pytest

from devrecord.exceptions import StartupError
from devrecord.logger import Logger
from devrecord.templates import DEFAULT_TEMPLATE_DESCRIPTIONS, load_descriptions


def test_no_file_returns_builtin_table(logger: Logger) -> None:
    descriptions = load_descriptions(None, logger)

    assert dict(descriptions) == dict(DEFAULT_TEMPLATE_DESCRIPTIONS)


def test_file_entries_merge_over_builtin_table(tmp_path: Path, logger: Logger) -> None:
    path = tmp_path / "descriptions.yaml"
    path.write_text(
        "meeting-record: 周会记录\nretro: 迭代回顾模板\n",
        encoding="utf-8",
    )

    descriptions = load_descriptions(path, logger)

    assert descriptions["meeting-record"] == "周会记录"
    assert descriptions["retro"] == "迭代回顾模板"
    assert descriptions["daily-standup"] == DEFAULT_TEMPLATE_DESCRIPTIONS["daily-standup"]


def test_empty_file_keeps_builtin_table(tmp_path: Path, logger: Logger) -> None:
    path = tmp_path / "descriptions.yaml"
    path.write_text("", encoding="utf-8")

    assert dict(load_descriptions(path, logger)) == dict(DEFAULT_TEMPLATE_DESCRIPTIONS)


@pytest.mark.parametrize(
    "text",
    [
        "- meeting-record\n- retro\n",
        "meeting-record: 3\n",
        "meeting-record: [unclosed\n",
    ],
)
def test_malformed_file_is_startup_error(tmp_path: Path, logger: Logger, text: str) -> None:
    path = tmp_path / "descriptions.yaml"
    path.write_text(text, encoding="utf-8")

    with pytest.raises(StartupError) as exc_info:
        load_descriptions(path, logger)

    assert exc_info.value.details == {"descriptions_file": str(path)}


def test_missing_file_is_startup_error(tmp_path: Path, logger: Logger) -> None:
    with pytest.raises(StartupError):
        load_descriptions(tmp_path / "absent.yaml", logger)
