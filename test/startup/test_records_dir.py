"""Tests for records directory bootstrap and component initialisation."""
from __future__ import annotations

from pathlib import Path

import pytest

from devrecord.exceptions import StartupError
from devrecord.logger import Logger
from devrecord.mcp_server.components import initialize_components
from devrecord.startup import ensure_records_dir


def test_creates_missing_directory_with_parents(tmp_path: Path, logger: Logger) -> None:
    target = tmp_path / "data" / "records"

    result = ensure_records_dir(target, logger)

    assert result == target
    assert target.is_dir()


def test_existing_directory_is_left_untouched(tmp_path: Path, logger: Logger) -> None:
    target = tmp_path / "records"
    target.mkdir()
    (target / "2024-01-01-meeting.md").write_text("kept", encoding="utf-8")

    ensure_records_dir(target, logger)

    assert (target / "2024-01-01-meeting.md").read_text(encoding="utf-8") == "kept"


def test_path_occupied_by_file_is_startup_error(tmp_path: Path, logger: Logger) -> None:
    target = tmp_path / "records"
    target.write_text("not a directory", encoding="utf-8")

    with pytest.raises(StartupError) as exc_info:
        ensure_records_dir(target, logger)

    assert exc_info.value.code == "STARTUP_FAILURE"
    assert exc_info.value.details == {"records_dir": str(target)}


def test_initialize_components_creates_records_dir(templates_dir: Path, tmp_path: Path, logger: Logger) -> None:
    records_dir = tmp_path / "out" / "records"

    components = initialize_components(templates_dir=templates_dir, records_dir=records_dir, logger=logger)

    assert records_dir.is_dir()
    assert components.template_catalog.templates_dir == templates_dir
    assert components.template_catalog.list_template_names() == ["meeting-record"]


def test_initialize_components_does_not_write_templates_dir(
    templates_dir: Path, tmp_path: Path, logger: Logger
) -> None:
    before = sorted(p.name for p in templates_dir.iterdir())

    initialize_components(templates_dir=templates_dir, records_dir=tmp_path / "records", logger=logger)

    assert sorted(p.name for p in templates_dir.iterdir()) == before
