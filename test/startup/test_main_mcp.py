"""Tests for the stdio entrypoint's startup handling."""
from __future__ import annotations

from pathlib import Path

import pytest

from devrecord import main_mcp
from devrecord.mcp_server import state


def test_records_dir_failure_exits_non_zero(monkeypatch, tmp_path: Path, templates_dir: Path) -> None:
    blocked = tmp_path / "records"
    blocked.write_text("file in the way", encoding="utf-8")
    ran = []

    async def fake_run_stdio() -> None:
        ran.append(True)

    monkeypatch.setattr(main_mcp, "run_stdio", fake_run_stdio)

    code = main_mcp.main(["--templates-dir", str(templates_dir), "--records-dir", str(blocked)])

    assert code == 1
    assert ran == []


def test_malformed_descriptions_file_exits_non_zero(monkeypatch, tmp_path: Path, templates_dir: Path) -> None:
    descriptions = tmp_path / "descriptions.yaml"
    descriptions.write_text("- not\n- a mapping\n", encoding="utf-8")
    monkeypatch.setattr(main_mcp, "run_stdio", pytest.fail)

    code = main_mcp.main(
        [
            "--templates-dir",
            str(templates_dir),
            "--records-dir",
            str(tmp_path / "records"),
            "--descriptions-file",
            str(descriptions),
        ]
    )

    assert code == 1


def test_transport_failure_exits_non_zero(monkeypatch, tmp_path: Path, templates_dir: Path) -> None:
    async def broken_run_stdio() -> None:
        raise OSError("stdin closed")

    monkeypatch.setattr(main_mcp, "run_stdio", broken_run_stdio)

    code = main_mcp.main(["--templates-dir", str(templates_dir), "--records-dir", str(tmp_path / "records")])

    assert code == 1


def test_successful_run_wires_components(monkeypatch, tmp_path: Path, templates_dir: Path) -> None:
    seen = {}

    async def fake_run_stdio() -> None:
        seen["components"] = state.get_components()

    monkeypatch.setattr(main_mcp, "run_stdio", fake_run_stdio)
    records_dir = tmp_path / "records"

    code = main_mcp.main(
        ["--templates-dir", str(templates_dir), "--records-dir", str(records_dir), "--log-level", "debug"]
    )

    assert code == 0
    assert records_dir.is_dir()
    assert seen["components"].template_catalog.list_template_names() == ["meeting-record"]


def test_invalid_log_level_from_environment(monkeypatch, tmp_path: Path, templates_dir: Path) -> None:
    monkeypatch.setenv("DEVRECORD_LOG_LEVEL", "chatty")
    monkeypatch.setattr(main_mcp, "run_stdio", pytest.fail)

    assert main_mcp.main(["--templates-dir", str(templates_dir)]) == 1
