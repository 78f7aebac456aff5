"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a temporary data directory in test
mode, a logger, a temporary template directory and wired server components.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from devrecord.config import Config
from devrecord.logger import DefaultLogger, Logger
from devrecord.mcp_server import state
from devrecord.mcp_server.components import ServerComponents, initialize_components
from devrecord.templates import TemplateCatalog

MEETING_RECORD_CONTENT = "# 会议记录\r\n\r\n- **会议主题**：\r\n- **参会人员**：\r\n\r\n## 行动项\r\n"
MEETING_RECORD_DESCRIPTION = "会议记录模板 - 用于记录会议内容、决策和行动项"


@pytest.fixture(scope="function", autouse=True)
def test_data_dir(tmp_path):
    """
    Automatically provide a temporary data directory for each test

    This fixture:
    - Creates a unique temporary directory for each test
    - Configures devrecord.config to use this directory
    - Clears any server components wired by the test
    """
    test_dir = tmp_path / "devrecord_test_data"
    test_dir.mkdir(parents=True, exist_ok=True)

    Config.set_test_mode(test_dir)

    yield test_dir

    Config.clear_test_mode()
    state.set_components(None)


@pytest.fixture
def logger() -> Logger:
    """Provide logger for tests."""
    return DefaultLogger("devrecord.test")


@pytest.fixture
def templates_dir(tmp_path) -> Path:
    """Template directory holding one Markdown template and one non-template file."""
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "meeting-record.md").write_bytes(MEETING_RECORD_CONTENT.encode("utf-8"))
    (directory / "notes.txt").write_text("not a template", encoding="utf-8")
    return directory


@pytest.fixture
def empty_templates_dir(tmp_path) -> Path:
    directory = tmp_path / "empty_templates"
    directory.mkdir()
    return directory


@pytest.fixture
def catalog(templates_dir: Path, logger: Logger) -> TemplateCatalog:
    return TemplateCatalog(templates_dir=templates_dir, logger=logger)


@pytest.fixture
def components(templates_dir: Path, test_data_dir: Path, logger: Logger) -> ServerComponents:
    """Wire server components against the temporary template directory."""
    wired = initialize_components(
        templates_dir=templates_dir,
        records_dir=test_data_dir / "records",
        logger=logger,
    )
    state.set_components(wired)
    return wired
