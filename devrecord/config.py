"""Configuration for the devrecord MCP server.

Paths are resolved once at startup from, in priority order, an explicit
argument (CLI flag), an environment variable, then a packaged default. The
resolved values are passed into the components that need them; nothing
inspects the runtime layout after startup.
"""

import os
from pathlib import Path
from typing import Optional, Union

from devrecord.config_docs import (
    DEFAULT_DATA_DIR,
    DEFAULT_LOG_LEVEL,
    ENV_DATA_DIR,
    ENV_DESCRIPTIONS_FILE,
    ENV_LOG_LEVEL,
    ENV_RECORDS_DIR,
    ENV_TEMPLATES_DIR,
)

PACKAGE_DIR = Path(__file__).parent
BUNDLED_TEMPLATES_DIR = PACKAGE_DIR / "content" / "templates"


class Config:
    """Process-wide path configuration with a test-mode override."""

    _test_mode: bool = False
    _test_data_dir: Optional[Path] = None

    @classmethod
    def set_test_mode(cls, data_dir: Union[str, Path]) -> None:
        cls._test_mode = True
        cls._test_data_dir = Path(data_dir)

    @classmethod
    def clear_test_mode(cls) -> None:
        cls._test_mode = False
        cls._test_data_dir = None

    @classmethod
    def is_test_mode(cls) -> bool:
        return cls._test_mode

    @classmethod
    def get_data_dir(cls) -> Path:
        if cls._test_mode and cls._test_data_dir is not None:
            return cls._test_data_dir
        return Path(os.environ.get(ENV_DATA_DIR, DEFAULT_DATA_DIR))

    @classmethod
    def get_templates_dir(cls, override: Optional[str] = None) -> Path:
        if override:
            return Path(override)
        from_env = os.environ.get(ENV_TEMPLATES_DIR)
        if from_env:
            return Path(from_env)
        return BUNDLED_TEMPLATES_DIR

    @classmethod
    def get_records_dir(cls, override: Optional[str] = None) -> Path:
        if override:
            return Path(override)
        from_env = os.environ.get(ENV_RECORDS_DIR)
        if from_env:
            return Path(from_env)
        return cls.get_data_dir() / "records"

    @classmethod
    def get_descriptions_file(cls, override: Optional[str] = None) -> Optional[Path]:
        value = override or os.environ.get(ENV_DESCRIPTIONS_FILE)
        return Path(value) if value else None

    @classmethod
    def get_log_level(cls, override: Optional[str] = None) -> str:
        return (override or os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()

