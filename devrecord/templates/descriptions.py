"""Template description table.

The built-in table covers the bundled templates. Deployments can merge in
their own descriptions from a YAML mapping file.
"""
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional

import yaml

from devrecord.exceptions import StartupError
from devrecord.logger import Logger

DEFAULT_TEMPLATE_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        "meeting-record": "会议记录模板 - 用于记录会议内容、决策和行动项",
        "project-summary": "项目总结模板 - 用于总结项目进展、问题和计划",
        "learning-notes": "学习笔记模板 - 用于记录学习内容和心得体会",
        "daily-standup": "每日站会模板 - 用于记录团队每日站会内容",
    }
)


def load_descriptions(
    path: Optional[Path],
    logger: Logger,
    base: Mapping[str, str] = DEFAULT_TEMPLATE_DESCRIPTIONS,
) -> Mapping[str, str]:
    """Return ``base`` merged with the YAML mapping in ``path``, read-only.

    Raises:
        StartupError: If the file cannot be read or is not a mapping of
            strings to strings.
    """
    merged: Dict[str, str] = dict(base)
    if path is None:
        return MappingProxyType(merged)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise StartupError(
            f"Failed to load template descriptions from {path}: {e}",
            details={"descriptions_file": str(path)},
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise StartupError(
            f"Template descriptions file {path} must map template names to description strings",
            details={"descriptions_file": str(path)},
        )

    merged.update(data)
    logger.info("Loaded template descriptions", path=str(path), overrides=len(data))
    return MappingProxyType(merged)
