"""Component initialization for the MCP server.

This module centralizes construction of the objects used by tool handlers
from explicitly resolved configuration values.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from devrecord.logger import Logger
from devrecord.startup import ensure_records_dir
from devrecord.templates import TemplateCatalog


@dataclass
class ServerComponents:
    template_catalog: TemplateCatalog
    templates_dir: Path
    records_dir: Path


def initialize_components(
    *,
    templates_dir: Path,
    records_dir: Path,
    logger: Logger,
    descriptions: Optional[Mapping[str, str]] = None,
) -> ServerComponents:
    """Initialize all server components.

    Args:
            templates_dir: Directory holding the template files
            records_dir: Records output directory, created if absent
            logger: Logger
            descriptions: Template description table (built-in table if None)

    Raises:
            StartupError: If the records directory cannot be created.
    """
    ensure_records_dir(records_dir, logger)

    if not templates_dir.is_dir():
        logger.warning("Templates directory does not exist", templates_dir=str(templates_dir))

    template_catalog = TemplateCatalog(
        templates_dir=templates_dir,
        logger=logger,
        descriptions=descriptions,
    )
    logger.info(
        "Server components initialised",
        templates_dir=str(templates_dir),
        records_dir=str(records_dir),
    )
    return ServerComponents(
        template_catalog=template_catalog,
        templates_dir=templates_dir,
        records_dir=records_dir,
    )
