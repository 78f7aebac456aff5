"""Entrypoint for the devrecord MCP server (stdio transport)."""

import argparse
import asyncio
import sys
from typing import List, Optional

from devrecord.config import Config
from devrecord.config_docs import VALID_LOG_LEVELS
from devrecord.exceptions import StartupError
from devrecord.logger import Logger, session_logger
from devrecord.mcp_server import initialize_server
from devrecord.mcp_server.server import run_stdio
from devrecord.templates import load_descriptions

logger: Logger = session_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="DevRecord MCP Server - development record templates via Model Context Protocol (stdio)"
    )
    parser.add_argument(
        "--templates-dir",
        type=str,
        default=None,
        help="Path to templates directory (default: DEVRECORD_TEMPLATES_DIR or bundled templates)",
    )
    parser.add_argument(
        "--records-dir",
        type=str,
        default=None,
        help="Path to records output directory (default: DEVRECORD_RECORDS_DIR or {DATA_DIR}/records)",
    )
    parser.add_argument(
        "--descriptions-file",
        type=str,
        default=None,
        help="YAML file mapping template names to descriptions (default: DEVRECORD_DESCRIPTIONS_FILE)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Logging verbosity (default: DEVRECORD_LOG_LEVEL or INFO)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    log_level = Config.get_log_level(args.log_level)
    if log_level not in VALID_LOG_LEVELS:
        logger.critical("FATAL: Invalid log level", log_level=log_level, valid=list(VALID_LOG_LEVELS))
        return 1
    session_logger.set_level(log_level)

    templates_dir = Config.get_templates_dir(args.templates_dir)
    records_dir = Config.get_records_dir(args.records_dir)

    try:
        descriptions = load_descriptions(Config.get_descriptions_file(args.descriptions_file), logger)
        initialize_server(
            templates_dir=templates_dir,
            records_dir=records_dir,
            descriptions=descriptions,
            server_logger=logger,
        )
    except StartupError as e:
        logger.critical("FATAL: Server startup failed", error=str(e), details=e.details)
        return 1

    try:
        logger.info(
            "Starting MCP server",
            transport="stdio",
            templates_dir=str(templates_dir),
            records_dir=str(records_dir),
        )
        asyncio.run(run_stdio())
        logger.info("MCP server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Shutdown complete")
        return 0
    except Exception as e:
        logger.critical("Failed to start server", error=str(e), error_type=type(e).__name__)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
