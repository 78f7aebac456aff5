"""Centralized configuration documentation and defaults for the devrecord service.

This module provides a comprehensive overview of all configuration options
and their environment variable mappings.
"""

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================

# Data & Storage
# --------------
# DEVRECORD_DATA_DIR: Base directory for persistent data (default: ./data)
#   Used for: records output directory
#
# DEVRECORD_TEMPLATES_DIR: Directory holding the *.md templates
#   (default: templates bundled with the package)
#
# DEVRECORD_RECORDS_DIR: Records output directory, created at startup
#   (default: {DATA_DIR}/records)
#
# Catalog
# -------
# DEVRECORD_DESCRIPTIONS_FILE: Optional YAML file mapping template names to
#   descriptions, merged over the built-in table
#
# Development & Testing
# ---------------------
# DEVRECORD_LOG_LEVEL: Logging verbosity (default: INFO)
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL

ENV_DATA_DIR = "DEVRECORD_DATA_DIR"
ENV_TEMPLATES_DIR = "DEVRECORD_TEMPLATES_DIR"
ENV_RECORDS_DIR = "DEVRECORD_RECORDS_DIR"
ENV_DESCRIPTIONS_FILE = "DEVRECORD_DESCRIPTIONS_FILE"
ENV_LOG_LEVEL = "DEVRECORD_LOG_LEVEL"

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

SERVER_NAME = "devrecord-server"
SERVER_VERSION = "1.0.0"

DEFAULT_DATA_DIR = "./data"
DEFAULT_LOG_LEVEL = "INFO"

# Catalog defaults
DEFAULT_TEMPLATE_EXTENSION = ".md"
DEFAULT_FALLBACK_DESCRIPTION = "通用记录模板"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# =============================================================================
# CONFIGURATION HELPER FUNCTIONS
# =============================================================================


def get_config_summary() -> dict:
    """Get a summary of current configuration from environment.

    Returns:
        Dictionary with current configuration values
    """
    from devrecord.config import Config

    descriptions_file = Config.get_descriptions_file()
    return {
        "data_dir": str(Config.get_data_dir()),
        "templates_dir": str(Config.get_templates_dir()),
        "records_dir": str(Config.get_records_dir()),
        "descriptions_file": str(descriptions_file) if descriptions_file else None,
        "test_mode": Config.is_test_mode(),
        "log_level": Config.get_log_level(),
    }


def validate_configuration() -> tuple[bool, list[str]]:
    """Validate current configuration for completeness and consistency.

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    from devrecord.config import Config

    errors = []

    templates_dir = Config.get_templates_dir()
    if not templates_dir.is_dir():
        errors.append(f"Templates directory not found: {templates_dir}")

    descriptions_file = Config.get_descriptions_file()
    if descriptions_file is not None and not descriptions_file.is_file():
        errors.append(f"Descriptions file not found: {descriptions_file}")

    log_level = Config.get_log_level()
    if log_level not in VALID_LOG_LEVELS:
        errors.append(f"{ENV_LOG_LEVEL}='{log_level}' is not one of {', '.join(VALID_LOG_LEVELS)}")

    return len(errors) == 0, errors


if __name__ == "__main__":
    import json
    import sys

    print(json.dumps(get_config_summary(), indent=2, ensure_ascii=False))
    is_valid, errors = validate_configuration()
    if is_valid:
        print("Configuration is valid")
    else:
        print("Configuration errors:")
        for error in errors:
            print(f"   - {error}")
        sys.exit(1)
