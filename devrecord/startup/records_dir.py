"""Records output directory bootstrap."""

from pathlib import Path
from typing import Union

from devrecord.exceptions import StartupError
from devrecord.logger import Logger


def ensure_records_dir(records_dir: Union[str, Path], logger: Logger) -> Path:
    """Create the records directory if it is missing.

    An existing directory is left untouched.

    Raises:
        StartupError: If the path exists as a file or cannot be created.
    """
    path = Path(records_dir)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Failed to create records directory", records_dir=str(path), error=str(e))
        raise StartupError(
            f"Failed to create records directory {path}: {e}",
            details={"records_dir": str(path)},
        ) from e
    logger.debug("Records directory ready", records_dir=str(path))
    return path
