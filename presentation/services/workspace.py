"""
presentation/services/workspace.py -- Output directory preparation
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from presentation.errors import DirectoryCreationError

logger = logging.getLogger(__name__)

OUTPUT_DIR_MODE = 0o700


def ensure_output_dir(output_dir: Union[str, Path]) -> Path:
    """Create output_dir (owner-only permissions) if it does not exist.

    Raises:
        DirectoryCreationError: The path exists but is not a directory, or
            it could not be created.
    """
    path = Path(output_dir)
    if path.is_dir():
        return path
    if path.exists():
        raise DirectoryCreationError(f"{path} exists and is not a directory")
    try:
        path.mkdir(mode=OUTPUT_DIR_MODE, parents=True)
    except FileExistsError as exc:
        if path.is_dir():
            return path
        raise DirectoryCreationError(f"{path} exists and is not a directory") from exc
    except OSError as exc:
        raise DirectoryCreationError(
            f"Failed to create output directory {path}: {exc.strerror or exc}"
        ) from exc
    logger.info("Created output directory %s", path)
    return path
