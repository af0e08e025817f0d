"""Filesystem helpers for translated output files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

_LOGGER = logging.getLogger(__name__)


def create_file(data: str, file_path: str | Path) -> None:
    """Write text content, creating missing parent directories.

    The write is retried once after the directory chain is created. Any
    other filesystem failure propagates unchanged.

    Args:
        data: Content to write.
        file_path: Destination path, relative or absolute.

    Raises:
        OSError: If the write fails for any reason other than a missing
            directory, or fails again after the directories were created.
    """
    path = Path(file_path)
    try:
        path.write_text(data, encoding="utf-8")
    except FileNotFoundError:
        _LOGGER.info("Creating directory %s", path.parent)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(data, encoding="utf-8")


def is_file_exists(input_path: str | Path) -> bool:
    """Check whether any filesystem entry exists at a path.

    Args:
        input_path: Path to check.

    Returns:
        True if the entry exists, False if it does not.

    Raises:
        OSError: For failures other than the entry being absent.
    """
    try:
        os.stat(input_path)
    except FileNotFoundError:
        return False
    return True
