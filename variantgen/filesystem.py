"""
Filesystem helpers for variant output directories and files.
"""

import logging
import os

from .errors import DirectoryError, DeletionError

logger = logging.getLogger(__name__)


def ensure_dir(path: str) -> str:
    """
    Create a directory and any missing parents.

    Safe to call concurrently for the same or nested paths; an existing
    directory is not an error.

    Raises:
        DirectoryError: If the directory cannot be created
    """
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise DirectoryError(f"Cannot create directory {path}: {e}", path) from e
    return path


def remove_file(path: str) -> bool:
    """
    Delete a file if it exists.

    Returns:
        True if a file was deleted, False if nothing was there

    Raises:
        DeletionError: If the file exists but cannot be deleted
    """
    try:
        os.remove(path)
    except FileNotFoundError:
        logger.debug(f"Already absent: {path}")
        return False
    except OSError as e:
        raise DeletionError(f"Cannot delete {path}: {e}", path) from e
    return True
